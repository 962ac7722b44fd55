"""
Tests for reconstruction module.

Tests route reconstruction from CityNode predecessor links and route
formatting.
"""

import pytest

from src.dijkstra.exceptions import DijkstraError, PredecessorCycleError
from src.dijkstra.labels import CityNode
from src.dijkstra.reconstruction import format_route, reconstruct_route
from src.route_calculator.schemas.flight import Flight


# -------------------------
# Fixtures
# -------------------------


@pytest.fixture
def flight_a_to_b():
    """Create a sample flight from A to B."""
    return Flight("A", "B", 50, 2)


@pytest.fixture
def flight_b_to_c():
    """Create a sample flight from B to C."""
    return Flight("B", "C", 75, 3)


@pytest.fixture
def origin_only():
    """Node map after a search that discovered nothing but the origin."""
    return {"A": CityNode(best_price=0, best_duration=0)}


@pytest.fixture
def two_leg_nodes(flight_a_to_b, flight_b_to_c):
    """Node map for A -> B -> C."""
    return {
        "A": CityNode(best_price=0, best_duration=0, settled=True),
        "B": CityNode(
            best_price=50,
            best_duration=2,
            predecessor_city="A",
            predecessor_flight=flight_a_to_b,
            settled=True,
        ),
        "C": CityNode(
            best_price=125,
            best_duration=5,
            predecessor_city="B",
            predecessor_flight=flight_b_to_c,
        ),
    }


# -------------------------
# reconstruct_route tests
# -------------------------


class TestReconstructRoute:
    """Tests for reconstruct_route function."""

    def test_destination_is_origin(self, origin_only):
        """Origin has no predecessor, so the route is empty."""
        assert reconstruct_route(origin_only, "A") == []

    def test_destination_never_discovered(self, origin_only):
        """No node for the destination means no route."""
        assert reconstruct_route(origin_only, "Z") == []

    def test_single_leg(self, two_leg_nodes, flight_a_to_b):
        assert reconstruct_route(two_leg_nodes, "B") == [flight_a_to_b]

    def test_two_legs_in_travel_order(self, two_leg_nodes, flight_a_to_b, flight_b_to_c):
        assert reconstruct_route(two_leg_nodes, "C") == [flight_a_to_b, flight_b_to_c]

    def test_uses_recorded_flight_not_first_matching_pair(self, flight_a_to_b):
        """With parallel edges the exact recorded flight is returned."""
        cheaper = Flight("A", "B", 40, 9)
        nodes = {
            "A": CityNode(best_price=0, best_duration=0),
            "B": CityNode(
                best_price=40,
                best_duration=9,
                predecessor_city="A",
                predecessor_flight=cheaper,
            ),
        }

        assert reconstruct_route(nodes, "B") == [cheaper]

    def test_cycle_raises(self):
        """A corrupted chain is reported instead of looping forever."""
        ab = Flight("A", "B", -1, 0)
        ba = Flight("B", "A", -1, 0)
        nodes = {
            "A": CityNode(best_price=-2, best_duration=0, predecessor_city="B", predecessor_flight=ba),
            "B": CityNode(best_price=-1, best_duration=0, predecessor_city="A", predecessor_flight=ab),
        }

        with pytest.raises(PredecessorCycleError) as exc_info:
            reconstruct_route(nodes, "B")

        assert exc_info.value.city == "B"
        assert isinstance(exc_info.value, DijkstraError)


# -------------------------
# format_route tests
# -------------------------


class TestFormatRoute:
    """Tests for format_route function."""

    def test_empty_route(self):
        assert format_route([]) == "No route found"

    def test_lists_legs_and_totals(self, flight_a_to_b, flight_b_to_c):
        text = format_route([flight_a_to_b, flight_b_to_c])

        lines = text.splitlines()
        assert lines[0] == "A -> B ($50, 2h)"
        assert lines[1] == "B -> C ($75, 3h)"
        assert lines[2] == "Total: $125, 5h"
