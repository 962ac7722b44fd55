"""
Shared flight datasets for route calculator tests.
"""

from typing import List

import pytest

from src.route_calculator.schemas.flight import Flight


def flights_from_list(data) -> List[Flight]:
    """Build Flight records from (origin, destination, price, hours) rows."""
    return [Flight(*row) for row in data]


@pytest.fixture
def direct_is_cheaper() -> List[Flight]:
    """BNC -> NYC direct (550) beats BNC -> ORY -> NYC (600)."""
    return flights_from_list(
        [
            ("BNC", "NYC", 550, 3),
            ("BNC", "ORY", 100, 2),
            ("ORY", "NYC", 500, 3),
        ]
    )


@pytest.fixture
def equal_price_two_stops() -> List[Flight]:
    """Two routes at 600; via ORY takes 5h, via LON takes 6h."""
    return flights_from_list(
        [
            ("BNC", "LON", 100, 3),
            ("BNC", "ORY", 100, 2),
            ("LON", "NYC", 500, 3),
            ("ORY", "NYC", 500, 3),
        ]
    )


@pytest.fixture
def three_hop() -> List[Flight]:
    """Ten flights; cheapest BNC -> HND is BNC -> PAR -> MNL -> HND (600, 14h)."""
    return flights_from_list(
        [
            ("BNC", "MAD", 10, 2),
            ("BNC", "PAR", 50, 2),
            ("PAR", "LIS", 10, 2),
            ("PAR", "MNL", 50, 2),
            ("BNC", "SVQ", 100, 2),
            ("MNL", "HND", 500, 10),
            ("MAD", "LON", 10, 2),
            ("WAW", "NYC", 500, 5),
            ("SVQ", "WAW", 500, 5),
            ("NYC", "HND", 500, 5),
        ]
    )
