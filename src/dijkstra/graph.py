"""
Flight graph construction.

Cities are nodes, flights are directed edges. The adjacency index is
built once per query from the flat flight list so that each expansion
step reads only the outgoing flights of one city instead of scanning
every flight.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Tuple

from src.route_calculator.schemas.flight import Flight

# Shared result for cities without departures; never mutated.
_NO_FLIGHTS: Tuple[Flight, ...] = ()


def build_adjacency(flights: Iterable[Flight]) -> Dict[str, List[Flight]]:
    """
    Group flights by origin city.

    Parallel edges (several flights between the same pair of cities)
    are all kept, in input order.

    Args:
        flights: Flat collection of direct flights.

    Returns:
        Dict mapping origin city to its outgoing flights.

    Example:
        >>> adj = build_adjacency([
        ...     Flight("BCN", "MAD", 10, 2),
        ...     Flight("BCN", "PAR", 50, 2),
        ...     Flight("PAR", "MNL", 50, 2),
        ... ])
        >>> [f.destination_city for f in adj["BCN"]]
        ['MAD', 'PAR']
    """
    adjacency: Dict[str, List[Flight]] = defaultdict(list)
    for flight in flights:
        adjacency[flight.origin_city].append(flight)
    return dict(adjacency)


@dataclass(frozen=True)
class FlightGraph:
    """
    Read-only flight graph for a single catalog snapshot.

    Attributes:
        adjacency: Dict mapping origin city to outgoing flights.
        cities: Every city appearing as an origin or a destination.
        routes: All (origin, destination) pairs with a direct flight.
        flight_count: Number of flights (edges) in the graph.
    """

    adjacency: Dict[str, List[Flight]]
    cities: frozenset[str]
    routes: frozenset[Tuple[str, str]]
    flight_count: int

    @classmethod
    def from_flights(cls, flights: Iterable[Flight]) -> "FlightGraph":
        flights = list(flights)
        adjacency = build_adjacency(flights)
        cities = frozenset(
            {f.origin_city for f in flights} | {f.destination_city for f in flights}
        )
        routes = frozenset((f.origin_city, f.destination_city) for f in flights)
        return cls(
            adjacency=adjacency,
            cities=cities,
            routes=routes,
            flight_count=len(flights),
        )

    def outgoing(self, city: str) -> Sequence[Flight]:
        """Flights departing from city (empty if the city has none)."""
        return self.adjacency.get(city, _NO_FLIGHTS)

    def has_city(self, city: str) -> bool:
        """Check if city appears anywhere in the graph."""
        return city in self.cities

    def has_route(self, origin: str, destination: str) -> bool:
        """Check if a direct flight exists."""
        return (origin, destination) in self.routes

    @property
    def is_empty(self) -> bool:
        return self.flight_count == 0
