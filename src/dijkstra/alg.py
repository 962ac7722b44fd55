"""
Price-ordered Dijkstra search for the cheapest flight route.

Key points:
- Single heap ordered by accumulated price only; duration is compared
  solely when relaxing an edge, never as a heap key
- Per-city state lives in one CityNode record (arena keyed by city)
- Settled cities are skipped on pop, so each city is expanded once
- Search stops as soon as the destination is popped
"""

import heapq
import itertools
import logging
from typing import Dict, List, Optional, Sequence, Tuple

from src.route_calculator.schemas.flight import Flight

from .graph import FlightGraph
from .labels import CityNode
from .reconstruction import reconstruct_route

logger = logging.getLogger(__name__)


def search(
    graph: FlightGraph,
    origin_city: str,
    destination_city: Optional[str] = None,
) -> Dict[str, CityNode]:
    """
    Run the relaxation loop from origin_city.

    Args:
        graph: Adjacency-indexed flight graph.
        origin_city: City the search starts from.
        destination_city: Stop as soon as this city is popped. If None,
            the whole reachable graph is settled.

    Returns:
        Dict mapping every discovered city to its CityNode. The origin
        is always present with price 0 and no predecessor.
    """
    nodes: Dict[str, CityNode] = {
        origin_city: CityNode(best_price=0, best_duration=0)
    }

    # (price, insertion order, city): the counter keeps equal prices FIFO
    # and stops heapq from ever comparing city names.
    counter = itertools.count()
    frontier: List[Tuple[int, int, str]] = [(0, next(counter), origin_city)]

    settled_count = 0
    relaxations = 0
    reached_destination = False

    while frontier:
        _, _, city = heapq.heappop(frontier)
        node = nodes[city]

        if node.settled:
            continue

        if city == destination_city:
            reached_destination = True
            break

        for flight in graph.outgoing(city):
            price = node.best_price + flight.price
            duration = node.best_duration + flight.duration_hours
            neighbour_city = flight.destination_city
            neighbour = nodes.get(neighbour_city)

            if neighbour is None:
                neighbour = CityNode(best_price=price, best_duration=duration)
                neighbour.predecessor_city = city
                neighbour.predecessor_flight = flight
                nodes[neighbour_city] = neighbour
            elif neighbour.improves(price, duration):
                neighbour.update(price, duration, city, flight)
            else:
                continue

            relaxations += 1
            heapq.heappush(frontier, (price, next(counter), neighbour_city))

        node.settled = True
        settled_count += 1

    logger.debug(
        "Search from %s settled %d cities, %d relaxations, %d discovered "
        "(destination %s)",
        origin_city,
        settled_count,
        relaxations,
        len(nodes),
        "reached" if reached_destination else "not reached",
    )

    return nodes


def cheapest_route(
    flights: Sequence[Flight],
    origin_city: str,
    destination_city: str,
) -> List[Flight]:
    """
    Find the cheapest route, breaking price ties on total duration.

    Unknown cities, an empty flight list, an unreachable destination and
    origin == destination all yield an empty list rather than an error.

    Args:
        flights: Catalog snapshot. Never mutated.
        origin_city: Departure city.
        destination_city: Arrival city.

    Returns:
        Ordered list of flights from origin_city to destination_city.

    Example:
        >>> cheapest_route(
        ...     [Flight("BNC", "NYC", 550, 3),
        ...      Flight("BNC", "ORY", 100, 2),
        ...      Flight("ORY", "NYC", 500, 3)],
        ...     "BNC", "NYC",
        ... )
        [Flight(origin_city='BNC', destination_city='NYC', price=550, duration_hours=3)]
    """
    graph = FlightGraph.from_flights(flights)
    if graph.is_empty:
        return []

    nodes = search(graph, origin_city, destination_city)
    return reconstruct_route(nodes, destination_city)
