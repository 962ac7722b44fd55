from typing import Dict, List, Optional, Sequence

from src.route_calculator.schemas.flight import Flight

from .exceptions import PredecessorCycleError
from .labels import CityNode


def reconstruct_route(nodes: Dict[str, CityNode], destination_city: str) -> List[Flight]:
    """
    Reconstruct the flights leading to destination_city.

    Walks predecessor links back from the destination, collecting the
    recorded flight at each step, until a city without a predecessor
    (the origin) is reached.

    Returns:
        flights: ordered list of flights from origin to destination.
        Empty if the destination was never discovered.

    Raises:
        PredecessorCycleError: if the chain revisits a city.
    """
    flights: List[Flight] = []
    seen = set()

    curr: Optional[CityNode] = nodes.get(destination_city)
    city = destination_city
    while curr is not None and curr.predecessor_flight is not None:
        if city in seen:
            raise PredecessorCycleError(city)
        seen.add(city)

        flights.append(curr.predecessor_flight)
        city = curr.predecessor_city
        curr = nodes.get(city)

    flights.reverse()
    return flights


def format_route(flights: Sequence[Flight]) -> str:
    """
    Render a route as text, one leg per line plus a totals line.

    Returns:
        Human-readable description ("No route found" for an empty route).
    """
    if not flights:
        return "No route found"

    lines = [
        f"{f.origin_city} -> {f.destination_city} "
        f"(${f.price}, {f.duration_hours}h)"
        for f in flights
    ]
    total_price = sum(f.price for f in flights)
    total_duration = sum(f.duration_hours for f in flights)
    lines.append(f"Total: ${total_price}, {total_duration}h")
    return "\n".join(lines)
