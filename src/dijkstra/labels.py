from dataclasses import dataclass
from typing import Optional

from src.route_calculator.schemas.flight import Flight


@dataclass(slots=True)
class CityNode:
    """
    Per-city state in the Dijkstra search space.

    Each CityNode tracks:
    - Best price found so far to reach the city
    - Duration of that best-price path (tie-breaker only)
    - The city and the exact flight used to get here
    - Whether the city has been settled (expanded)

    Nodes are created lazily when a city is first discovered and are
    owned by a single search; nothing outlives the call.
    """
    best_price: int
    best_duration: int
    predecessor_city: Optional[str] = None
    predecessor_flight: Optional[Flight] = None
    settled: bool = False

    def improves(self, price: int, duration: int) -> bool:
        """Whether (price, duration) beats the recorded best, price first."""
        return price < self.best_price or (
            price == self.best_price and duration < self.best_duration
        )

    def update(self, price: int, duration: int, city: str, flight: Flight) -> None:
        self.best_price = price
        self.best_duration = duration
        self.predecessor_city = city
        self.predecessor_flight = flight
