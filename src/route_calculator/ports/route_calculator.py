"""
Route Calculator port interface.

Defines the abstract contract for routing algorithms.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from src.route_calculator.schemas.flight import Flight


class RouteCalculator(ABC):
    """
    Abstract interface for route calculators.

    Implementations:
    - DijkstraRouteCalculator: Price-ordered Dijkstra with duration tie-break
    """

    @abstractmethod
    def calculate(self, origin_city: str, destination_city: str) -> List[Flight]:
        """
        Find the cheapest route between two cities.

        Among routes of equal total price the faster one is preferred.

        Args:
            origin_city: Departure city identifier.
            destination_city: Arrival city identifier.

        Returns:
            Ordered list of flights from origin to destination. Empty if
            no route exists, either city is unknown, the catalog is empty,
            or origin_city == destination_city.

        Raises:
            CatalogUnavailableError: If the flight catalog cannot be read.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Algorithm identifier.

        Returns:
            Human-readable algorithm name.
        """
        ...
