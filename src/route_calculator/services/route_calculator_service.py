"""
Route Calculator Service - Domain orchestrator for route queries.

Coordinates the interaction between:
- RouteQuery (validated search parameters)
- RouteCalculator (algorithm adapter)
- Route (summary returned to consumers)
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from src.route_calculator.schemas.query import RouteQuery
from src.route_calculator.schemas.route import Route

if TYPE_CHECKING:
    from src.route_calculator.ports.route_calculator import RouteCalculator

logger = logging.getLogger(__name__)


class RouteCalculatorService:
    """
    Domain service for finding the cheapest route.

    Orchestrates the routing process:
    1. Validates input into a RouteQuery
    2. Delegates to the route calculator
    3. Wraps the legs in a Route summary
    4. Logs performance metrics

    This service is stateless and thread-safe.

    Attributes:
        _calculator: Algorithm adapter for route calculation.
    """

    def __init__(self, calculator: RouteCalculator) -> None:
        """
        Initialize the service.

        Args:
            calculator: Algorithm adapter (e.g., DijkstraRouteCalculator).
        """
        self._calculator = calculator

    def find_cheapest_route(self, origin_city: str, destination_city: str) -> Route:
        """
        Find the cheapest route between two cities.

        Args:
            origin_city: Departure city identifier.
            destination_city: Arrival city identifier.

        Returns:
            Route summary. Its legs are empty when no connection exists.

        Raises:
            ValueError: If a city identifier is not a string.
            CatalogUnavailableError: If the flight catalog cannot be read.
        """
        start_time = time.perf_counter()

        query = RouteQuery(origin_city=origin_city, destination_city=destination_city)

        logger.debug(
            "Route query: origin=%s, destination=%s",
            query.origin_city,
            query.destination_city,
        )

        legs = self._calculator.calculate(query.origin_city, query.destination_city)
        route = Route.from_flights(query.origin_city, query.destination_city, legs)

        total_time = time.perf_counter() - start_time

        if route.is_empty:
            logger.info(
                "No route %s -> %s (%.3fms)",
                query.origin_city,
                query.destination_city,
                total_time * 1000,
            )
        else:
            logger.info(
                "Route %s -> %s: %d legs, price %d, %dh in %.3fms",
                query.origin_city,
                query.destination_city,
                route.num_legs,
                route.total_price,
                route.total_duration_hours,
                total_time * 1000,
            )

        return route

    @property
    def algorithm_name(self) -> str:
        """Get name of the underlying algorithm."""
        return self._calculator.name
