"""
Dijkstra Algorithm Adapter - Bridge between architecture and algorithm.

Fetches one catalog snapshot per query and hands it to the dijkstra
module. Catalog failures stop the query before the search starts.
"""

import logging
from typing import List

from src.dijkstra.alg import cheapest_route
from src.route_calculator.ports.flight_catalog import (
    CatalogUnavailableError,
    FlightCatalog,
)
from src.route_calculator.ports.route_calculator import RouteCalculator
from src.route_calculator.schemas.flight import Flight

logger = logging.getLogger(__name__)


class DijkstraRouteCalculator(RouteCalculator):
    """
    RouteCalculator backed by the price-ordered Dijkstra search.

    Stateless apart from the catalog reference; safe to share between
    threads as long as the catalog's get_flights() is.

    Attributes:
        _catalog: Source of the flight snapshot.
    """

    def __init__(self, catalog: FlightCatalog) -> None:
        """
        Initialize the calculator.

        Args:
            catalog: Flight catalog read once per calculate() call.
        """
        self._catalog = catalog

    @property
    def name(self) -> str:
        """Algorithm identifier."""
        return "Cheapest-Price Dijkstra"

    @property
    def catalog(self) -> FlightCatalog:
        return self._catalog

    def calculate(self, origin_city: str, destination_city: str) -> List[Flight]:
        """
        Find the cheapest (then fastest) route.

        Args:
            origin_city: Departure city.
            destination_city: Arrival city.

        Returns:
            Ordered list of flights; empty when no route exists.

        Raises:
            CatalogUnavailableError: If reading the catalog fails. The
                search is never run on partial or missing data.
        """
        try:
            flights = self._catalog.get_flights()
        except CatalogUnavailableError:
            raise
        except Exception as e:
            logger.error("Flight catalog %s unavailable: %s", self._catalog.name, e)
            raise CatalogUnavailableError(
                f"Failed to read flights from {self._catalog.name}: {e}"
            ) from e

        route = cheapest_route(flights, origin_city, destination_city)

        logger.debug(
            "Dijkstra route %s -> %s: %d legs over %d flights",
            origin_city,
            destination_city,
            len(route),
            len(flights),
        )

        return route
