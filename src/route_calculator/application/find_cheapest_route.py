"""
FindCheapestRoute Use Case - Public API for route calculation.

This module provides the main entry point for the route calculator.
It acts as a Facade/Factory, handling dependency initialization and
providing a clean interface for consumers.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Callable, Iterable, List, Optional, TypeVar

from src.dijkstra.graph import FlightGraph
from src.route_calculator.adapters.algorithms.dijkstra_adapter import (
    DijkstraRouteCalculator,
)
from src.route_calculator.adapters.catalogs.in_memory_catalog import (
    InMemoryFlightCatalog,
)
from src.route_calculator.config import Settings
from src.route_calculator.ports.flight_catalog import FlightCatalog
from src.route_calculator.ports.route_calculator import RouteCalculator
from src.route_calculator.schemas.flight import Flight
from src.route_calculator.schemas.route import Route
from src.route_calculator.services.route_calculator_service import (
    RouteCalculatorService,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RouteQueryTimeoutError(Exception):
    """Raised when a route query exceeds the configured deadline."""

    def __init__(self, origin_city: str, destination_city: str, timeout: float) -> None:
        self.origin_city = origin_city
        self.destination_city = destination_city
        self.timeout = timeout
        message = (
            f"Route query {origin_city} -> {destination_city} "
            f"exceeded {timeout:.3f}s"
        )
        super().__init__(message)


class FindCheapestRoute:
    """
    Public API for finding the cheapest flight route.

    Example usage:
        >>> router = FindCheapestRoute(flights=[
        ...     Flight("BNC", "NYC", 550, 3),
        ...     Flight("BNC", "ORY", 100, 2),
        ...     Flight("ORY", "NYC", 500, 3),
        ... ])
        >>> route = router.search("BNC", "NYC")
        >>> route.cities, route.total_price
        (['BNC', 'NYC'], 550)

    Attributes:
        _catalog: Flight catalog.
        _service: Underlying RouteCalculatorService.
        _executor: Worker used to enforce query_timeout (None without one).
            Replaced after every timeout so later queries never queue
            behind an abandoned search.
        _closed: Set by shutdown(); further queries raise RuntimeError.
    """

    def __init__(
        self,
        catalog: Optional[FlightCatalog] = None,
        flights: Optional[Iterable[Flight]] = None,
        calculator: Optional[RouteCalculator] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        """
        Initialize the facade with optional custom dependencies.

        Args:
            catalog: Flight catalog. If None, an InMemoryFlightCatalog is
                built from `flights`.
            flights: Flights for the default in-memory catalog. Ignored
                when `catalog` is given.
            calculator: Custom algorithm. If None, uses
                DijkstraRouteCalculator over the catalog.
            settings: Settings. If None, read from the environment.
        """
        if catalog is not None:
            self._catalog = catalog
        else:
            self._catalog = InMemoryFlightCatalog(flights or ())

        self._settings = settings if settings is not None else Settings.from_env()

        if calculator is not None:
            self._calculator = calculator
        else:
            self._calculator = DijkstraRouteCalculator(self._catalog)

        self._service = RouteCalculatorService(calculator=self._calculator)

        self._executor_lock = threading.Lock()
        self._closed = False
        self._executor: Optional[ThreadPoolExecutor] = None
        if self._settings.query_timeout is not None:
            self._executor = self._new_executor()

        logger.info(
            "FindCheapestRoute initialized with %s algorithm over %s "
            "(timeout: %s)",
            self._calculator.name,
            self._catalog.name,
            self._settings.query_timeout,
        )

    def calculate(self, origin_city: str, destination_city: str) -> List[Flight]:
        """
        Cheapest route as a plain list of flights.

        Returns:
            Ordered flights from origin to destination; empty if none.

        Raises:
            ValueError: If a city identifier is not a string.
            CatalogUnavailableError: If the flight catalog cannot be read.
            RouteQueryTimeoutError: If a deadline is configured and exceeded.
            RuntimeError: If the facade has been shut down.
        """
        return list(self.search(origin_city, destination_city).legs)

    def search(self, origin_city: str, destination_city: str) -> Route:
        """
        Cheapest route with totals.

        Raises:
            ValueError: If a city identifier is not a string.
            CatalogUnavailableError: If the flight catalog cannot be read.
            RouteQueryTimeoutError: If a deadline is configured and exceeded.
            RuntimeError: If the facade has been shut down.
        """
        return self._run_with_deadline(
            self._service.find_cheapest_route,
            origin_city,
            destination_city,
        )

    def _run_with_deadline(
        self,
        fn: Callable[[str, str], T],
        origin_city: str,
        destination_city: str,
    ) -> T:
        """Run fn inline, or on the worker when a deadline is configured."""
        with self._executor_lock:
            if self._closed:
                raise RuntimeError("FindCheapestRoute has been shut down")
            executor = self._executor
            if executor is not None:
                future = executor.submit(fn, origin_city, destination_city)

        if executor is None:
            return fn(origin_city, destination_city)

        timeout = self._settings.query_timeout
        try:
            return future.result(timeout=timeout)
        except FutureTimeoutError as e:
            future.cancel()
            self._abandon_executor(executor)
            logger.warning(
                "Route query %s -> %s timed out after %.3fs",
                origin_city,
                destination_city,
                timeout,
            )
            raise RouteQueryTimeoutError(origin_city, destination_city, timeout) from e

    @staticmethod
    def _new_executor() -> ThreadPoolExecutor:
        return ThreadPoolExecutor(max_workers=1, thread_name_prefix="route-query")

    def _abandon_executor(self, executor: ThreadPoolExecutor) -> None:
        """
        Swap in a fresh worker after a timeout.

        The search has no cancellation points, so the timed-out query keeps
        running on the old worker until it finishes; new queries must not
        wait behind it.
        """
        with self._executor_lock:
            if self._closed or self._executor is not executor:
                return
            self._executor = self._new_executor()
        executor.shutdown(wait=False)

    def get_available_cities(self) -> frozenset[str]:
        """
        Get all cities present in the flight catalog.

        Returns:
            Frozenset of city identifiers.
        """
        return self._catalog.get_cities()

    def has_direct_flight(self, origin_city: str, destination_city: str) -> bool:
        """
        Check if a direct flight exists between two cities.

        Returns:
            True if a direct flight exists, False otherwise.
        """
        graph = FlightGraph.from_flights(self._catalog.get_flights())
        return graph.has_route(origin_city, destination_city)

    @property
    def algorithm_name(self) -> str:
        """Get the name of the routing algorithm being used."""
        return self._service.algorithm_name

    @property
    def settings(self) -> Settings:
        return self._settings

    def shutdown(self) -> None:
        """
        Clean shutdown of the facade.

        Stops the deadline worker, waiting for a query still running on it.
        Route queries made afterwards raise RuntimeError. Safe to call twice.
        """
        with self._executor_lock:
            self._closed = True
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=True)
        logger.info("FindCheapestRoute shutdown complete")

    def __enter__(self) -> "FindCheapestRoute":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit with cleanup."""
        self.shutdown()
