"""
In-memory flight catalog.

Holds the flights as a tuple. Updates build a new tuple and swap it in,
so a snapshot already handed to a running query never changes.
"""

import logging
import threading
from typing import Iterable, Tuple

from src.route_calculator.ports.flight_catalog import FlightCatalog
from src.route_calculator.schemas.flight import Flight

logger = logging.getLogger(__name__)


class InMemoryFlightCatalog(FlightCatalog):
    """
    Catalog backed by an immutable tuple of Flight records.

    Thread-safe: the snapshot reference is swapped under a lock.

    Attributes:
        _flights: Current snapshot.
        _lock: Guards snapshot replacement.
    """

    def __init__(self, flights: Iterable[Flight] = ()) -> None:
        self._flights: Tuple[Flight, ...] = tuple(flights)
        self._lock = threading.Lock()

    def get_flights(self) -> Tuple[Flight, ...]:
        """Return the current snapshot."""
        with self._lock:
            return self._flights

    def add_flight(self, flight: Flight) -> None:
        """Publish a new snapshot that also contains flight."""
        with self._lock:
            self._flights = self._flights + (flight,)
        logger.debug("Added flight %s", flight)

    def replace_flights(self, flights: Iterable[Flight]) -> None:
        """Publish a completely new snapshot."""
        new_flights = tuple(flights)
        with self._lock:
            self._flights = new_flights
        logger.info("Catalog replaced: %d flights", len(new_flights))

    @property
    def name(self) -> str:
        """Human-readable catalog name."""
        return "In-Memory Catalog"

    def __len__(self) -> int:
        return len(self.get_flights())
