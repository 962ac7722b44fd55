"""
Flight Catalog port interface.

Defines the abstract contract for sources of direct flights. How flights
are stored is up to the implementation; the route calculator only needs
a complete snapshot per query.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from src.route_calculator.schemas.flight import Flight


class CatalogUnavailableError(Exception):
    """Raised when the flight catalog cannot be read."""

    pass


class FlightCatalog(ABC):
    """
    Abstract interface for flight catalogs.

    The catalog is treated as a read-only snapshot: callers never mutate
    what get_flights() returns, and implementations must not change a
    snapshot that has already been handed out.

    Implementations:
    - InMemoryFlightCatalog: Tuple of Flight records
    - DataFrameFlightCatalog: Pandera-validated pandas DataFrame
    """

    @abstractmethod
    def get_flights(self) -> Sequence[Flight]:
        """
        Return the complete current set of direct flights.

        Order is irrelevant and there is no pagination.

        Returns:
            Sequence of Flight records (possibly empty).

        Raises:
            Exception: Any failure to read the underlying data. The route
                calculator turns it into CatalogUnavailableError and does
                not run on partial data.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Human-readable name of this catalog.

        Returns:
            Catalog identifier (e.g., "In-Memory Catalog").
        """
        ...

    def get_cities(self) -> frozenset[str]:
        """
        All cities appearing as an origin or destination.

        Default implementation derives them from get_flights().
        """
        flights = self.get_flights()
        return frozenset(
            {f.origin_city for f in flights} | {f.destination_city for f in flights}
        )
