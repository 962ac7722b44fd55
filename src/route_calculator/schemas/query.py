"""
Route query parameters.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RouteQuery:
    """
    Immutable route search request.

    Only structural checks happen here: cities must be strings. Whether
    they exist in the catalog is not checked; an unknown city simply
    produces an empty route.

    Attributes:
        origin_city: Departure city identifier.
        destination_city: Arrival city identifier.
    """

    origin_city: str
    destination_city: str

    def __post_init__(self) -> None:
        """Validate query after initialization."""
        if not isinstance(self.origin_city, str):
            raise ValueError(
                f"origin_city must be a string, got {type(self.origin_city).__name__}"
            )
        if not isinstance(self.destination_city, str):
            raise ValueError(
                "destination_city must be a string, got "
                f"{type(self.destination_city).__name__}"
            )

    @property
    def is_trivial(self) -> bool:
        """Origin and destination are the same city (no flight needed)."""
        return self.origin_city == self.destination_city
