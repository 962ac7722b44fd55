"""
Custom exceptions for the dijkstra module.

The search itself never raises for unknown cities or empty catalogs;
these exceptions only guard against corrupted search state.
"""


class DijkstraError(Exception):
    """Base exception for all dijkstra module errors."""

    pass


class PredecessorCycleError(DijkstraError):
    """Raised when a predecessor chain loops back on itself during reconstruction."""

    def __init__(self, city: str) -> None:
        self.city = city
        message = (
            f"Predecessor chain revisits city '{city}' "
            "(negative price or duration in the flight data?)"
        )
        super().__init__(message)
