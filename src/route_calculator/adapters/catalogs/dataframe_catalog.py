"""
DataFrame Flight Catalog - pandas to Flight adapter.

Accepts flights as a pandas DataFrame (or plain records), validates
them once against FlightSchema and serves Flight records to the route
calculator.
"""

import logging
from typing import Any, Iterable, List, Mapping, Sequence, Union

import pandas as pd

from src.route_calculator.adapters.catalogs.immutability import (
    make_defensive_copy,
    make_immutable,
)
from src.route_calculator.ports.flight_catalog import FlightCatalog
from src.route_calculator.schemas.flight import (
    FLIGHT_COLUMNS,
    Flight,
    FlightDataFrame,
    validate_flights,
)

logger = logging.getLogger(__name__)

FlightRecordLike = Union[Mapping[str, Any], Sequence[Any]]

_EMPTY_DTYPES = {
    "origin_city": "object",
    "destination_city": "object",
    "price": "int64",
    "duration_hours": "int64",
}


class DataFrameFlightCatalog(FlightCatalog):
    """
    Catalog backed by a Pandera-validated DataFrame.

    The frame is copied, validated and locked read-only on construction.
    Schema validation happens here at the boundary, not per query.

    Attributes:
        _df: Validated, read-only flight data.
    """

    def __init__(self, flights_df: pd.DataFrame) -> None:
        """
        Initialize the catalog.

        Args:
            flights_df: DataFrame with at least the FlightSchema columns.
                Extra columns are kept but ignored by routing. A frame
                with no columns at all is an empty catalog.

        Raises:
            pandera.errors.SchemaError: If data fails validation,
                including fractional weights and missing columns on a
                frame without rows.
        """
        if len(flights_df.columns) == 0 or (
            flights_df.empty and set(FLIGHT_COLUMNS) <= set(flights_df.columns)
        ):
            # Pandera cannot coerce dtypes on a frame without rows
            df = pd.DataFrame(
                {col: pd.Series(dtype=dtype) for col, dtype in _EMPTY_DTYPES.items()}
            )
        else:
            df = validate_flights(make_defensive_copy(flights_df))

        self._df = make_immutable(df.reset_index(drop=True))

        logger.info("Loaded %d flights into DataFrame catalog", len(self._df))

    @classmethod
    def from_records(cls, records: Iterable[FlightRecordLike]) -> "DataFrameFlightCatalog":
        """
        Build a catalog from dicts or (origin, destination, price, duration) tuples.

        Example:
            >>> catalog = DataFrameFlightCatalog.from_records([
            ...     ("BNC", "NYC", 550, 3),
            ...     {"origin_city": "BNC", "destination_city": "ORY",
            ...      "price": 100, "duration_hours": 2},
            ... ])
            >>> len(catalog.get_flights())
            2
        """
        rows: List[Mapping[str, Any]] = []
        for record in records:
            if isinstance(record, Mapping):
                rows.append(record)
            else:
                rows.append(dict(zip(FLIGHT_COLUMNS, record)))
        return cls(pd.DataFrame(rows, columns=None if rows else FLIGHT_COLUMNS))

    def get_flights(self) -> List[Flight]:
        """
        Convert the stored rows to Flight records.

        Returns:
            List of Flight, one per row, in frame order.
        """
        return [
            Flight(
                origin_city=str(origin),
                destination_city=str(destination),
                price=int(price),
                duration_hours=int(duration),
            )
            for origin, destination, price, duration in self._df[
                FLIGHT_COLUMNS
            ].itertuples(index=False, name=None)
        ]

    def get_cities(self) -> frozenset[str]:
        """Cities from the origin and destination columns (no Flight objects built)."""
        if self._df.empty:
            return frozenset()
        return frozenset(
            set(self._df["origin_city"].astype(str).unique())
            | set(self._df["destination_city"].astype(str).unique())
        )

    @property
    def flights_df(self) -> FlightDataFrame:
        """The validated, read-only frame."""
        return self._df

    @property
    def name(self) -> str:
        """Human-readable catalog name."""
        return "DataFrame Catalog"

