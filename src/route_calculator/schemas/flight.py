"""
Flight schemas.

`Flight` is the record the routing core works with. `FlightSchema` is
the Pandera contract for tabular catalogs; it is checked once at the
catalog boundary, never per query.
"""

from dataclasses import dataclass
from typing import Any, Mapping

import pandas as pd
import pandera as pa
from pandera.typing import DataFrame, Series


@dataclass(frozen=True)
class Flight:
    """
    Immutable direct flight between two cities.

    No identity beyond its field values: two flights with the same
    cities, price and duration are equal. Several flights may connect
    the same pair of cities (parallel edges).

    Attributes:
        origin_city: Departure city identifier.
        destination_city: Arrival city identifier.
        price: Ticket price (non-negative integer).
        duration_hours: Flight duration in whole hours (non-negative).
    """

    origin_city: str
    destination_city: str
    price: int
    duration_hours: int

    @classmethod
    def from_mapping(cls, record: Mapping[str, Any]) -> "Flight":
        """Build a Flight from a dict-like row (column names as in FlightSchema)."""
        return cls(
            origin_city=str(record["origin_city"]),
            destination_city=str(record["destination_city"]),
            price=int(record["price"]),
            duration_hours=int(record["duration_hours"]),
        )

    def __str__(self) -> str:
        return (
            f"{self.origin_city} -> {self.destination_city} "
            f"(${self.price}, {self.duration_hours}h)"
        )


class FlightSchema(pa.DataFrameModel):
    """
    Core contract for tabular flight catalogs.

    Only the four routing columns are required. Extra columns (carrier,
    flight number, ...) pass through unchanged.
    """

    origin_city: Series[str] = pa.Field(
        nullable=False,
        description="Departure city identifier (e.g., 'BCN')",
    )
    destination_city: Series[str] = pa.Field(
        nullable=False,
        description="Arrival city identifier",
    )
    price: Series[int] = pa.Field(
        ge=0,
        description="Flight price in base currency",
    )
    duration_hours: Series[int] = pa.Field(
        ge=0,
        description="Flight duration in whole hours",
    )

    class Config:
        # strict=False keeps extra columns; strict="filter" would drop them
        strict = False
        coerce = True
        name = "FlightSchema"
        description = "Direct flights required by the route calculator"


FLIGHT_COLUMNS = ["origin_city", "destination_city", "price", "duration_hours"]

FlightDataFrame = DataFrame[FlightSchema]


def _is_whole_number(series: pd.Series) -> pd.Series:
    numeric = pd.to_numeric(series, errors="coerce")
    return numeric.notna() & (numeric % 1 == 0)


# Runs on the raw input: FlightSchema coerces to int, which would
# truncate 99.9 to 99 without complaint.
WHOLE_NUMBER_WEIGHTS = pa.DataFrameSchema(
    {
        column: pa.Column(
            checks=pa.Check(
                _is_whole_number,
                error=f"{column} must be a whole number",
            ),
            nullable=False,
        )
        for column in ("price", "duration_hours")
    },
    strict=False,
    name="WholeNumberWeights",
)


def validate_flights(df: pd.DataFrame) -> FlightDataFrame:
    """
    Validate a raw flight frame and coerce it to FlightSchema dtypes.

    Raises:
        pandera.errors.SchemaError: If a required column is missing, a
            weight is negative or fractional, or a city is null.
    """
    WHOLE_NUMBER_WEIGHTS.validate(df)
    return FlightSchema.validate(df)
