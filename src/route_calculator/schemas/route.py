"""
Route result schemas.

`Route` wraps the ordered legs returned by a route calculator with the
totals consumers usually want. `RouteLegSchema` validates the tabular
form produced by `Route.to_dataframe()`.
"""

from dataclasses import dataclass
from typing import List, Sequence

import pandas as pd
import pandera as pa
from pandera.typing import Series

from .flight import Flight


class RouteLegSchema(pa.DataFrameModel):
    """
    Schema for the legs of a route, one row per flight.
    """

    leg_index: Series[int] = pa.Field(
        ge=0,
        description="Zero-based position of the leg in the route",
    )
    origin_city: Series[str] = pa.Field(nullable=False)
    destination_city: Series[str] = pa.Field(nullable=False)
    price: Series[int] = pa.Field(ge=0)
    duration_hours: Series[int] = pa.Field(ge=0)
    cumulative_price: Series[int] = pa.Field(
        ge=0,
        description="Price paid up to and including this leg",
    )
    cumulative_duration_hours: Series[int] = pa.Field(
        ge=0,
        description="Hours flown up to and including this leg",
    )

    class Config:
        strict = False
        coerce = True
        name = "RouteLegSchema"
        ordered = True


@dataclass(frozen=True)
class Route:
    """
    Immutable result of a route query.

    An empty `legs` tuple means no connection was found (or none was
    needed because origin and destination are the same city).
    """

    origin_city: str
    destination_city: str
    legs: tuple[Flight, ...]

    @property
    def is_empty(self) -> bool:
        return not self.legs

    @property
    def num_legs(self) -> int:
        """Number of flights."""
        return len(self.legs)

    @property
    def total_price(self) -> int:
        """Sum of all leg prices."""
        return sum(leg.price for leg in self.legs)

    @property
    def total_duration_hours(self) -> int:
        """Sum of all leg durations."""
        return sum(leg.duration_hours for leg in self.legs)

    @property
    def cities(self) -> List[str]:
        """Ordered list of all cities on the route."""
        if not self.legs:
            return []
        cities = [self.legs[0].origin_city]
        for leg in self.legs:
            cities.append(leg.destination_city)
        return cities

    def to_dataframe(self) -> pd.DataFrame:
        """
        Tabular view of the legs, validated against RouteLegSchema.

        Returns:
            DataFrame with one row per leg (empty with the schema columns
            when the route has no legs).
        """
        columns = list(RouteLegSchema.to_schema().columns)
        if not self.legs:
            return pd.DataFrame(columns=columns)

        df = pd.DataFrame(
            {
                "leg_index": range(len(self.legs)),
                "origin_city": [leg.origin_city for leg in self.legs],
                "destination_city": [leg.destination_city for leg in self.legs],
                "price": [leg.price for leg in self.legs],
                "duration_hours": [leg.duration_hours for leg in self.legs],
            }
        )
        df["cumulative_price"] = df["price"].cumsum()
        df["cumulative_duration_hours"] = df["duration_hours"].cumsum()
        return RouteLegSchema.validate(df)

    @classmethod
    def from_flights(
        cls,
        origin_city: str,
        destination_city: str,
        flights: Sequence[Flight],
    ) -> "Route":
        """
        Factory method to create a Route from calculator output.

        Raises:
            ValueError: If the legs do not chain from origin to destination.
        """
        legs = tuple(flights)
        if legs:
            if legs[0].origin_city != origin_city:
                raise ValueError(
                    f"Route starts at {legs[0].origin_city}, expected {origin_city}"
                )
            if legs[-1].destination_city != destination_city:
                raise ValueError(
                    f"Route ends at {legs[-1].destination_city}, "
                    f"expected {destination_city}"
                )
            for prev, nxt in zip(legs, legs[1:]):
                if prev.destination_city != nxt.origin_city:
                    raise ValueError(
                        f"Legs do not chain: {prev.destination_city} != {nxt.origin_city}"
                    )

        return cls(
            origin_city=origin_city,
            destination_city=destination_city,
            legs=legs,
        )
