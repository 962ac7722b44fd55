"""
Schema definitions for the Route Calculator.

Dataclasses for the records the algorithm works with, plus Pandera
schemas for their tabular forms.
"""

from .flight import (
    FLIGHT_COLUMNS,
    Flight,
    FlightDataFrame,
    FlightSchema,
    validate_flights,
)
from .query import RouteQuery
from .route import Route, RouteLegSchema

__all__ = [
    # Flight schemas
    "Flight",
    "FlightSchema",
    "FlightDataFrame",
    "FLIGHT_COLUMNS",
    "validate_flights",
    # Query
    "RouteQuery",
    # Route schemas
    "Route",
    "RouteLegSchema",
]
