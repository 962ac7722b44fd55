"""
Port interfaces for the Route Calculator.

Ports define the abstract interfaces the domain layer uses to talk to
external systems (Ports and Adapters / Hexagonal architecture).
"""

from src.route_calculator.ports.flight_catalog import (
    CatalogUnavailableError,
    FlightCatalog,
)
from src.route_calculator.ports.route_calculator import RouteCalculator

__all__ = [
    "CatalogUnavailableError",
    "FlightCatalog",
    "RouteCalculator",
]
