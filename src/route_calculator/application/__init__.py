"""
Application layer for the Route Calculator.

This layer provides the public API. It acts as a facade, handling
dependency initialization and exposing a simple interface.
"""

from src.route_calculator.application.find_cheapest_route import (
    FindCheapestRoute,
    RouteQueryTimeoutError,
)

__all__ = ["FindCheapestRoute", "RouteQueryTimeoutError"]
