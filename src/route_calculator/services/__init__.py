"""
Domain services for the Route Calculator.

Services orchestrate the interaction between ports (catalogs,
algorithms) and domain logic (query validation, result summaries).
"""

from src.route_calculator.services.route_calculator_service import (
    RouteCalculatorService,
)

__all__ = ["RouteCalculatorService"]
