"""
Algorithm adapters for route calculation.
"""

from src.route_calculator.adapters.algorithms.dijkstra_adapter import (
    DijkstraRouteCalculator,
)

__all__ = [
    "DijkstraRouteCalculator",
]
