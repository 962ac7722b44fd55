"""
Flight catalog adapters.
"""

from src.route_calculator.adapters.catalogs.dataframe_catalog import (
    DataFrameFlightCatalog,
)
from src.route_calculator.adapters.catalogs.in_memory_catalog import (
    InMemoryFlightCatalog,
)

__all__ = [
    "DataFrameFlightCatalog",
    "InMemoryFlightCatalog",
]
