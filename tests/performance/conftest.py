"""
Shared fixtures for performance benchmarks.

Key design principle: build expensive inputs (catalog, graph) once at
module scope, then benchmark only the hot paths.
"""

from typing import List

import numpy as np
import pandas as pd
import pytest

from src.dijkstra.graph import FlightGraph
from src.route_calculator.adapters.catalogs.dataframe_catalog import (
    DataFrameFlightCatalog,
)
from src.route_calculator.schemas.flight import Flight


# =============================================================================
# SYNTHETIC DATA GENERATORS (for scaling tests)
# =============================================================================


def generate_synthetic_flights(
    num_rows: int,
    num_cities: int = 100,
    seed: int = 42,
) -> pd.DataFrame:
    """
    Generate synthetic flight data for scaling benchmarks.

    Args:
        num_rows: Number of flight records to generate.
        num_cities: Number of unique cities.
        seed: Random seed for reproducibility.

    Returns:
        DataFrame matching FlightSchema.
    """
    rng = np.random.default_rng(seed)

    # Generate city codes (AAA, AAB, ..., ZZZ)
    cities = [
        f"{chr(65 + i // 26 // 26)}{chr(65 + i // 26 % 26)}{chr(65 + i % 26)}"
        for i in range(num_cities)
    ]

    origins = rng.choice(cities, size=num_rows)
    destinations = rng.choice(cities, size=num_rows)

    # Ensure no self-loops
    mask = origins == destinations
    while mask.any():
        destinations[mask] = rng.choice(cities, size=mask.sum())
        mask = origins == destinations

    return pd.DataFrame({
        "origin_city": origins,
        "destination_city": destinations,
        "price": rng.integers(20, 1000, size=num_rows),
        "duration_hours": rng.integers(1, 15, size=num_rows),
    })


@pytest.fixture(scope="module")
def synthetic_flights_10k() -> List[Flight]:
    """10,000 synthetic flights over 100 cities."""
    return DataFrameFlightCatalog(generate_synthetic_flights(10_000)).get_flights()


@pytest.fixture(scope="module")
def synthetic_flights_100k() -> List[Flight]:
    """100,000 synthetic flights over 1,000 cities."""
    df = generate_synthetic_flights(100_000, num_cities=1_000)
    return DataFrameFlightCatalog(df).get_flights()


@pytest.fixture(scope="module")
def preloaded_graph(synthetic_flights_10k) -> FlightGraph:
    """
    Pre-built FlightGraph (module-scoped).

    Benchmarks receive an already-indexed graph, so they measure the
    search without adjacency construction.
    """
    return FlightGraph.from_flights(synthetic_flights_10k)
