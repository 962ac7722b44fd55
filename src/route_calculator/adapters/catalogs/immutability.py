"""
Immutability utilities for DataFrame-backed catalogs.

A catalog hands out read-only snapshots. These helpers copy the frame a
caller gives us and then lock its arrays so later code cannot change
the snapshot in place.
"""

from typing import Iterator

import numpy as np
import pandas as pd


def _numpy_columns(df: pd.DataFrame) -> Iterator[np.ndarray]:
    # Extension arrays (e.g. Arrow-backed strings) have no writeable flag
    for _, column in df.items():
        values = column.values
        if isinstance(values, np.ndarray):
            yield values


def make_immutable(df: pd.DataFrame) -> pd.DataFrame:
    """
    Lock the numpy arrays behind a catalog frame.

    Zero-copy: only the writeable flag changes. Returns the same frame
    so the call can wrap a constructor expression.

    Example:
        >>> df = make_immutable(pd.DataFrame({'price': [1, 2, 3]}))
        >>> df['price'].values[0] = 4  # Raises ValueError
    """
    for values in _numpy_columns(df):
        values.setflags(write=False)
    return df


def make_defensive_copy(df: pd.DataFrame) -> pd.DataFrame:
    """
    Deep-copy a DataFrame so the caller's object is never shared.

    WARNING: O(n) memory and time cost. Done once per catalog, not
    per query.
    """
    return df.copy(deep=True)


def is_immutable(df: pd.DataFrame) -> bool:
    """True when no numpy-backed column can be written in place."""
    return not any(values.flags.writeable for values in _numpy_columns(df))
