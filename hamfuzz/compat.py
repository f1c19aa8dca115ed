"""
hamfuzz.compat — Data-framework compatibility helpers.

Converts column-oriented data from NumPy, Pandas, Polars and PyArrow into
plain Python lists so that ``s[i]`` is always positional and elements compare
as Python scalars. All imports are lazy so no new hard dependencies are
introduced.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ._logging import get_logger

logger = get_logger("compat")

_PASSTHROUGH = (str, bytes, bytearray, list, tuple, range)


def _is_numpy_array(data: Any) -> bool:
    try:
        import numpy as np

        return isinstance(data, np.ndarray)
    except ImportError:
        return False


def _is_pandas_series(data: Any) -> bool:
    try:
        import pandas as pd

        return isinstance(data, pd.Series)
    except ImportError:
        return False


def _is_polars_series(data: Any) -> bool:
    try:
        import polars as pl

        return isinstance(data, pl.Series)
    except ImportError:
        return False


def _is_pyarrow_array(data: Any) -> bool:
    try:
        import pyarrow as pa

        return isinstance(data, (pa.Array, pa.ChunkedArray))
    except ImportError:
        return False


def coerce_sequence(data: Any) -> Any:
    """
    Return *data* as a positionally indexable sequence.

    Supported input types
    ---------------------
    * ``str`` / ``bytes`` / ``bytearray`` / ``list`` / ``tuple`` / ``range`` —
      returned as-is (no copy).
    * ``numpy.ndarray`` (1-D) — ``.tolist()``.
    * ``pandas.Series`` — ``.tolist()``; the index is ignored.
    * ``polars.Series`` — ``.to_list()``.
    * ``pyarrow.Array`` / ``pyarrow.ChunkedArray`` — ``.to_pylist()``.
    * Any other object exposing ``__len__`` and ``__getitem__`` — as-is,
      except mappings, whose keys are not positions.

    Raises
    ------
    ValueError
        If a NumPy array is not one-dimensional.
    TypeError
        If *data* is a mapping, has no length or cannot be indexed.
    """
    if isinstance(data, _PASSTHROUGH):
        return data

    if _is_numpy_array(data):
        if data.ndim != 1:
            raise ValueError(
                f"Expected a 1-D array, got an array with shape {data.shape}."
            )
        logger.debug("Coercing numpy array of length %d to list", len(data))
        return data.tolist()

    if _is_pandas_series(data):
        logger.debug("Coercing pandas Series of length %d to list", len(data))
        return data.tolist()  # type: ignore[union-attr]

    if _is_polars_series(data):
        logger.debug("Coercing polars Series of length %d to list", len(data))
        return data.to_list()  # type: ignore[union-attr]

    if _is_pyarrow_array(data):
        logger.debug("Coercing pyarrow array of length %d to list", len(data))
        return data.to_pylist()  # type: ignore[union-attr]

    if isinstance(data, Mapping):
        raise TypeError(
            f"Cannot compare {type(data).__name__} as a sequence: mappings are "
            "keyed, not positional. Pass list(mapping.values()) instead."
        )

    if hasattr(data, "__len__") and hasattr(data, "__getitem__"):
        return data

    raise TypeError(
        f"Cannot compare {type(data).__name__} as a sequence. "
        "Pass a str, bytes, list, tuple, NumPy array, Pandas Series, "
        "Polars Series or PyArrow Array."
    )


__all__ = ["coerce_sequence"]
