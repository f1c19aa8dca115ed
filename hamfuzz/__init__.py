"""
hamfuzz — Hamming distance and similarity scores for sequences and integers.
"""

from __future__ import annotations

from . import compat, distance, utils
from .distance import Hamming
from .distance._initialize import LengthMismatchError

__version__: str = "0.1.0"
__author__: str = "BM Suisse"

__all__ = [
    "compat",
    "distance",
    "utils",
    "Hamming",
    "LengthMismatchError",
    "__version__",
]
