"""
hamfuzz.distance — Hamming distance metrics.
"""

from __future__ import annotations

from ._initialize import LengthMismatchError
from . import Hamming  # noqa: F401

__all__ = [
    "LengthMismatchError",
    "Hamming",
]
