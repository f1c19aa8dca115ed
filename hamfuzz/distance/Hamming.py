"""hamfuzz.distance.Hamming"""

from __future__ import annotations

from hamfuzz._hamming import (
    DEFAULT_BIT_WIDTH,
    hamming_bitwise_distance as bitwise_distance,
    hamming_distance as distance,
    hamming_normalized_distance as normalized_distance,
    hamming_normalized_similarity as normalized_similarity,
    hamming_similarity as similarity,
)

__all__ = [
    "DEFAULT_BIT_WIDTH",
    "distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
    "bitwise_distance",
]
