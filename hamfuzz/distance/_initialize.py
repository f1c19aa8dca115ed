"""
hamfuzz.distance._initialize — shared error types for the distance metrics.
"""

from __future__ import annotations


class LengthMismatchError(ValueError):
    """
    Raised when a metric that requires equal-length sequences receives
    sequences of different lengths.

    Attributes
    ----------
    len1 : int
        Length of the first sequence.
    len2 : int
        Length of the second sequence.
    """

    def __init__(self, len1: int, len2: int) -> None:
        self.len1 = len1
        self.len2 = len2
        super().__init__(
            f"Given sequences are not of equal length ({len1} != {len2}). "
            "Pass pad=True or use normalized_distance to compare them."
        )


__all__ = ["LengthMismatchError"]
