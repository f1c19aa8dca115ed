"""
hamfuzz._hamming — scoring core for the Hamming metric family.

Reference: Hamming, Richard W. (1950), "Error detecting and error correcting
codes", Bell System Technical Journal 29 (2): 147–160.

The public namespace is :mod:`hamfuzz.distance.Hamming`, which re-exports
these functions under short names.
"""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any, Final

from ._logging import get_logger
from .compat import coerce_sequence
from .distance._initialize import LengthMismatchError

logger = get_logger("hamming")

DEFAULT_BIT_WIDTH: Final = 64


def _prepare(
    s1: Any, s2: Any, processor: Callable[..., Any] | None
) -> tuple[Any, Any]:
    if processor is not None:
        s1 = processor(s1)
        s2 = processor(s2)
    return coerce_sequence(s1), coerce_sequence(s2)


def _mismatches(short: Any, long: Any) -> int:
    # indexed rather than iterated so custom sequences stay positional;
    # only the shared prefix is compared
    return sum(1 for i in range(len(short)) if short[i] != long[i])


def _padded_distance(s1: Any, s2: Any, pad: bool) -> tuple[int, int]:
    """Return ``(distance, longest_length)`` for two prepared sequences."""
    len1 = len(s1)
    len2 = len(s2)
    if len1 != len2 and not pad:
        logger.debug("Length check failed: %d != %d", len1, len2)
        raise LengthMismatchError(len1, len2)
    return abs(len1 - len2) + _mismatches(s1, s2), max(len1, len2)


def _normalized_distance(
    s1: Any, s2: Any, processor: Callable[..., Any] | None
) -> float:
    same = s1 is s2
    s1, s2 = _prepare(s1, s2, processor)
    if same:
        return 0.0

    if len(s1) > len(s2):
        s1, s2 = s2, s1

    # empty vs empty is a perfect match
    if not len(s2):
        return 0.0

    dist = len(s2) - len(s1) + _mismatches(s1, s2)
    return dist / len(s2)


def hamming_distance(
    s1: Any,
    s2: Any,
    *,
    pad: bool = False,
    processor: Callable[..., Any] | None = None,
    score_cutoff: int | None = None,
) -> int:
    """
    Number of positions at which two equal-length sequences differ.

    Parameters
    ----------
    s1, s2 : Sequence
        Strings, bytes or any positionally indexable sequences whose elements
        support ``!=``. Data-framework columns are converted by
        :func:`hamfuzz.compat.coerce_sequence`.
    pad : bool
        Allow sequences of different lengths, counting the length gap as
        mismatches. Disabled by default.
    processor : callable, optional
        Applied to both sequences before comparing them.
    score_cutoff : int, optional
        Maximum distance of interest. Larger distances are reported as
        ``score_cutoff + 1``.

    Raises
    ------
    LengthMismatchError
        If the lengths differ and ``pad`` is false.

    >>> hamming_distance("karolin", "kathrin")
    3

    Passing the same object twice returns 0 without scanning, once both
    inputs have been validated.
    """
    same = s1 is s2
    s1, s2 = _prepare(s1, s2, processor)
    dist = 0 if same else _padded_distance(s1, s2, pad)[0]
    return dist if score_cutoff is None or dist <= score_cutoff else score_cutoff + 1


def hamming_similarity(
    s1: Any,
    s2: Any,
    *,
    pad: bool = False,
    processor: Callable[..., Any] | None = None,
    score_cutoff: int | None = None,
) -> int:
    """
    Number of positions at which two sequences agree, i.e. the length of the
    longer sequence minus :func:`hamming_distance`.
    """
    same = s1 is s2
    s1, s2 = _prepare(s1, s2, processor)
    if same:
        sim = len(s1)
    else:
        dist, length = _padded_distance(s1, s2, pad)
        sim = length - dist
    return sim if score_cutoff is None or sim >= score_cutoff else 0


def hamming_normalized_distance(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """
    Hamming-style dissimilarity in ``[0, 1]`` for sequences of any length.

    The shorter sequence is compared against the prefix of the longer one and
    every trailing position of the longer sequence counts as a mismatch. No
    alignment is searched for. Two empty sequences have a distance of ``0.0``.

    >>> hamming_normalized_distance("ab", "abc")
    0.3333333333333333
    """
    dist = _normalized_distance(s1, s2, processor)
    return dist if score_cutoff is None or dist <= score_cutoff else 1.0


def hamming_normalized_similarity(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """
    ``1 - hamming_normalized_distance(s1, s2)``.

    The subtraction is taken literally, so the result carries its float
    rounding: ``("ab", "abc")`` gives ``0.6666666666666667``, not ``2 / 3``.
    """
    sim = 1.0 - _normalized_distance(s1, s2, processor)
    return sim if score_cutoff is None or sim >= score_cutoff else 0.0


def hamming_bitwise_distance(
    a: int,
    b: int,
    *,
    bit_width: int = DEFAULT_BIT_WIDTH,
) -> int:
    """
    Number of differing bits between two integers, ``popcount(a ^ b)``.

    Operands are read as two's-complement patterns of ``bit_width`` bits, so
    negative numbers count their sign-extended bits up to that width only.
    The loop clears the lowest set bit on each pass and therefore runs once
    per differing bit rather than once per bit of the word.

    >>> hamming_bitwise_distance(1, 2)
    2
    >>> hamming_bitwise_distance(-1, 0, bit_width=32)
    32
    """
    bit_width = operator.index(bit_width)
    if bit_width < 1:
        raise ValueError(f"bit_width must be a positive integer, got {bit_width}")

    xor = (operator.index(a) ^ operator.index(b)) & ((1 << bit_width) - 1)

    d = 0
    while xor:
        d += 1
        xor &= xor - 1
    return d


__all__ = [
    "DEFAULT_BIT_WIDTH",
    "hamming_distance",
    "hamming_similarity",
    "hamming_normalized_distance",
    "hamming_normalized_similarity",
    "hamming_bitwise_distance",
]
