"""
hamfuzz — performance regression benchmarks vs rapidfuzz.

Run once to establish a baseline:
    uv run pytest tests/test_benchmarks.py --benchmark-save=baseline

Compare against baseline (10% regression threshold):
    uv run pytest tests/test_benchmarks.py --benchmark-compare=baseline --benchmark-compare-fail=mean:10%

Run only a single group:
    uv run pytest tests/test_benchmarks.py -k "bitwise"
"""

from __future__ import annotations

import random
import string

import pytest
from rapidfuzz.distance import Hamming as rf_Hamming

from hamfuzz.distance import Hamming

# ---------------------------------------------------------------------------
# Representative sequence pairs — keyed by scenario
# ---------------------------------------------------------------------------

# Short: 5-char "typo" pair
SHORT_A = "hello"
SHORT_B = "hallo"

# Medium: 19-char, same length, low similarity
MEDIUM_LOW_A = "abcdefghijklmnopqrs"
MEDIUM_LOW_B = "zyxwvutsrqponmlkjih"

# Long: 400-char synthetic, ~50% similarity
LONG_A = "a" * 200 + "b" * 200
LONG_B = "a" * 195 + "c" * 205

# Unequal lengths, exercised through the padded / normalized paths
UNEVEN_A = "the quick brown fox jumps over the lazy dog"
UNEVEN_B = "the quick brown fox jumped over a lazy dog"

# Unicode (non-ASCII) pair
UNICODE_A = "Héllo wörld — café naïf"
UNICODE_B = "Hello world — cafe naif"

rng = random.Random(42)
RANDOM_PAIRS = [
    (
        "".join(rng.choices("ACGT", k=n)),
        "".join(rng.choices("ACGT", k=n)),
    )
    for n in (rng.randint(0, 64) for _ in range(200))
]
RANDOM_UNEVEN = [
    (
        "".join(rng.choices(string.ascii_lowercase, k=rng.randint(0, 30))),
        "".join(rng.choices(string.ascii_lowercase, k=rng.randint(0, 30))),
    )
    for _ in range(200)
]

HASH_A = 0xF0E1D2C3B4A59687
HASH_B = 0x0F1E2D3C4B5A6978


# ---------------------------------------------------------------------------
# Consistency with rapidfuzz
# ---------------------------------------------------------------------------
@pytest.mark.parametrize(("s1", "s2"), RANDOM_PAIRS)
def test_distance_matches_rapidfuzz(s1: str, s2: str) -> None:
    assert Hamming.distance(s1, s2) == rf_Hamming.distance(s1, s2, pad=False)


@pytest.mark.parametrize(("s1", "s2"), RANDOM_UNEVEN)
def test_padded_distance_matches_rapidfuzz(s1: str, s2: str) -> None:
    assert Hamming.distance(s1, s2, pad=True) == rf_Hamming.distance(s1, s2, pad=True)
    assert Hamming.normalized_distance(s1, s2) == pytest.approx(
        rf_Hamming.normalized_distance(s1, s2, pad=True)
    )


def test_unicode_matches_rapidfuzz() -> None:
    assert Hamming.distance(UNICODE_A, UNICODE_B) == rf_Hamming.distance(
        UNICODE_A, UNICODE_B
    )


# ---------------------------------------------------------------------------
# Hamming.distance — short
# ---------------------------------------------------------------------------
def test_hamming_distance_short(benchmark: pytest.FixtureRequest) -> None:
    benchmark(Hamming.distance, SHORT_A, SHORT_B)

def test_rf_hamming_distance_short(benchmark: pytest.FixtureRequest) -> None:
    benchmark(rf_Hamming.distance, SHORT_A, SHORT_B)


# ---------------------------------------------------------------------------
# Hamming.distance — medium low-sim
# ---------------------------------------------------------------------------
def test_hamming_distance_medium_low_sim(benchmark: pytest.FixtureRequest) -> None:
    benchmark(Hamming.distance, MEDIUM_LOW_A, MEDIUM_LOW_B)

def test_rf_hamming_distance_medium_low_sim(benchmark: pytest.FixtureRequest) -> None:
    benchmark(rf_Hamming.distance, MEDIUM_LOW_A, MEDIUM_LOW_B)


# ---------------------------------------------------------------------------
# Hamming.distance — long
# ---------------------------------------------------------------------------
def test_hamming_distance_long(benchmark: pytest.FixtureRequest) -> None:
    benchmark(Hamming.distance, LONG_A, LONG_B)

def test_rf_hamming_distance_long(benchmark: pytest.FixtureRequest) -> None:
    benchmark(rf_Hamming.distance, LONG_A, LONG_B)


# ---------------------------------------------------------------------------
# Hamming.normalized_distance — unequal lengths
# ---------------------------------------------------------------------------
def test_hamming_normalized_distance_uneven(benchmark: pytest.FixtureRequest) -> None:
    benchmark(Hamming.normalized_distance, UNEVEN_A, UNEVEN_B)

def test_rf_hamming_normalized_distance_uneven(benchmark: pytest.FixtureRequest) -> None:
    benchmark(rf_Hamming.normalized_distance, UNEVEN_A, UNEVEN_B)


# ---------------------------------------------------------------------------
# Hamming.bitwise_distance — 64-bit perceptual hashes
# ---------------------------------------------------------------------------
def test_hamming_bitwise_distance(benchmark: pytest.FixtureRequest) -> None:
    result = benchmark(Hamming.bitwise_distance, HASH_A, HASH_B)
    assert result == 64
