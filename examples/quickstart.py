"""
hamfuzz — Quick-start examples with dummy data.

Run:  uv run python examples/quickstart.py
"""

from __future__ import annotations


def divider(title: str) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}\n")


# ──────────────────────────────────────────────────────────────
# 1. Equal-length sequences  (Hamming.distance)
# ──────────────────────────────────────────────────────────────

def example_distance() -> None:
    divider("1 · Hamming Distance (hamfuzz.distance.Hamming)")

    from hamfuzz import LengthMismatchError
    from hamfuzz.distance import Hamming
    from hamfuzz.utils import default_process

    pairs = [
        ("karolin", "kathrin"),
        ("1011101", "1001001"),
        ("GATTACA", "GACTATA"),
        ("Hello!", "hello?"),
    ]

    for s1, s2 in pairs:
        print(f'  distance("{s1}", "{s2}")   = {Hamming.distance(s1, s2)}')
        print(f'  similarity                    = {Hamming.similarity(s1, s2)}')
        print(
            "  distance (default_process)    = "
            f"{Hamming.distance(s1, s2, processor=default_process)}"
        )
        print()

    tokens_a = ["the", "cat", "sat", "on", "the", "mat"]
    tokens_b = ["the", "dog", "sat", "on", "a", "mat"]
    print(f"  token lists                   = {Hamming.distance(tokens_a, tokens_b)}")

    try:
        Hamming.distance("abc", "ab")
    except LengthMismatchError as e:
        print(f"\n  distance('abc', 'ab') → {type(e).__name__}: {e}")
    print(f"  distance('abc', 'ab', pad=True) = {Hamming.distance('abc', 'ab', pad=True)}")


# ──────────────────────────────────────────────────────────────
# 2. Sequences of any length  (normalized scores)
# ──────────────────────────────────────────────────────────────

def example_normalized() -> None:
    divider("2 · Normalized Scores")

    from hamfuzz.distance import Hamming

    pairs = [("ab", "abc"), ("", ""), ("night", "nacht"), ("abcd", "xabcd")]
    for s1, s2 in pairs:
        nd = Hamming.normalized_distance(s1, s2)
        ns = Hamming.normalized_similarity(s1, s2)
        print(f'  "{s1}" vs "{s2}":  normalized_distance={nd:.3f}  normalized_similarity={ns:.3f}')

    score = Hamming.normalized_similarity("night", "nacht", score_cutoff=0.8)
    print(f"\n  normalized_similarity with score_cutoff=0.8 → {score}")


# ──────────────────────────────────────────────────────────────
# 3. Integers  (Hamming.bitwise_distance)
# ──────────────────────────────────────────────────────────────

def example_bitwise() -> None:
    divider("3 · Bitwise Distance (perceptual hashes)")

    from hamfuzz.distance import Hamming

    hashes = {
        "frame_001": 0xF0E1D2C3B4A59687,
        "frame_002": 0xF0E1D2C3B4A59685,
        "frame_003": 0x0F1E2D3C4B5A6978,
    }
    ref = hashes["frame_001"]
    for name, value in hashes.items():
        dist = Hamming.bitwise_distance(ref, value)
        print(f"  frame_001 vs {name}: {dist:2d} bits  (similarity {1 - dist / 64:.3f})")

    print(f"\n  bitwise_distance(-1, 0)               = {Hamming.bitwise_distance(-1, 0)}")
    print(f"  bitwise_distance(-1, 0, bit_width=32) = {Hamming.bitwise_distance(-1, 0, bit_width=32)}")


# ──────────────────────────────────────────────────────────────
# 4. Data frameworks  (hamfuzz.compat)
# ──────────────────────────────────────────────────────────────

def example_data_frameworks() -> None:
    divider("4 · Data Framework Columns")

    from hamfuzz.distance import Hamming

    try:
        import numpy as np

        a = np.array([0, 1, 1, 0, 1, 0, 0, 1])
        b = np.array([0, 1, 0, 0, 1, 1, 0, 1])
        print(f"  NumPy arrays → distance = {Hamming.distance(a, b)}")
    except ImportError:
        print("  [skipped — numpy not installed]")

    try:
        import pandas as pd

        a = pd.Series(list("GATTACA"), index=list("abcdefg"))
        b = pd.Series(list("GACTATA"))
        print(f"  Pandas Series → distance = {Hamming.distance(a, b)}  (positional, index ignored)")
    except ImportError:
        print("  [skipped — pandas not installed]")


# ──────────────────────────────────────────────────────────────
# Main
# ──────────────────────────────────────────────────────────────

if __name__ == "__main__":
    example_distance()
    example_normalized()
    example_bitwise()
    example_data_frameworks()

    print("\n✅  All examples completed!\n")
