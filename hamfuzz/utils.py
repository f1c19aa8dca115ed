"""
hamfuzz.utils — string pre-processing helpers for the ``processor`` argument.
"""

from __future__ import annotations


def default_process(sentence: str) -> str:
    """
    Replace non-alphanumeric characters with whitespace, lowercase the
    result and trim surrounding whitespace.

    >>> default_process("  Hello, World! ")
    'hello  world'
    """
    return "".join(ch if ch.isalnum() else " " for ch in sentence).lower().strip()


__all__ = ["default_process"]
