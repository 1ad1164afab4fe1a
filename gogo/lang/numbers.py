"""Minimum and maximum of two numbers."""

from __future__ import annotations


def min_of(x: int, y: int) -> int:
    """Return the smaller of ``x`` and ``y``."""
    return y if x > y else x


def max_of(x: int, y: int) -> int:
    """Return the larger of ``x`` and ``y``."""
    return y if x < y else x