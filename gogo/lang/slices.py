"""List helpers based on strict deep equality."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from gogo.lang.equality import equal

T = TypeVar("T")


def remove_element_by_value(items: Iterable[T], value: T) -> list[T]:
    """Return a new list without any element equal to ``value``."""
    return [item for item in items if not equal(item, value)]


def append_element_unique(items: Iterable[T], value: T) -> list[T]:
    """Return a new list with ``value`` moved to, or added at, the end."""
    return [*remove_element_by_value(items, value), value]