"""Building lists and dicts from the items of a sequence."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T")


def slice_with_item_func(items: Iterable[T], mapper: Any) -> list[Any]:
    """Return a list of ``mapper`` applied to each item.

    ``mapper`` is a plain callable or an object with an ``apply`` method.
    """
    apply = getattr(mapper, "apply", mapper)
    return [apply(item) for item in items]


def map_with_item_key_func(items: Iterable[T], mapper: Any) -> dict[Any, T]:
    """Return a dict of the items keyed by ``mapper``; later items win."""
    apply = getattr(mapper, "apply", mapper)
    return {apply(item): item for item in items}


def map_with_item_key_value_func(
    items: Iterable[T], key_mapper: Any, value_mapper: Any
) -> dict[Any, Any]:
    """Return a dict built with ``key_mapper`` and ``value_mapper`` per item."""
    key_of = getattr(key_mapper, "apply", key_mapper)
    value_of = getattr(value_mapper, "apply", value_mapper)
    return {key_of(item): value_of(item) for item in items}