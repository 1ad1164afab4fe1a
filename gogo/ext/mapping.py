"""Building new dicts from existing ones."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

K = TypeVar("K")
V = TypeVar("V")


def map_with_default(values: Mapping[K, V], defaults: Mapping[K, V]) -> dict[K, V]:
    """Return ``defaults`` overlaid with ``values``."""
    return {**defaults, **values}


def map_with_value_func(values: Mapping[K, V], mapper: Any) -> dict[K, Any]:
    """Return a dict with each value replaced by ``mapper`` applied to it.

    ``mapper`` is a plain callable or an object with an ``apply`` method.
    """
    apply = getattr(mapper, "apply", mapper)
    return {key: apply(value) for key, value in values.items()}


def map_with_key_value_func(values: Mapping[K, V], mapper: Any) -> dict[K, Any]:
    """Return a dict with each value replaced by ``mapper(key, value)``."""
    apply = getattr(mapper, "apply", mapper)
    return {key: apply(key, value) for key, value in values.items()}