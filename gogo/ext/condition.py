"""Running callbacks depending on whether a value is zero or empty."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from gogo.fn.condition import (
    check_zero_accept,
    check_zero_apply,
    is_zero_then_get,
    not_zero_then_apply,
)
from gogo.fn.consumer import Consumer, ignore
from gogo.fn.function import Function
from gogo.fn.runnable import Runnable, empty
from gogo.fn.supplier import Supplier

T = TypeVar("T")
R = TypeVar("R")


def check_zero_run(
    value: T, zero_fn: Callable[[], object], not_zero_fn: Callable[[T], object]
) -> None:
    """Call ``zero_fn()`` if ``value`` is zero, else ``not_zero_fn(value)``."""
    check_zero_accept(Runnable(zero_fn), Consumer(not_zero_fn)).accept(value)


def not_zero_then_run(value: T, not_zero_fn: Callable[[T], object]) -> None:
    """Call ``not_zero_fn(value)`` only when ``value`` is not zero."""
    check_zero_run(value, empty().run, not_zero_fn)


def zero_then_run(value: Any, zero_fn: Callable[[], object]) -> None:
    """Call ``zero_fn()`` only when ``value`` is zero."""
    check_zero_run(value, zero_fn, ignore().accept)


def check_zero(
    value: T, zero_fn: Callable[[], R], not_zero_fn: Callable[[T], R]
) -> R:
    """Return ``zero_fn()`` if ``value`` is zero, else ``not_zero_fn(value)``."""
    return check_zero_apply(Supplier(zero_fn), Function(not_zero_fn)).apply(value)


def not_zero_then(value: T, not_zero_fn: Callable[[T], R]) -> R | None:
    """Return ``not_zero_fn(value)``, or None when ``value`` is zero."""
    return not_zero_then_apply(Function(not_zero_fn)).apply(value)


def zero_then(value: T, zero_fn: Callable[[], T]) -> T:
    """Return ``value``, or ``zero_fn()`` in its place when it is zero."""
    return is_zero_then_get(Supplier(zero_fn)).apply(value)


def check_empty_run(
    value: str, empty_fn: Callable[[], object], not_empty_fn: Callable[[str], object]
) -> None:
    """Call ``empty_fn()`` for an empty string, else ``not_empty_fn(value)``."""
    check_zero_run(value, empty_fn, not_empty_fn)


def not_empty_then_run(value: str, not_empty_fn: Callable[[str], object]) -> None:
    """Call ``not_empty_fn(value)`` only for a non-empty string."""
    not_zero_then_run(value, not_empty_fn)


def empty_then_run(value: str, empty_fn: Callable[[], object]) -> None:
    """Call ``empty_fn()`` only for an empty string."""
    zero_then_run(value, empty_fn)


def check_empty(
    value: str, empty_fn: Callable[[], R], not_empty_fn: Callable[[str], R]
) -> R:
    """Return ``empty_fn()`` for an empty string, else ``not_empty_fn(value)``."""
    return check_zero(value, empty_fn, not_empty_fn)


def not_empty_then(value: str, not_empty_fn: Callable[[str], R]) -> R | None:
    """Return ``not_empty_fn(value)``, or None for an empty string."""
    return not_zero_then(value, not_empty_fn)


def empty_then(value: str, empty_fn: Callable[[], str]) -> str:
    """Return ``value``, or ``empty_fn()`` in its place when it is empty."""
    return zero_then(value, empty_fn)