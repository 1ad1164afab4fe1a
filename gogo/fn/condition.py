"""Branching on whether a value is zero."""

from __future__ import annotations

from typing import Any

from gogo.fn.consumer import Consumer, ignore
from gogo.fn.function import Function, identity
from gogo.fn.runnable import empty
from gogo.fn.supplier import constant
from gogo.lang.zero import is_zero


def _any_checked(*parts: Any) -> bool:
    return any(getattr(part, "checked", True) for part in parts)


def check_zero_accept(zero_fn: Any, not_zero_fn: Any) -> Consumer[Any]:
    """Return a consumer that runs ``zero_fn`` for zero values, else ``not_zero_fn``."""

    def branch(value: Any) -> None:
        if is_zero(value):
            zero_fn.checked_run()
        else:
            not_zero_fn.checked_accept(value)

    return Consumer(branch, checked=_any_checked(zero_fn, not_zero_fn))


def not_zero_then_accept(not_zero_fn: Any) -> Consumer[Any]:
    """Return a consumer that passes on only values that are not zero."""
    return check_zero_accept(empty(), not_zero_fn)


def is_zero_then_run(zero_fn: Any) -> Consumer[Any]:
    """Return a consumer that runs ``zero_fn`` only for zero values."""
    return check_zero_accept(zero_fn, ignore())


def check_zero_apply(zero_fn: Any, not_zero_fn: Any) -> Function[Any, Any]:
    """Return a function that gets ``zero_fn`` for zero values, else applies ``not_zero_fn``."""

    def branch(value: Any) -> Any:
        if is_zero(value):
            return zero_fn.checked_get()
        return not_zero_fn.checked_apply(value)

    return Function(
        branch,
        checked=_any_checked(zero_fn, not_zero_fn),
        default=getattr(not_zero_fn, "default", None),
    )


def not_zero_then_apply(not_zero_fn: Any) -> Function[Any, Any]:
    """Return a function that maps non-zero values and gives the result's zero otherwise."""
    return check_zero_apply(constant(getattr(not_zero_fn, "default", None)), not_zero_fn)


def is_zero_then_get(zero_fn: Any) -> Function[Any, Any]:
    """Return a function that replaces zero values with what ``zero_fn`` supplies."""
    return check_zero_apply(zero_fn, identity())