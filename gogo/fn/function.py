"""Callables from one value to another."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class Function(Generic[T, R]):
    """A mapping from one value to another.

    ``default`` is the result's zero value, returned by :meth:`apply` when a
    checked function fails. An unchecked function's exceptions always
    propagate.
    """

    func: Callable[[T], R]
    checked: bool = False
    default: Any = None

    def apply(self, value: T) -> R:
        """Return the result, or ``default`` if a checked function fails."""
        if not self.checked:
            return self.func(value)
        try:
            return self.func(value)
        except Exception:
            return self.default

    def checked_apply(self, value: T) -> R:
        """Return the result, letting any exception propagate."""
        return self.func(value)


@dataclass(frozen=True)
class _ComposedFunction:
    before: Any
    after: Any
    checked: bool = True

    @property
    def default(self) -> Any:
        return getattr(self.after, "default", None)

    def apply(self, value: Any) -> Any:
        return self.after.apply(self.before.apply(value))

    def checked_apply(self, value: Any) -> Any:
        return self.after.checked_apply(self.before.checked_apply(value))


def compose_function(before: Any, after: Any) -> _ComposedFunction:
    """Return a function that applies ``before`` and then ``after``.

    Its checked form stops at the first failure.
    """
    return _ComposedFunction(before, after)


def identity() -> Function[Any, Any]:
    """Return a function that returns its argument."""
    return Function(lambda value: value)


def y_combinator(f: Callable[[Callable[[T], T]], Callable[[T], T]]) -> Function[T, T]:
    """Return the fixed point of ``f``, allowing anonymous recursion."""
    return Function(lambda value: f(y_combinator(f).apply)(value))