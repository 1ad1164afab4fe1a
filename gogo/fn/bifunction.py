"""Callables from two values to a result."""

from __future__ import annotations

import functools
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from gogo.fn.function import Function

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


@dataclass(frozen=True)
class BiFunction(Generic[T, U, R]):
    """A mapping from two values to a result.

    ``default`` is returned by :meth:`apply` when a checked function fails.
    An unchecked function's exceptions always propagate.
    """

    func: Callable[[T, U], R]
    checked: bool = False
    default: Any = None

    def apply(self, t: T, u: U) -> R:
        """Return the result, or ``default`` if a checked function fails."""
        if not self.checked:
            return self.func(t, u)
        try:
            return self.func(t, u)
        except Exception:
            return self.default

    def checked_apply(self, t: T, u: U) -> R:
        """Return the result, letting any exception propagate."""
        return self.func(t, u)

    def curry(self) -> Callable[[T], Function[U, R]]:
        """Return a callable that fixes the first argument."""
        return self.partial

    def partial(self, t: T) -> Function[U, R]:
        """Return a one-argument function with ``t`` as the first argument."""
        return Function(
            functools.partial(self.func, t), checked=self.checked, default=self.default
        )