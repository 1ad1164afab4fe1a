"""Callables that take two values and return nothing."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class BiConsumer(Generic[T, U]):
    """An action on two values.

    A checked consumer may fail: :meth:`accept` swallows its exceptions and
    :meth:`checked_accept` lets them through.
    """

    func: Callable[[T, U], object]
    checked: bool = False

    def accept(self, t: T, u: U) -> None:
        """Consume the pair, ignoring failures of a checked consumer."""
        if not self.checked:
            self.func(t, u)
            return
        try:
            self.func(t, u)
        except Exception:
            pass

    def checked_accept(self, t: T, u: U) -> None:
        """Consume the pair and let any exception propagate."""
        self.func(t, u)