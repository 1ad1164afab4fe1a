"""Callables that take no argument and produce a value."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from gogo.lang.cast import zero as zero_value

T = TypeVar("T")


@dataclass(frozen=True)
class Supplier(Generic[T]):
    """A producer of values.

    ``default`` is what :meth:`get` returns when a checked supplier fails.
    An unchecked supplier is not expected to fail, so its exceptions
    always propagate.
    """

    func: Callable[[], T]
    checked: bool = False
    default: Any = None

    def get(self) -> T:
        """Return the supplied value, or ``default`` if a checked supplier fails."""
        if not self.checked:
            return self.func()
        try:
            return self.func()
        except Exception:
            return self.default

    def checked_get(self) -> T:
        """Return the supplied value, letting any exception propagate."""
        return self.func()


def constant(value: T) -> Supplier[T]:
    """Return a supplier that always yields ``value``."""
    return Supplier(lambda: value)


def zero(default: Any) -> Supplier[Any]:
    """Return a supplier of the zero value of the type ``default``.

    Built-in value types give their empty value; any other type, or None,
    gives None.
    """
    return constant(zero_value(default))