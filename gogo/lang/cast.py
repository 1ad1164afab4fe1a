"""Type-checked casting helpers."""

from __future__ import annotations

from typing import Any, TypeVar

T = TypeVar("T")

_VALUE_TYPES = (
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    bytearray,
    tuple,
    list,
    dict,
    set,
    frozenset,
)


def zero(type_: type[T]) -> T | None:
    """Return the zero value of ``type_``: an empty built-in value, else None."""
    if isinstance(type_, type) and issubclass(type_, _VALUE_TYPES):
        try:
            return type_()
        except TypeError:
            return None
    return None


def cast(value: Any, type_: type[T]) -> T:
    """Return ``value`` if it is an instance of ``type_``; raise TypeError otherwise."""
    if not isinstance(value, type_):
        raise TypeError(f"{value!r} type mismatch {type_.__name__}")
    return value


def cast_quietly(value: Any, type_: type[T]) -> T | None:
    """Return ``value`` if it is an instance of ``type_``, else the zero of ``type_``."""
    if isinstance(value, type_):
        return value
    return zero(type_)


def cast_or_zero(value: Any, type_: type[T]) -> T | None:
    """Return the zero of ``type_`` for None, otherwise behave like :func:`cast`."""
    if value is None:
        return zero(type_)
    return cast(value, type_)