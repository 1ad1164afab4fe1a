"""Strict deep equality that also requires matching types."""

from __future__ import annotations

from typing import Any

_CONTAINERS = (list, tuple, dict)


def equal(x: Any, y: Any) -> bool:
    """Return True when ``x`` and ``y`` have the same type and are deeply equal.

    ``None`` equals only ``None``. Lists, tuples and dicts are compared
    element by element, and self-referencing structures are handled.
    Functions and other plain objects compare by their own ``==``, which for
    functions means identity.
    """
    if x is None or y is None:
        return x is y
    return _deep_equal(x, y, set())


def _deep_equal(x: Any, y: Any, visited: set[tuple[int, int]]) -> bool:
    if type(x) is not type(y):
        return False

    if isinstance(x, _CONTAINERS):
        if x is y:
            return True
        key = (id(x), id(y)) if id(x) <= id(y) else (id(y), id(x))
        if key in visited:
            # A comparison already in progress is assumed to hold.
            return True
        visited.add(key)

        if isinstance(x, dict):
            if len(x) != len(y):
                return False
            for k, v in x.items():
                if k not in y or not _deep_equal(v, y[k], visited):
                    return False
            return True

        if len(x) != len(y):
            return False
        return all(_deep_equal(a, b, visited) for a, b in zip(x, y))

    return bool(x == y)