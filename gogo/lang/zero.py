"""Detection of zero values."""

from __future__ import annotations

from typing import Any

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


def is_zero(value: Any) -> bool:
    """Return True for ``None`` and for empty or zero built-in values.

    Any other object is a reference and never counts as zero.
    """
    if value is None:
        return True
    if isinstance(value, _VALUE_TYPES):
        return not value
    return False