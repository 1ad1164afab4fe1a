"""Lenient conversion of text to a boolean."""

from __future__ import annotations

_TRUE_WORDS = frozenset({"y", "t", "1", "on", "yes", "true"})


def to_bool(text: str) -> bool:
    """Interpret ``text`` as a boolean.

    ``y``, ``t``, ``1``, ``on``, ``yes`` and ``true`` (any ASCII case) are
    true; everything else, including unknown words, is false.
    """
    if not text or not text.isascii():
        return False
    return text.lower() in _TRUE_WORDS