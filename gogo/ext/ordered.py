"""Sorting items by an order key they provide."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Ordered(Protocol):
    """Something that knows its place in a sequence."""

    def order(self) -> str:
        """Return the key the item sorts by."""


class OrderedList(list):
    """A list of :class:`Ordered` items."""

    def sort_by_order(self) -> None:
        """Sort the items in place by their ``order()`` key."""
        self.sort(key=lambda item: item.order())


def join_ordered(*args: Any) -> OrderedList:
    """Collect the given items into an :class:`OrderedList`."""
    return OrderedList(args)