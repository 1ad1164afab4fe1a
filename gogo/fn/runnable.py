"""Callables that take no argument and return nothing."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class Runnable:
    """A no-argument action.

    When ``checked`` is true the wrapped callable is expected to fail at
    times: :meth:`run` then swallows its exceptions, while
    :meth:`checked_run` lets them through. An unchecked action is not
    expected to fail, so anything it raises always propagates.
    """

    func: Callable[[], object]
    checked: bool = False

    def run(self) -> None:
        """Run the action, ignoring failures of a checked action."""
        if not self.checked:
            self.func()
            return
        try:
            self.func()
        except Exception:
            pass

    def checked_run(self) -> None:
        """Run the action and let any exception propagate."""
        self.func()


_NONE_TYPE = type(None)


def empty() -> Runnable:
    """Return an action that does nothing."""
    return Runnable(_NONE_TYPE)