"""Turning raised exceptions into values and back."""

from __future__ import annotations

import queue
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any


def raise_if_error(err: BaseException | None) -> None:
    """Raise ``err`` if it is set."""
    if err is not None:
        raise err


class PanicError(Exception):
    """An error that wraps something raised unexpectedly."""

    def __init__(self, origin: Any) -> None:
        super().__init__(f"panicked with {origin}")
        self.origin = origin


def error_of_panic(value: Any) -> PanicError:
    """Wrap ``value`` in a :class:`PanicError`."""
    return PanicError(value)


class Panicked:
    """Collects exceptions caught in worker threads."""

    def __init__(self) -> None:
        self._caught: queue.Queue[BaseException] = queue.Queue()

    @contextmanager
    def recover(self) -> Iterator[None]:
        """Swallow an exception raised in the block and record it."""
        try:
            yield
        except Exception as exc:
            self._caught.put(exc)

    def caught(self) -> queue.Queue[BaseException]:
        """Return the queue that receives recorded exceptions."""
        return self._caught