"""Callables that take one value and return nothing."""

from __future__ import annotations

import queue
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from gogo.lang.errors import MultiError

T = TypeVar("T")


@dataclass(frozen=True)
class Consumer(Generic[T]):
    """An action on one value.

    A checked consumer may fail: :meth:`accept` swallows its exceptions and
    :meth:`checked_accept` lets them through. An unchecked consumer's
    exceptions always propagate.
    """

    func: Callable[[T], object]
    checked: bool = False

    def accept(self, value: T) -> None:
        """Consume ``value``, ignoring failures of a checked consumer."""
        if not self.checked:
            self.func(value)
            return
        try:
            self.func(value)
        except Exception:
            pass

    def checked_accept(self, value: T) -> None:
        """Consume ``value`` and let any exception propagate."""
        self.func(value)


class Consumers(list):
    """Several consumers fed the same value concurrently."""

    def accept(self, value: Any) -> None:
        """Hand ``value`` to every consumer in its own thread without waiting."""
        for consumer in self:
            threading.Thread(target=consumer.accept, args=(value,), daemon=True).start()

    def checked_accept(self, value: Any) -> None:
        """Hand ``value`` to every consumer concurrently and wait for all.

        Raises the single failure, or a :class:`MultiError` when several fail.
        """
        errors = MultiError()
        lock = threading.Lock()

        def work(consumer: Any) -> None:
            try:
                consumer.checked_accept(value)
            except Exception as exc:
                with lock:
                    errors.append(exc)

        threads = [threading.Thread(target=work, args=(c,), daemon=True) for c in self]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        error = errors.maybe_unwrap()
        if error is not None:
            raise error


def consumer_queue(queue: queue.Queue) -> Consumer[Any]:
    """Return a consumer that puts each value into ``queue``."""
    return Consumer(queue.put)


def _discard(value: Any) -> None:
    return None


def ignore() -> Consumer[Any]:
    """Return a consumer that discards its value."""
    return Consumer(_discard)


def join_consumers(*args: Any) -> Consumers:
    """Combine consumers into one that feeds them all."""
    return Consumers(args)