"""A thread-safe, mutable set of consumers fed together."""

from __future__ import annotations

import threading
from typing import Any

from gogo.fn.consumer import Consumers
from gogo.lang.slices import append_element_unique, remove_element_by_value


class SyncConsumers:
    """Consumers that can be added and removed while values are being fed."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._consumers = Consumers()

    def _snapshot(self) -> Consumers:
        with self._lock:
            return Consumers(self._consumers)

    def accept(self, value: Any) -> None:
        """Hand ``value`` to every consumer in its own thread without waiting."""
        self._snapshot().accept(value)

    def checked_accept(self, value: Any) -> None:
        """Hand ``value`` to every consumer, wait, and raise any failures."""
        self._snapshot().checked_accept(value)

    def append_consumer(self, consumer: Any) -> SyncConsumers:
        """Add ``consumer``, moving it to the end if an equal one is present."""
        with self._lock:
            self._consumers = Consumers(
                append_element_unique(self._consumers, consumer)
            )
        return self

    def remove_consumer(self, consumer: Any) -> SyncConsumers:
        """Remove every consumer equal to ``consumer``."""
        with self._lock:
            self._consumers = Consumers(
                remove_element_by_value(self._consumers, consumer)
            )
        return self