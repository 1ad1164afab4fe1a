"""Topic-based publish and subscribe with asynchronous delivery."""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from gogo.fn.consumer import Consumer, consumer_queue
from gogo.lang.slices import append_element_unique, remove_element_by_value


class Subscriber(Protocol):
    """Something that receives published messages."""

    def subscribe(self, message: Any) -> None:
        """Receive one published message."""


def _deliver(subscriber: Any, message: Any) -> None:
    threading.Thread(target=subscriber.subscribe, args=(message,), daemon=True).start()


class PubSub:
    """A hub that routes messages to the subscribers of a topic."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._subscribers: dict[str, list[Any]] = {}

    def subscribe(self, topic: str, subscriber: Any) -> None:
        """Add ``subscriber`` to ``topic``, moving an equal one to the end."""
        with self._lock:
            self._subscribers[topic] = append_element_unique(
                self._subscribers.get(topic, []), subscriber
            )

    def unsubscribe(self, topic: str, subscriber: Any) -> None:
        """Remove every subscriber of ``topic`` equal to ``subscriber``."""
        with self._lock:
            if topic in self._subscribers:
                self._subscribers[topic] = remove_element_by_value(
                    self._subscribers[topic], subscriber
                )

    def publish(self, topic: str, message: Any) -> None:
        """Deliver ``message`` to each subscriber of ``topic`` in its own thread."""
        with self._lock:
            subscribers = list(self._subscribers.get(topic, ()))
        for subscriber in subscribers:
            _deliver(subscriber, message)


@dataclass(frozen=True)
class SubscribeConsumer:
    """A subscriber that passes messages of one type on to a consumer."""

    consumer: Any
    type_: type

    def subscribe(self, message: Any) -> None:
        """Pass ``message`` on if it is of the accepted type; ignore it otherwise."""
        if isinstance(message, self.type_):
            self.consumer.accept(message)


class Subscribers(list):
    """Several subscribers that receive each message concurrently."""

    def subscribe(self, message: Any) -> None:
        """Deliver ``message`` to every subscriber in its own thread."""
        for subscriber in self:
            _deliver(subscriber, message)


def sub_consumer(consumer: Any, type_: type) -> SubscribeConsumer:
    """Return a subscriber feeding messages of ``type_`` to ``consumer``."""
    return SubscribeConsumer(consumer, type_)


def sub_fn(func: Callable[[Any], object], type_: type) -> SubscribeConsumer:
    """Return a subscriber calling ``func`` with messages of ``type_``."""
    return sub_consumer(Consumer(func), type_)


def sub_queue(queue: Any, type_: type) -> SubscribeConsumer:
    """Return a subscriber putting messages of ``type_`` into ``queue``."""
    return sub_consumer(consumer_queue(queue), type_)


def join_subscribers(*args: Any) -> Subscribers:
    """Combine subscribers into one."""
    return Subscribers(args)


_GLOBAL_PUBSUB = PubSub()


def subscribe(topic: str, subscriber: Any) -> None:
    """Subscribe on the process-wide hub."""
    _GLOBAL_PUBSUB.subscribe(topic, subscriber)


def unsubscribe(topic: str, subscriber: Any) -> None:
    """Unsubscribe from the process-wide hub."""
    _GLOBAL_PUBSUB.unsubscribe(topic, subscriber)


def publish(topic: str, message: Any) -> None:
    """Publish on the process-wide hub."""
    _GLOBAL_PUBSUB.publish(topic, message)