import threading

import pytest

from gogo.ext.consumers import SyncConsumers
from gogo.fn.consumer import Consumer
from gogo.lang.errors import MultiError


def test_consumers_accept_then_remove():
    calls = []
    done = threading.Event()

    def count(value):
        calls.append(value)
        done.set()

    consumers = SyncConsumers()
    assert consumers.append_consumer(Consumer(count)) is consumers
    assert consumers.accept("ABC") is None
    assert done.wait(5)
    assert calls == ["ABC"]

    assert consumers.remove_consumer(Consumer(count)) is consumers
    assert consumers.checked_accept("ABC") is None
    assert calls == ["ABC"]


def test_append_is_unique():
    calls = []
    consumer = Consumer(calls.append)
    consumers = SyncConsumers()
    consumers.append_consumer(consumer).append_consumer(consumer)
    consumers.checked_accept(1)
    assert calls == [1]


def test_append_and_remove_return_self():
    consumers = SyncConsumers()
    consumer = Consumer(print)
    assert consumers.append_consumer(consumer) is consumers
    assert consumers.remove_consumer(consumer) is consumers


def test_checked_accept_single_failure():
    def fail(_):
        raise ValueError("bad")

    consumers = SyncConsumers().append_consumer(Consumer(fail))
    with pytest.raises(ValueError, match="bad"):
        consumers.checked_accept("x")


def test_checked_accept_several_failures():
    def fail_a(_):
        raise ValueError("a")

    def fail_b(_):
        raise KeyError("b")

    consumers = SyncConsumers()
    consumers.append_consumer(Consumer(fail_a)).append_consumer(Consumer(fail_b))
    with pytest.raises(MultiError) as excinfo:
        consumers.checked_accept("x")
    assert len(excinfo.value) == 2