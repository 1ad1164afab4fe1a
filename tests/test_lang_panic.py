import queue
import threading

import pytest

from gogo.lang.panic import PanicError, Panicked, error_of_panic, raise_if_error


def test_raise_if_error():
    assert raise_if_error(None) is None
    err = ValueError("panic error")
    with pytest.raises(ValueError, match="panic error") as info:
        raise_if_error(err)
    assert info.value is err


def test_recover_without_exception():
    finished: queue.Queue = queue.Queue()
    panicked = Panicked()

    def work():
        with panicked.recover():
            finished.put(Exception("error"))

    thread = threading.Thread(target=work)
    thread.start()
    thread.join()

    assert str(finished.get(timeout=5)) == "error"
    assert panicked.caught().empty()


def test_recover_with_exception():
    panicked = Panicked()
    raised = RuntimeError("panicked")

    def work():
        with panicked.recover():
            raise raised

    thread = threading.Thread(target=work)
    thread.start()
    thread.join()

    error = error_of_panic(panicked.caught().get(timeout=5))
    assert isinstance(error, PanicError)
    assert str(error) == "panicked with panicked"
    assert error.origin is raised


def test_error_of_panic_with_plain_value():
    error = error_of_panic("panicked")
    assert error.origin == "panicked"
    assert str(error) == "panicked with panicked"