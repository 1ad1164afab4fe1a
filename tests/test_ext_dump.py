import io
from types import SimpleNamespace

import pytest

from gogo.ext.dump import dump_request_body, dump_response_body


class _ErrReadBody:
    def read(self, *args):
        raise OSError("error")

    def close(self):
        return None


class _ErrCloseBody:
    def read(self, *args):
        return b""

    def close(self):
        raise OSError("error")


def test_dump_request_without_body():
    request = SimpleNamespace(body=None)
    assert dump_request_body(request) is None
    assert dump_request_body(request) is None
    assert request.body is None


def test_dump_request_read_error():
    request = SimpleNamespace(body=_ErrReadBody())
    with pytest.raises(OSError, match="error"):
        dump_request_body(request)
    assert request.body is None


def test_dump_response_body_twice():
    response = SimpleNamespace(body=io.BytesIO(b"OK"))
    assert dump_response_body(response) == b"OK"
    assert dump_response_body(response) == b"OK"
    assert response.body.read() == b"OK"


def test_dump_response_close_error():
    response = SimpleNamespace(body=_ErrCloseBody())
    with pytest.raises(OSError, match="error"):
        dump_response_body(response)


def test_dump_request_body_closes_original():
    original = io.BytesIO(b"payload")
    request = SimpleNamespace(body=original)
    assert dump_request_body(request) == b"payload"
    assert original.closed
    assert request.body.read() == b"payload"