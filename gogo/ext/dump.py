"""Reading a request or response body without consuming it."""

from __future__ import annotations

import io
from typing import Any


def _drain_body(holder: Any) -> bytes | None:
    body = holder.body
    if body is None:
        return None
    try:
        content = body.read()
        body.close()
    except Exception:
        holder.body = None
        raise
    content = bytes(content)
    holder.body = io.BytesIO(content)
    return content


def dump_request_body(request: Any) -> bytes | None:
    """Return the bytes of ``request.body`` and replace it with a fresh copy.

    A missing body (None) gives None. Failures to read or close the body
    propagate, leaving ``request.body`` set to None.
    """
    return _drain_body(request)


def dump_response_body(response: Any) -> bytes | None:
    """Return the bytes of ``response.body`` and replace it with a fresh copy."""
    return _drain_body(response)