"""Wrappers that run a callable in a worker thread and report its failures."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any

from gogo.fn.consumer import Consumer
from gogo.fn.function import Function
from gogo.fn.runnable import Runnable
from gogo.fn.supplier import Supplier
from gogo.lang.panic import Panicked, error_of_panic


def _call_guarded(call: Callable[[], Any], checked: bool) -> Any:
    """Run ``call`` in a worker thread.

    Failures of a checked target are raised as they are; failures of an
    unchecked target are unexpected and are raised wrapped in a PanicError.
    """
    outcome: dict[str, Any] = {}
    panicked = Panicked()

    def work() -> None:
        with panicked.recover():
            try:
                outcome["value"] = call()
            except Exception as exc:
                if not checked:
                    raise
                outcome["error"] = exc

    worker = threading.Thread(target=work, daemon=True)
    worker.start()
    worker.join()

    caught = panicked.caught()
    if not caught.empty():
        origin = caught.get_nowait()
        raise error_of_panic(origin) from origin
    if "error" in outcome:
        raise outcome["error"]
    return outcome.get("value")


def _is_checked(target: Any) -> bool:
    return getattr(target, "checked", True)


def must_run(runnable: Any) -> Runnable:
    """Return a checked action that runs ``runnable`` safely in a worker thread."""
    return Runnable(
        lambda: _call_guarded(runnable.checked_run, _is_checked(runnable)),
        checked=True,
    )


def must_get(supplier: Any) -> Supplier[Any]:
    """Return a checked supplier that calls ``supplier`` safely in a worker thread."""
    return Supplier(
        lambda: _call_guarded(supplier.checked_get, _is_checked(supplier)),
        checked=True,
        default=getattr(supplier, "default", None),
    )


def must_accept(consumer: Any) -> Consumer[Any]:
    """Return a checked consumer that calls ``consumer`` safely in a worker thread."""
    return Consumer(
        lambda value: _call_guarded(
            lambda: consumer.checked_accept(value), _is_checked(consumer)
        ),
        checked=True,
    )


def must_apply(function: Any) -> Function[Any, Any]:
    """Return a checked function that calls ``function`` safely in a worker thread."""
    return Function(
        lambda value: _call_guarded(
            lambda: function.checked_apply(value), _is_checked(function)
        ),
        checked=True,
        default=getattr(function, "default", None),
    )