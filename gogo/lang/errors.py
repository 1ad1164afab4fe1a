"""Error helpers: defaults and aggregation of several errors."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any


def default_error(
    err: BaseException | None, factory: Callable[[], BaseException]
) -> BaseException:
    """Return ``err`` when it is set, otherwise the error made by ``factory``."""
    if err is not None:
        return err
    return factory()


def default_error_msg(err: BaseException | None, fmt: str, *args: Any) -> BaseException:
    """Return ``err`` when it is set, otherwise an error with the formatted message."""
    return default_error(err, lambda: Exception(fmt % args if args else fmt))


class MultiError(Exception):
    """Several errors collected together."""

    def __init__(self, errors: Iterable[BaseException] = ()) -> None:
        super().__init__()
        self.errors: list[BaseException] = [e for e in errors if e is not None]

    def __str__(self) -> str:
        if not self.errors:
            return ""
        lines = [f"{len(self.errors)} error(s) occurred:"]
        lines.extend(f"* {err}" for err in self.errors)
        return "\n".join(lines)

    def __len__(self) -> int:
        return len(self.errors)

    def __iter__(self) -> Iterator[BaseException]:
        return iter(self.errors)

    def append(self, err: BaseException | None) -> None:
        """Add ``err`` unless it is None."""
        if err is not None:
            self.errors.append(err)

    def maybe_unwrap(self) -> BaseException | None:
        """Return None, the single error, or this aggregate, by count."""
        if not self.errors:
            return None
        if len(self.errors) == 1:
            return self.errors[0]
        return self