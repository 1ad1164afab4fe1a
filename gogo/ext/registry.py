"""Named registries of items."""

from __future__ import annotations

import threading
from typing import Generic, TypeVar

from gogo.lang.zero import is_zero

T = TypeVar("T")


class RegistryError(Exception):
    """A failure to register or look up an item."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"RegistryError: {self.message}"


class SimpleRegistry(Generic[T]):
    """A registry where every name must be registered before lookup."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._table: dict[str, T] = {}

    def register(self, name: str, item: T) -> None:
        """Register ``item`` under ``name``; zero items and duplicates are refused."""
        with self._lock:
            if is_zero(item):
                raise RegistryError("register item is zero value")
            if name in self._table:
                raise RegistryError(f'multiple registrations for "{name}"')
            self._table[name] = item

    def get(self, name: str) -> T:
        """Return the item under ``name``; raise RegistryError if there is none."""
        with self._lock:
            try:
                return self._table[name]
            except KeyError:
                raise RegistryError(f'none registrations for "{name}"') from None


class DefaultRegistry(Generic[T]):
    """A registry that falls back to a default item for unknown names."""

    def __init__(self, def_name: str, def_item: T) -> None:
        self._lock = threading.Lock()
        self._table: dict[str, T] = {}
        self._def_name = def_name
        self._def_item = def_item

    def register(self, name: str, item: T) -> None:
        """Register ``item`` under ``name``; the default name may not be used."""
        with self._lock:
            if is_zero(item):
                raise RegistryError("register item is zero value")
            if name == self._def_name:
                raise RegistryError("register item name is illegal")
            if name in self._table:
                raise RegistryError(f'multiple registrations for "{name}"')
            self._table[name] = item

    def get(self, name: str) -> T:
        """Return the item under ``name``, or the default item."""
        with self._lock:
            if name == self._def_name:
                return self._def_item
            return self._table.get(name, self._def_item)