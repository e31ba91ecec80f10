"""Simple service container for dependency management."""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterator
from typing import Any, TypeVar

from .errors import FrozenKeyError, NotFoundError, NotInstantiableError
from .models import Entry, EntryState

LOGGER = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


class ServiceContainer:
    """Key-value registry with lazy singleton semantics.

    Values registered with :meth:`set` are returned as is, unless they are
    callable. A callable is treated as a factory: it is invoked with the
    container as its only argument on first :meth:`get`, its output replaces
    the factory and the key is frozen against further assignment. Factories
    passed through :meth:`force_new` are invoked on every :meth:`get` instead.

    Example:
        >>> container = ServiceContainer()
        >>> container.set("dsn", "sqlite:///app.db")
        >>> container.set("engine", lambda c: Engine(c.get("dsn")))
        >>> container.set("session", container.force_new(lambda c: Session()))
        >>> container.get("engine") is container.get("engine")
        True

    """

    def __init__(self) -> None:
        """Initialise container storage."""
        self._entries: dict[Hashable, Entry] = {}
        # id() -> factory; holding the factory keeps its id() from being reused
        self._force_new: dict[int, Callable[..., Any]] = {}

    def set(self, key: Hashable, value: Any) -> None:
        """Register a value, factory or object under ``key``.

        Raises:
            FrozenKeyError: If ``key`` holds an already resolved factory.

        """
        current = self._entries.get(key)
        if current is not None and current.frozen:
            raise FrozenKeyError(key)

        self._entries[key] = Entry(value=value, state=self._classify(value))
        LOGGER.debug("Registered key %r as %s", key, self._entries[key].state.value)

    def get(self, key: Hashable) -> Any:
        """Resolve ``key``, invoking its factory when needed.

        A lazy factory is invoked at most once; its output is cached and the
        key frozen. A force-new factory is invoked on every call and leaves the
        entry untouched. Exceptions raised by a factory propagate unchanged and
        leave the entry as it was, so a later call retries the resolution.

        Raises:
            NotFoundError: If ``key`` is not registered.

        """
        entry = self._lookup(key)
        if not entry.is_factory:
            return entry.value

        factory = entry.value
        if entry.state is EntryState.UNRESOLVED and self._is_force_new(factory):
            entry.state = EntryState.FORCE_NEW

        if entry.state is EntryState.FORCE_NEW:
            LOGGER.debug("Creating new instance for key %r", key)
            return factory(self)

        LOGGER.debug("Resolving lazy factory for key %r", key)
        instance = factory(self)
        # The factory may have re-registered or removed its own key.
        if key in self._entries:
            self._entries[key] = Entry(value=instance, state=EntryState.RESOLVED)
            LOGGER.debug("Key %r resolved and frozen", key)
        return instance

    def try_get(self, key: Hashable) -> Any | None:
        """Resolve ``key`` if registered; return None otherwise."""
        try:
            return self.get(key)
        except NotFoundError:
            return None

    def output(self, key: Hashable) -> Any:
        """Return the stored value for ``key`` without invoking anything.

        Before resolution this is the raw factory (or plain value); after
        resolution it is the cached output of the factory.

        Raises:
            NotFoundError: If ``key`` is not registered.

        """
        return self._lookup(key).value

    def has(self, key: Hashable) -> bool:
        """Return whether ``key`` is registered, resolved or not."""
        return key in self._entries

    def remove(self, key: Hashable) -> None:
        """Forget ``key`` and everything recorded about it.

        Removing an unknown key is a no-op. A removed key may be registered
        again and starts out unfrozen.
        """
        entry = self._entries.pop(key, None)
        if entry is None:
            return
        if entry.is_factory:
            self._force_new.pop(id(entry.value), None)
        LOGGER.debug("Removed key %r", key)

    def force_new(self, factory: F) -> F:
        """Mark ``factory`` to be invoked on every retrieval.

        The factory is returned unchanged so registration reads as
        ``container.set(key, container.force_new(factory))``. The mark stays
        with the factory when its key is overwritten by :meth:`set`; only
        :meth:`remove` of a key still holding the factory clears it.

        Raises:
            NotInstantiableError: If ``factory`` is not callable.

        """
        if not callable(factory):
            raise NotInstantiableError(factory)
        self._force_new[id(factory)] = factory
        return factory

    # Introspection ------------------------------------------------------------
    def is_frozen(self, key: Hashable) -> bool:
        """Return whether ``key`` is registered and its factory resolved."""
        entry = self._entries.get(key)
        return entry is not None and entry.frozen

    def state(self, key: Hashable) -> EntryState:
        """Return the resolution state of a registered key."""
        entry = self._lookup(key)
        if entry.state is EntryState.UNRESOLVED and self._is_force_new(entry.value):
            return EntryState.FORCE_NEW
        return entry.state

    def keys(self) -> list[Hashable]:
        """Return registered keys in registration order."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.keys())

    # Internal helpers ---------------------------------------------------------
    def _lookup(self, key: Hashable) -> Entry:
        try:
            return self._entries[key]
        except KeyError:
            raise NotFoundError(key) from None

    def _is_force_new(self, value: Any) -> bool:
        return self._force_new.get(id(value)) is value

    def _classify(self, value: Any) -> EntryState:
        if not callable(value):
            return EntryState.RAW
        if self._is_force_new(value):
            return EntryState.FORCE_NEW
        return EntryState.UNRESOLVED


__all__ = ["ServiceContainer"]
