"""Errors raised by the service container."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any


class ContainerError(RuntimeError):
    """Base class for every error raised by the container itself."""


class NotFoundError(ContainerError, KeyError):
    """Raised when a key was never registered (or has been removed)."""

    def __init__(self, key: Hashable) -> None:
        self.key = key
        super().__init__(f'Key "{key}" is not registered')

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message instead.
        return str(self.args[0])


class FrozenKeyError(ContainerError):
    """Raised when assigning to a key whose factory has already been resolved."""

    def __init__(self, key: Hashable) -> None:
        self.key = key
        super().__init__(
            f'Cannot assign to key "{key}": it is already resolved and frozen'
        )


class NotInstantiableError(ContainerError):
    """Raised when a non-callable value is marked for re-instantiation."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f'"{value}" is not instantiable')


__all__ = [
    "ContainerError",
    "FrozenKeyError",
    "NotFoundError",
    "NotInstantiableError",
]
