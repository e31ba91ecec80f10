"""Minimal service container with lazy singletons and force-new factories."""

from .core import (
    ContainerError,
    FrozenKeyError,
    NotFoundError,
    NotInstantiableError,
    ServiceContainer,
)

__all__ = [
    "ContainerError",
    "FrozenKeyError",
    "NotFoundError",
    "NotInstantiableError",
    "ServiceContainer",
]
