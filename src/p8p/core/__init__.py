"""Core container, configuration and logging utilities."""

from .config import AppSettings, ContainerSettings, LoggingSettings, load_app_settings
from .container import ServiceContainer
from .errors import (
    ContainerError,
    FrozenKeyError,
    NotFoundError,
    NotInstantiableError,
)
from .logging import configure_logging
from .models import Entry, EntryState

__all__ = [
    "AppSettings",
    "ContainerError",
    "ContainerSettings",
    "Entry",
    "EntryState",
    "FrozenKeyError",
    "LoggingSettings",
    "NotFoundError",
    "NotInstantiableError",
    "ServiceContainer",
    "configure_logging",
    "load_app_settings",
]
