"""Application bootstrap wiring settings into a service container."""

from __future__ import annotations

import logging

from .core import AppSettings, ServiceContainer

LOGGER = logging.getLogger(__name__)

SETTINGS_KEY = "settings"
LOGGER_KEY = "logger"


def _logger_factory(container: ServiceContainer) -> logging.Logger:
    settings: AppSettings = container.get(SETTINGS_KEY)
    return logging.getLogger(settings.container.name)


def build_container(settings: AppSettings) -> ServiceContainer:
    """Create the application-scoped container from loaded settings.

    Registers the settings object, a lazily created application logger and
    every configured parameter as a plain value; callable parameters are
    wrapped so they come back uncalled. Parameters named after the
    reserved keys are rejected so they cannot shadow the built-in services.
    """
    container = ServiceContainer()
    container.set(SETTINGS_KEY, settings)
    container.set(LOGGER_KEY, _logger_factory)

    for name, value in settings.container.parameters.items():
        if name in (SETTINGS_KEY, LOGGER_KEY):
            msg = f"Parameter name '{name}' is reserved"
            raise ValueError(msg)
        if callable(value):
            # Wrap so the container hands back the callable itself.
            container.set(name, lambda _container, value=value: value)
        else:
            container.set(name, value)

    LOGGER.debug(
        "Bootstrapped container %r with %d key(s)",
        settings.container.name,
        len(container),
    )
    return container


__all__ = ["LOGGER_KEY", "SETTINGS_KEY", "build_container"]
