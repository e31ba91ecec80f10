"""Registry records tracked by the service container."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class EntryState(str, Enum):
    """Resolution state of a registered key."""

    RAW = "raw"
    UNRESOLVED = "unresolved"
    RESOLVED = "resolved"
    FORCE_NEW = "force_new"


@dataclass(slots=True)
class Entry:
    """Value stored under a key together with its resolution state.

    ``value`` starts out as whatever was passed to ``set``. For a lazy factory
    it is replaced by the factory's output on first resolution, at which point
    the state moves to ``RESOLVED`` and the key is frozen.
    """

    value: Any
    state: EntryState

    @property
    def is_factory(self) -> bool:
        """Whether ``value`` is still a factory awaiting invocation."""
        return self.state in (EntryState.UNRESOLVED, EntryState.FORCE_NEW)

    @property
    def frozen(self) -> bool:
        return self.state is EntryState.RESOLVED


__all__ = ["Entry", "EntryState"]
