"""Pick-log storage layer."""

from .base import (
    PickLogEvent,
    PickLogEventKind,
    PickLogListener,
    PickLogSnapshot,
    PickLogStore,
)
from .memory import InMemoryPickLogStore

__all__ = [
    "InMemoryPickLogStore",
    "PickLogEvent",
    "PickLogEventKind",
    "PickLogListener",
    "PickLogSnapshot",
    "PickLogStore",
]
