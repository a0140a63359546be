"""Grid and result sources: source-agnostic factory and re-exports."""

from __future__ import annotations

from .base import EventDataSource
from .source import SourceKind
from .static_repo import StaticDataSource, default_grid


def get_source(kind: SourceKind | str = SourceKind.STATIC) -> EventDataSource:
    """Return a data source for the requested backend."""
    if SourceKind(kind) == SourceKind.OPENF1:
        from .openf1_repo import OpenF1DataSource

        return OpenF1DataSource()
    return StaticDataSource()


__all__ = [
    "EventDataSource",
    "SourceKind",
    "StaticDataSource",
    "default_grid",
    "get_source",
]
