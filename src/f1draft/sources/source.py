"""Data source selection."""

from __future__ import annotations

from enum import Enum


class SourceKind(str, Enum):
    """Supported grid/result backends."""

    STATIC = "static"
    OPENF1 = "openf1"
