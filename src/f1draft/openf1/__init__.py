"""Minimal typed client for the OpenF1 API."""

from .client import OpenF1Client
from .exceptions import (
    OpenF1APIError,
    OpenF1ConnectionError,
    OpenF1Error,
    OpenF1TimeoutError,
    OpenF1ValidationError,
)

__all__ = [
    "OpenF1APIError",
    "OpenF1Client",
    "OpenF1ConnectionError",
    "OpenF1Error",
    "OpenF1TimeoutError",
    "OpenF1ValidationError",
]
