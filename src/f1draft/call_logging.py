"""File logging for draft commands and data-source fetches.

Both decorators write one line when a call starts and one when it returns or
raises. Source calls report how many records came back; service calls report
the typed outcome (``ok``, ``item_already_taken``, ...) when there is one.

Logs go to ``$F1DRAFT_LOG_DIR/calls.log``, defaulting to ``./logs``.
"""

from __future__ import annotations

import functools
import logging
import os
import threading
import time
from enum import Enum
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

_LOG_DIR = os.environ.get("F1DRAFT_LOG_DIR") or os.path.join(os.getcwd(), "logs")
_LOG_FILE = os.path.join(_LOG_DIR, "calls.log")

LOGGER_NAME = "f1draft.calls"

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def get_logger() -> logging.Logger:
    """Return the call logger, creating the log directory and handler on first use."""
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        os.makedirs(_LOG_DIR, exist_ok=True)
        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False
        if not logger.handlers:
            handler = logging.FileHandler(_LOG_FILE, encoding="utf-8")
            handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"))
            logger.addHandler(handler)
        _logger = logger

    return _logger


def _describe_call(fn: Callable[..., Any], args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    # args[0] is the bound instance
    parts = [repr(a) for a in args[1:]]
    parts += [f"{k}={v!r}" for k, v in kwargs.items()]
    return f"{fn.__qualname__}({', '.join(parts)})"


def _count_records(result: Any) -> str:
    count = len(result) if isinstance(result, list) else 1
    return f"{count} items"


def _summarize_outcome(result: Any) -> str:
    outcome = getattr(result, "outcome", None)
    if isinstance(outcome, Enum):
        return str(outcome.value)
    if isinstance(result, list):
        return f"{len(result)} items"
    return type(result).__name__


def _logged_call(prefix: str, summarize: Callable[[Any], str]) -> Callable[[F], F]:
    def decorator(fn: F) -> F:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            logger = get_logger()
            call = _describe_call(fn, args, kwargs)
            logger.info("%sCALL: %s", prefix, call)

            start = time.monotonic()
            try:
                result = fn(*args, **kwargs)
            except Exception as exc:
                logger.error(
                    "%sFAIL: %s -> %s: %s (%.3fs)",
                    prefix, call, type(exc).__name__, exc, time.monotonic() - start,
                )
                raise
            logger.info(
                "%sOK: %s -> %s (%.3fs)",
                prefix, call, summarize(result), time.monotonic() - start,
            )
            return result

        return wrapper  # type: ignore[return-value]

    return decorator


log_source_call = _logged_call("", _count_records)
"""Decorator for data-source methods; logs the number of records returned."""

log_service_call = _logged_call("SERVICE ", _summarize_outcome)
"""Decorator for draft and results commands; logs the outcome of each call."""
