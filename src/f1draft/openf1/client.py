"""Typed client for the handful of OpenF1 endpoints a draft needs."""

from __future__ import annotations

from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from .exceptions import (
    OpenF1APIError,
    OpenF1ConnectionError,
    OpenF1TimeoutError,
    OpenF1ValidationError,
)
from .models import Driver, Lap, Session, SessionResult, StartingGrid

DEFAULT_BASE_URL = "https://api.openf1.org/v1"
DEFAULT_TIMEOUT = 30.0

T = TypeVar("T")


def build_query_params(**filters: Any) -> list[tuple[str, str]]:
    """Turn keyword filters into (key, value) pairs, dropping None values."""
    return [(key, str(value)) for key, value in filters.items() if value is not None]


class OpenF1Client:
    """Synchronous OpenF1 client.

    Every failure surfaces as an :class:`~f1draft.openf1.exceptions.OpenF1Error`
    carrying the endpoint name.

    Usage:
        with OpenF1Client() as f1:
            grid = f1.starting_grid(session_key=9161)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._http = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    def __enter__(self) -> OpenF1Client:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def fetch(self, endpoint: str, **filters: Any) -> list[dict[str, Any]]:
        """GET an endpoint and return the raw JSON rows."""
        try:
            response = self._http.get(endpoint, params=build_query_params(**filters))
        except httpx.ConnectError as exc:
            raise OpenF1ConnectionError(endpoint, str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise OpenF1TimeoutError(endpoint, str(exc)) from exc

        if response.is_error:
            raise OpenF1APIError(endpoint, response.status_code, response.text)
        return response.json()  # type: ignore[no-any-return]

    def _get(self, endpoint: str, model: type[T], **filters: Any) -> list[T]:
        rows = self.fetch(endpoint, **filters)
        try:
            return TypeAdapter(list[model]).validate_python(rows)
        except ValidationError as exc:
            raise OpenF1ValidationError(endpoint, f"bad {model.__name__} payload: {exc}") from exc

    # ── Endpoints ──────────────────────────────────────────────

    def drivers(self, **filters: Any) -> list[Driver]:
        """Drivers entered in a session."""
        return self._get("/drivers", Driver, **filters)

    def laps(self, **filters: Any) -> list[Lap]:
        return self._get("/laps", Lap, **filters)

    def sessions(self, **filters: Any) -> list[Session]:
        return self._get("/sessions", Session, **filters)

    def session_result(self, **filters: Any) -> list[SessionResult]:
        """Final classification after a session."""
        return self._get("/session_result", SessionResult, **filters)

    def starting_grid(self, **filters: Any) -> list[StartingGrid]:
        return self._get("/starting_grid", StartingGrid, **filters)
