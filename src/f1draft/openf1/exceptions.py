"""OpenF1 request failures, tagged with the endpoint that failed."""

from __future__ import annotations


class OpenF1Error(Exception):
    """A request to one OpenF1 endpoint failed."""

    def __init__(self, endpoint: str, detail: str) -> None:
        self.endpoint = endpoint
        self.detail = detail
        super().__init__(f"{endpoint}: {detail}")


class OpenF1ConnectionError(OpenF1Error):
    """Could not reach the OpenF1 host."""


class OpenF1TimeoutError(OpenF1Error):
    """The request did not complete within the client timeout."""


class OpenF1APIError(OpenF1Error):
    """The API answered with a 4xx/5xx status."""

    def __init__(self, endpoint: str, status_code: int, body: str) -> None:
        self.status_code = status_code
        super().__init__(endpoint, f"HTTP {status_code}: {body}")


class OpenF1ValidationError(OpenF1Error):
    """The payload did not match the expected model."""
