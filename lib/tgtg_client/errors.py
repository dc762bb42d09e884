from __future__ import annotations

import httpx
from pydantic import ConfigDict

from .models import WireModel


class TgtgClientError(Exception):
    """Base client error."""


class ArgumentError(TgtgClientError):
    """Invalid input passed to one of the API calls."""

    def __init__(self, argument: str, reason: str):
        super().__init__(f"{argument} argument is invalid (reason: {reason})")
        self.argument = argument
        self.reason = reason


class ConfigurationError(TgtgClientError):
    """Base URL or request path could not be resolved."""


class DecodeError(TgtgClientError):
    """Successful response whose body does not match the expected structure."""

    def __init__(self, message: str, response: httpx.Response | None = None):
        super().__init__(message)
        self.response = response


class ErrorEntry(WireModel):
    model_config = ConfigDict(frozen=True)

    code: str = ""
    message: str = ""


class ApiError(TgtgClientError):
    """Non-2xx response from the API."""

    def __init__(self, response: httpx.Response, errors: list[ErrorEntry] | None = None):
        self.response = response
        self.method = response.request.method
        self.url = str(response.request.url)
        self.status_code = response.status_code
        self.errors = list(errors or [])
        super().__init__(self._format())

    def _format(self) -> str:
        errors = ", ".join(
            f"{e.code}: {e.message}" if e.message else e.code for e in self.errors
        )
        return f"{self.method} {self.url} failed with {self.status_code} [{errors}]"

    @property
    def codes(self) -> list[str]:
        return [e.code for e in self.errors]


class AuthError(ApiError):
    """Auth-related API error."""
