"""Error taxonomy for the Billingo API client.

Every failure raised by ``BillingoClient.send`` is one of these classes, so
callers can catch ``BillingoError`` and print ``str(error)`` as a single line.
"""

from __future__ import annotations

import json
from typing import Any, Optional


class BillingoError(Exception):
    """Base class for all Billingo client errors."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ConfigurationError(BillingoError):
    """No API key configured. Raised before any network I/O."""


class AuthenticationError(BillingoError):
    """HTTP 401."""


class AuthorizationError(BillingoError):
    """HTTP 403."""


class NotFoundError(BillingoError):
    """HTTP 404."""


class RateLimitError(BillingoError):
    """HTTP 429."""


class ApiError(BillingoError):
    """Any other non-2xx response.

    Attributes:
        status_code: HTTP status returned by the API
        detail: Server message, or a JSON dump of the body when it has none
    """

    def __init__(self, status_code: int, detail: str) -> None:
        super().__init__(f"API Error ({status_code}): {detail}", status_code=status_code)
        self.detail = detail


class NetworkError(BillingoError):
    """The request was sent but no response came back."""


class UnknownError(BillingoError):
    """An httpx failure that is neither a response nor a transport error."""


def describe_body(body: Any, text: str = "") -> str:
    """Pick the message shown for an error response.

    Uses the ``message`` field when present, falls back to a JSON dump of the
    body, then to the raw response text.
    """
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    if body is not None:
        return json.dumps(body, ensure_ascii=False)
    return text or "(empty response)"


def error_for_status(status_code: int, body: Any = None, text: str = "") -> BillingoError:
    """Map an HTTP error status to the matching exception instance."""
    if status_code == 401:
        return AuthenticationError("Authentication failed. Check your API key.", status_code)
    if status_code == 403:
        return AuthorizationError("Access forbidden. Check your API permissions.", status_code)
    if status_code == 404:
        return NotFoundError("Resource not found.", status_code)
    if status_code == 429:
        return RateLimitError("Rate limit exceeded. Please wait before retrying.", status_code)
    return ApiError(status_code, describe_body(body, text))
