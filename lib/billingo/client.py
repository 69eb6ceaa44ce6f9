"""Billingo v3 API request client.

One call to ``send`` is one authenticated HTTP exchange. Responses are
returned exactly as the API sent them; unwrapping the ``data`` envelope is
left to ``billingo.resources``.

API Reference: https://app.swaggerhub.com/apis/Billingo/Billingo/3.0.14
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from .errors import (
    ConfigurationError,
    NetworkError,
    UnknownError,
    error_for_status,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.billingo.hu/v3"
ALLOWED_METHODS = {"GET", "POST", "PUT", "DELETE"}
API_KEY_HEADER = "X-API-KEY"


@dataclass(frozen=True)
class Credentials:
    """API key plus the base URL it is valid for."""
    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL

    @property
    def masked_key(self) -> str:
        """API key safe for display: only the last four characters."""
        if not self.api_key:
            return ""
        return "*" * 12 + self.api_key[-4:]


class BillingoClient:
    """Authenticated request client for the Billingo v3 API.

    Usage:
        async with BillingoClient(Credentials(api_key="...")) as client:
            envelope = await client.send("GET", "/partners", params={"page": 1})
    """

    def __init__(
        self,
        credentials: Credentials,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize client.

        Args:
            credentials: API key and base URL, read once at construction
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.credentials = credentials
        self._transport = transport
        self._http: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "BillingoClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the underlying HTTP client."""
        if self._http is None:
            self._http = httpx.AsyncClient(
                base_url=self.credentials.base_url or DEFAULT_BASE_URL,
                transport=self._transport,
                headers={
                    API_KEY_HEADER: self.credentials.api_key,
                    "Accept": "application/json",
                    "Content-Type": "application/json",
                },
            )
        return self._http

    async def aclose(self) -> None:
        """Close the HTTP client."""
        if self._http is not None:
            await self._http.aclose()
            self._http = None

    async def send(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Make one authenticated request.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: API path relative to the base URL (e.g., /partners/42)
            body: JSON-serializable payload for POST/PUT
            params: Query parameters; entries set to None are dropped

        Returns:
            Decoded JSON body, {} for an empty body, or bytes for
            non-JSON content such as PDF downloads

        Raises:
            ConfigurationError: No API key configured (no request is sent)
            AuthenticationError, AuthorizationError, NotFoundError,
            RateLimitError, ApiError: Non-2xx responses
            NetworkError: No response received
            UnknownError: Any other httpx failure
        """
        if not self.credentials.api_key:
            raise ConfigurationError(
                "API key not configured. Please run: billingohu config set --api-key <key>"
            )

        method = method.upper()
        if method not in ALLOWED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        query = {k: v for k, v in (params or {}).items() if v is not None} or None
        logger.debug(f"{method} {path} params={query}")

        try:
            response = await self._get_client().request(
                method,
                path,
                params=query,
                json=body,
            )
        except httpx.UnsupportedProtocol as e:
            raise UnknownError(f"Invalid request URL: {e}") from e
        except httpx.TransportError as e:
            logger.warning(f"{method} {path} failed without response: {e!r}")
            raise NetworkError(
                "No response from Billingo API. Check your internet connection."
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise UnknownError(f"Request failed: {e}") from e

        if response.is_success:
            return self._decode(response)

        body_json = self._json_or_none(response)
        error = error_for_status(response.status_code, body_json, response.text)
        logger.warning(f"{method} {path} -> {response.status_code}: {error}")
        raise error

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        """Decode a successful response body."""
        if not response.content:
            return {}

        content_type = response.headers.get("Content-Type", "")
        if "json" not in content_type:
            return response.content

        try:
            return response.json()
        except ValueError as e:
            raise UnknownError(f"Invalid JSON in response: {e}") from e

    @staticmethod
    def _json_or_none(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return None
