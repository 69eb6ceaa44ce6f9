import json
from typing import Any, Callable, Dict, List

import httpx

API_KEY = "test-key-1234"
BASE_URL = "https://billingo.test/v3"


class Recorder:
    """Collects requests seen by a MockTransport and answers from a handler."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.handler = handler
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content.decode())

    def last_params(self) -> Dict[str, str]:
        return dict(self.last.url.params)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


def respond(status: int = 200, payload: Any = None, **kwargs: Any) -> Recorder:
    """Recorder answering every request with the same response."""
    return Recorder(lambda request: httpx.Response(status, json=payload, **kwargs))


def respond_pages(pages: List[Dict[str, Any]]) -> Recorder:
    """Recorder answering GETs from a list of envelopes, keyed by ?page=."""

    def _handler(request: httpx.Request) -> httpx.Response:
        page = int(request.url.params.get("page", "1"))
        return httpx.Response(200, json=pages[page - 1])

    return Recorder(_handler)
