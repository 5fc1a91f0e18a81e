"""Pytest configuration and fixtures."""

from __future__ import annotations

import json
from collections.abc import Generator
from typing import Any, Callable, Optional
from urllib.parse import parse_qs

import httpx
import pytest

from oidfed_admin import FederationAdminClient

API_URL = "https://admin.test"
TOKEN_URL = "https://idp.test/oauth/token"

Handler = Callable[[httpx.Request], httpx.Response]


class FakeTimer:
    """Stand-in for threading.Timer that only fires when a test says so."""

    def __init__(self, interval: float, function: Callable[[], None]) -> None:
        self.interval = interval
        self.function = function
        self.daemon = False
        self.started = False
        self.cancelled = False

    def start(self) -> None:
        self.started = True

    def cancel(self) -> None:
        self.cancelled = True

    def fire(self) -> None:
        self.function()


class FakeTimerFactory:
    def __init__(self) -> None:
        self.timers: list[FakeTimer] = []

    def __call__(self, interval: float, function: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer(interval, function)
        self.timers.append(timer)
        return timer

    @property
    def pending(self) -> list[FakeTimer]:
        return [t for t in self.timers if t.started and not t.cancelled]


class StubServer:
    """Routes requests for the admin API and the token endpoint to canned handlers."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.routes: dict[tuple[str, str], Handler] = {}
        self.token_responses: list[httpx.Response] = []
        self.issued = 0
        self.expires_in: Optional[float] = 300

    def route(self, method: str, path: str, handler: Any) -> None:
        if isinstance(handler, httpx.Response):
            canned = handler

            def handler(request: httpx.Request) -> httpx.Response:
                return httpx.Response(canned.status_code, headers=canned.headers, content=canned.content)

        self.routes[(method, path)] = handler

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == "idp.test":
            return self._token(request)
        path = request.url.raw_path.decode().split("?")[0]
        handler = self.routes.get((request.method, path))
        if handler is None:
            return httpx.Response(404, text=f"no route for {request.method} {path}")
        return handler(request)

    def _token(self, request: httpx.Request) -> httpx.Response:
        if self.token_responses:
            return self.token_responses.pop(0)
        self.issued += 1
        body: dict[str, Any] = {"access_token": f"token-{self.issued}", "token_type": "Bearer"}
        if self.expires_in is not None:
            body["expires_in"] = self.expires_in
        return httpx.Response(200, json=body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def api_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.host == "admin.test"]


def form(request: httpx.Request) -> dict[str, str]:
    return {k: v[0] for k, v in parse_qs(request.content.decode()).items()}


def body(request: httpx.Request) -> Any:
    return json.loads(request.content)


@pytest.fixture
def server() -> StubServer:
    return StubServer()


@pytest.fixture
def timers() -> FakeTimerFactory:
    return FakeTimerFactory()


@pytest.fixture
def anon_client(server: StubServer, timers: FakeTimerFactory) -> Generator[FederationAdminClient, None, None]:
    """Client without a token."""
    client = FederationAdminClient(API_URL, transport=httpx.MockTransport(server.handle), timer_factory=timers)
    yield client
    client.close()


@pytest.fixture
def client(server: StubServer, timers: FakeTimerFactory) -> Generator[FederationAdminClient, None, None]:
    """Client holding a static bearer token."""
    client = FederationAdminClient(
        API_URL, token="static-token", transport=httpx.MockTransport(server.handle), timer_factory=timers
    )
    yield client
    client.close()
