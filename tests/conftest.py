from __future__ import annotations

import json
import os
from collections.abc import Callable, Generator
from dataclasses import dataclass, field
from typing import Any

import httpx
import pytest

from wordfeud.client import WordfeudClient
from wordfeud.config import Settings
from wordfeud.infra.http_client import create_http_client

Handler = Callable[[httpx.Request], httpx.Response]


def envelope_response(
    content: Any = None,
    *,
    status: str = "success",
    http_status: int = 200,
    set_cookie: str | None = None,
) -> httpx.Response:
    headers = [("set-cookie", set_cookie)] if set_cookie else []
    body = {"status": status, "content": {} if content is None else content}
    return httpx.Response(http_status, json=body, headers=headers)


@dataclass
class FakeWordfeud:
    """In-process stand-in for the service, keyed by API path (without /wf/ and slashes)."""

    routes: dict[str, Handler] = field(default_factory=dict)
    requests: list[httpx.Request] = field(default_factory=list)

    def reply(self, path: str, content: Any = None, **kwargs: Any) -> None:
        self.routes[path] = lambda _req: envelope_response(content, **kwargs)

    def route(self, path: str, handler: Handler) -> None:
        self.routes[path] = handler

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/wf/").rstrip("/")
        route = self.routes.get(path)
        if route is None:
            return httpx.Response(404, text="not found")
        return route(request)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was made"
        return self.requests[-1]

    def last_payload(self) -> Any:
        return json.loads(self.last.content)

    def http_client(self) -> httpx.Client:
        return create_http_client(Settings(), transport=httpx.MockTransport(self.handler))


@pytest.fixture(autouse=True)
def _hermetic_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Keep a developer's WORDFEUD_* variables out of the tests, and drop any a test (or .env) added."""

    for name in list(os.environ):
        if name.startswith("WORDFEUD_"):
            monkeypatch.delenv(name, raising=False)
    yield
    for name in list(os.environ):
        if name.startswith("WORDFEUD_"):
            os.environ.pop(name, None)


@pytest.fixture()
def fake() -> FakeWordfeud:
    return FakeWordfeud()


@pytest.fixture()
def client(fake: FakeWordfeud) -> Generator[WordfeudClient, None, None]:
    http = fake.http_client()
    with WordfeudClient(settings=Settings(), http=http) as c:
        yield c
    http.close()
