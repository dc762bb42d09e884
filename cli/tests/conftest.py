from __future__ import annotations

import json
from typing import Callable

import httpx
import pytest

from tgtg_client import ClientConfig, TgtgClient

BASE_URL = "https://api.test/api/"


class Recorder:
    """MockTransport handler that records requests and replays canned responses."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.routes: dict[str, Callable[[httpx.Request], httpx.Response]] = {}

    def on(self, path: str, status_code: int = 200, *, json_body=None, content: bytes | str | None = None) -> None:
        def _respond(request: httpx.Request) -> httpx.Response:
            if json_body is not None:
                return httpx.Response(status_code, json=json_body)
            return httpx.Response(status_code, content=content or b"")

        self.routes[path] = _respond

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, content=b"no route")
        return route(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture()
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture()
def http_client(recorder: Recorder) -> httpx.Client:
    with httpx.Client(transport=httpx.MockTransport(recorder)) as c:
        yield c


@pytest.fixture()
def client(http_client: httpx.Client) -> TgtgClient:
    return TgtgClient(ClientConfig(base_url=BASE_URL), http_client=http_client)
