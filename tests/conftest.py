"""Shared fixtures: a fake Vottun API served through httpx.MockTransport."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Iterator

import httpx
import pytest

from vottun.client import VottunClient


@dataclass
class FakeApi:
    """Routes requests by path to canned JSON bodies and records them."""

    responses: dict[str, tuple[int, Any]] = field(default_factory=dict)
    requests: list[httpx.Request] = field(default_factory=list)

    def reply(self, path: str, body: Any, status: int = 200) -> None:
        self.responses[path] = (status, body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.lstrip("/")
        if path not in self.responses:
            return httpx.Response(404, text="not found")
        status, body = self.responses[path]
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict[str, Any]:
        return json.loads(self.last.content)


@pytest.fixture()
def fake_api() -> FakeApi:
    return FakeApi()


@pytest.fixture()
def client(fake_api: FakeApi) -> Iterator[VottunClient]:
    with VottunClient(
        "test-api-key",
        "test-vkn",
        transport=httpx.MockTransport(fake_api.handler),
    ) as c:
        yield c
