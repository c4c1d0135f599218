"""Shared fixtures: a RunPodClient wired to an in-process fake RunPod API."""

from typing import Callable

import httpx
import pytest

from core.client import RunPodClient
from core.config import Settings

API_KEY = "rp_test_key"


class FakeRunPod:
    """Records every request and answers with a configurable response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responder: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json=[])
        )

    def respond_with(self, response) -> None:
        """Answer every following request with `response` (or call it per request)."""
        if callable(response):
            self._responder = response
        else:
            # Fresh copy per request so the same canned answer can be reused.
            self._responder = lambda request: httpx.Response(
                response.status_code, headers=response.headers, content=response.content
            )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responder(request)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]


@pytest.fixture
def fake_api() -> FakeRunPod:
    return FakeRunPod()


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key=API_KEY)


@pytest.fixture
def client(settings: Settings, fake_api: FakeRunPod):
    with RunPodClient(settings, transport=httpx.MockTransport(fake_api.handler)) as rp:
        yield rp
