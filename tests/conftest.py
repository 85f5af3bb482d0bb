"""Shared pytest fixtures for ollamaimage tests."""

import json

import httpx
import pytest
import pytest_asyncio

from ollamaimage.models.requests import HOST_ENV_VAR, MODEL_ENV_VAR


class FakeOllamaServer:
    """Fake /api/generate endpoint served through httpx.MockTransport."""

    def __init__(self, fail_on_call: int | None = None, status_code: int = 500, body: dict | None = None):
        """
        Initialize fake server.

        Args:
            fail_on_call: 1-based call number that answers with status_code
            status_code: Status returned by the failing call
            body: JSON body returned by successful calls (defaults to a full response)
        """
        self.fail_on_call = fail_on_call
        self.status_code = status_code
        self.body = body
        self.requests: list[httpx.Request] = []
        self.events: list[tuple] = []

    @property
    def call_count(self) -> int:
        return len(self.requests)

    @property
    def payloads(self) -> list[dict]:
        return [json.loads(request.content) for request in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        """Mock transport handler."""
        self.requests.append(request)
        payload = json.loads(request.content)
        self.events.append(("request", payload["prompt"]))

        if self.fail_on_call is not None and self.call_count == self.fail_on_call:
            # Non-JSON body: a failing response must never be parsed
            return httpx.Response(self.status_code, content=b"<html>server error</html>")

        if self.body is not None:
            return httpx.Response(200, json=self.body)

        return httpx.Response(
            200,
            json={
                "model": payload["model"],
                "created_at": f"2026-01-01T00:00:{self.call_count:02d}Z",
                "image": f"aW1hZ2U{self.call_count}",
                "done": True,
            },
        )

    def progress(self, completed: int, total: int) -> None:
        """Progress callback recording into the same event log as requests."""
        self.events.append(("progress", completed, total))


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Make sure host/model overrides from the environment never leak into tests."""
    monkeypatch.delenv(HOST_ENV_VAR, raising=False)
    monkeypatch.delenv(MODEL_ENV_VAR, raising=False)


@pytest.fixture
def server_factory():
    """Fixture exposing FakeOllamaServer for tests that need a custom server."""
    return FakeOllamaServer


@pytest.fixture
def fake_server():
    """Fixture for a fake server that always succeeds."""
    return FakeOllamaServer()


@pytest.fixture
def failing_server():
    """Fixture for a fake server whose third call fails with a 500."""
    return FakeOllamaServer(fail_on_call=3, status_code=500)


@pytest_asyncio.fixture
async def client(fake_server):
    """httpx.AsyncClient routed to the fake server."""
    async with httpx.AsyncClient(transport=httpx.MockTransport(fake_server.handler)) as http_client:
        yield http_client


@pytest_asyncio.fixture
async def failing_client(failing_server):
    """httpx.AsyncClient routed to the failing fake server."""
    async with httpx.AsyncClient(transport=httpx.MockTransport(failing_server.handler)) as http_client:
        yield http_client
