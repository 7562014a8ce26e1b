"""Shared fixtures: a stubbed gateway and apps built from explicit settings."""

from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from litbot.app import create_app
from litbot.settings import Settings


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, text: str | None = None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else str(payload)

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self) -> Any:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class FakeGateway:
    """Stands in for ``requests.post`` and counts outbound calls."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self.response: FakeResponse | Exception = completion("A fine question about books.")

    def __call__(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


def completion(content: Any) -> FakeResponse:
    return FakeResponse(200, {"choices": [{"message": {"role": "assistant", "content": content}}]})


def make_settings(**overrides: Any) -> Settings:
    values: dict[str, Any] = {
        "AI_GATEWAY_API_KEY": "test-key",
        "AI_GATEWAY_URL": "https://gateway.test/v1/chat/completions",
        "AI_MODEL": "google/gemini-2.5-flash",
        "USE_ECHO": False,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def gateway(monkeypatch: pytest.MonkeyPatch) -> FakeGateway:
    fake = FakeGateway()
    monkeypatch.setattr("litbot.generate.clients.gateway_client.requests.post", fake)
    return fake


@pytest.fixture
def client(gateway: FakeGateway) -> TestClient:
    return TestClient(create_app(make_settings()))
