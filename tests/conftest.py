from __future__ import annotations

import json
from typing import Any, Callable, Dict, List

import pytest
from fastapi.testclient import TestClient

from relay_backend import create_app
from relay_backend.config import Settings


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, text: str = "", reason: str = "") -> None:
        self.status_code = status_code
        self._payload = payload
        self._text = text
        self.reason = reason or ("OK" if status_code < 400 else "Error")

    def json(self) -> Any:
        if self._payload is None:
            raise ValueError("no json body")
        return self._payload

    @property
    def text(self) -> str:
        if self._payload is not None:
            return json.dumps(self._payload)
        return self._text


@pytest.fixture
def settings() -> Settings:
    return Settings(
        max_entries=3,
        max_log_entries=2,
        max_activity_entries=20,
        fetch_url="http://n8n.test/fetch",
        action_url="http://n8n.test/action",
        chat_url="http://n8n.test/chat",
    )


@pytest.fixture
def app(settings: Settings):
    return create_app(settings)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def fake_remote(monkeypatch: pytest.MonkeyPatch) -> Callable[..., List[Dict[str, Any]]]:
    """Queue canned responses for outbound POST/GET calls; returns the list of recorded calls."""

    def install(*responses: Any) -> List[Dict[str, Any]]:
        calls: List[Dict[str, Any]] = []
        queue = list(responses)

        def _answer(method: str, url: str, **kwargs: Any):
            calls.append({"method": method, "url": url, **kwargs})
            item = queue.pop(0)
            if isinstance(item, Exception):
                raise item
            return item

        monkeypatch.setattr(
            "relay_backend.relay.requests.post",
            lambda url, **kwargs: _answer("POST", url, **kwargs),
        )
        monkeypatch.setattr(
            "relay_backend.relay.requests.get",
            lambda url, **kwargs: _answer("GET", url, **kwargs),
        )
        return calls

    return install
