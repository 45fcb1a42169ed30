from __future__ import annotations

import os
from typing import Any

import httpx
import pytest

# Keep test runs from writing JSON log files into the working tree.
os.environ.setdefault("LOG_FILE", "")


class StubUpstream:
    """Stands in for the vendor API behind ``httpx.AsyncClient``."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self.timeouts: list[Any] = []
        self.response = httpx.Response(200, json={"choices": []})
        self.error: Exception | None = None

    def respond(self, status_code: int, *, json: Any = None, text: str | None = None) -> None:
        if text is not None:
            self.response = httpx.Response(status_code, text=text)
        else:
            self.response = httpx.Response(status_code, json=json)

    def fail(self, error: Exception) -> None:
        self.error = error

    @property
    def last_call(self) -> dict[str, Any]:
        return self.calls[-1]

    def client_class(self) -> type:
        stub = self

        class _DummyAsyncClient:
            def __init__(self, *args, **kwargs) -> None:
                stub.timeouts.append(kwargs.get("timeout"))

            async def __aenter__(self):
                return self

            async def __aexit__(self, exc_type, exc, tb):
                return False

            async def post(self, url, json=None, headers=None):
                stub.calls.append({"url": url, "json": json, "headers": headers})
                if stub.error is not None:
                    raise stub.error
                return stub.response

        return _DummyAsyncClient


@pytest.fixture
def upstream(monkeypatch) -> StubUpstream:
    stub = StubUpstream()
    monkeypatch.setattr("chat_relay.providers.base.httpx.AsyncClient", stub.client_class())
    return stub
