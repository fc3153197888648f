"""Shared test fixtures for llm-delegate."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from typing import Any

import httpx
import pytest
import structlog

import llm_delegate.observability.logging as log_mod
from llm_delegate.observability.tracing import disable_tracing

_PROVIDER_ENV_KEYS = ("OPENAI_API_KEY", "GLM_API_KEY", "GEMINI_API_KEY")
_CONFIG_FIELDS = (
    "PROVIDER",
    "AGENT",
    "TIMEOUT_SECONDS",
    "TRACE_ENABLED",
    "TRACE_EXPORTER",
    "TRACE_ENDPOINT",
    "TRACE_SERVICE_NAME",
    "LOG_LEVEL",
    "LOG_FORMAT",
)


class FakeProviderAPI:
    """In-memory stand-in for a provider's HTTP API.

    Records every request and answers with a canned JSON body, raw bytes,
    or an exception. Pass ``fake.transport`` to ``Dispatcher`` or ``main``.
    """

    def __init__(
        self,
        body: Any = None,
        status_code: int = 200,
        raw: bytes | None = None,
        error: Exception | None = None,
    ) -> None:
        self.body = body if body is not None else {}
        self.status_code = status_code
        self.raw = raw
        self.error = error
        self.requests: list[httpx.Request] = []

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.raw is not None:
            return httpx.Response(self.status_code, content=self.raw)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture(autouse=True)
def _isolated_env(
    request: pytest.FixtureRequest,
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Any,
) -> None:
    """Strip provider keys and DELEGATE_* settings; keep .env out of reach."""
    if request.node.get_closest_marker("integration"):
        return
    for key in _PROVIDER_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    for name in _CONFIG_FIELDS:
        monkeypatch.delenv(f"DELEGATE_{name}", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _quiet_observability(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep structlog off stdout and stop the CLI from installing handlers."""
    monkeypatch.setattr(log_mod, "_CONFIGURED", True)
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL))
    disable_tracing()
    yield
    disable_tracing()
    structlog.reset_defaults()


@pytest.fixture
def make_api() -> type[FakeProviderAPI]:
    """Return the FakeProviderAPI class; call it with the canned reply."""
    return FakeProviderAPI


@pytest.fixture
def chat_reply() -> dict[str, Any]:
    """A chat-completions response body answering ``LGTM``."""
    return {
        "choices": [{"message": {"role": "assistant", "content": "LGTM"}}],
        "usage": {"prompt_tokens": 42, "completion_tokens": 7},
    }


@pytest.fixture
def gemini_reply() -> dict[str, Any]:
    """A generateContent response body answering ``Looks fine``."""
    return {
        "candidates": [{"content": {"parts": [{"text": "Looks fine"}], "role": "model"}}],
        "usageMetadata": {"promptTokenCount": 12, "candidatesTokenCount": 3},
    }

