"""Tests for exception hierarchy."""

from __future__ import annotations

import pytest

from llm_delegate.exceptions import (
    DelegateError,
    MissingCredentialError,
    ProviderError,
    ProviderNotFoundError,
    UsageError,
)


@pytest.mark.unit
class TestExceptions:
    def test_hierarchy(self) -> None:
        assert issubclass(UsageError, DelegateError)
        assert issubclass(ProviderNotFoundError, DelegateError)
        assert issubclass(MissingCredentialError, DelegateError)
        assert issubclass(ProviderError, DelegateError)

    def test_provider_not_found_message(self) -> None:
        exc = ProviderNotFoundError("foobar", ["codex", "glm"])
        assert str(exc) == "Unknown provider: foobar"
        assert exc.provider == "foobar"
        assert exc.available == ["codex", "glm"]

    def test_provider_not_found_defaults_to_empty_list(self) -> None:
        assert ProviderNotFoundError("x").available == []

    def test_missing_credential(self) -> None:
        exc = MissingCredentialError("GLM_API_KEY")
        assert exc.env_key == "GLM_API_KEY"
        assert str(exc) == "Missing GLM_API_KEY environment variable"

    def test_provider_error(self) -> None:
        original = RuntimeError("connection timeout")
        exc = ProviderError("gemini", original)
        assert exc.provider == "gemini"
        assert exc.original is original
        assert "gemini" in str(exc)
        assert "connection timeout" in str(exc)
