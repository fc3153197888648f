"""Tests for the provider registry."""

from __future__ import annotations

import pytest

from llm_delegate.exceptions import ProviderNotFoundError
from llm_delegate.providers.base import AuthStyle, ProviderConfig
from llm_delegate.providers.openai_compat import chat_payload_builder, extract_chat_text
from llm_delegate.registry import (
    _PROVIDERS,
    get_provider,
    list_providers,
    register_provider,
)


@pytest.mark.unit
class TestRegistry:
    def test_builtins_in_order(self) -> None:
        assert list_providers()[:3] == ["codex", "glm", "gemini"]

    @pytest.mark.parametrize("provider_id", ["codex", "glm", "gemini"])
    def test_get_builtin(self, provider_id: str) -> None:
        assert get_provider(provider_id).id == provider_id

    def test_unknown_provider_raises(self) -> None:
        with pytest.raises(ProviderNotFoundError, match="nonexistent_xyz_999") as exc_info:
            get_provider("nonexistent_xyz_999")
        assert exc_info.value.available == list_providers()

    def test_register_and_get(self) -> None:
        custom = ProviderConfig(
            id="local",
            name="Local vLLM",
            env_key="LOCAL_API_KEY",
            endpoint="http://localhost:8000/v1/chat/completions",
            model="qwen",
            build_payload=chat_payload_builder("qwen"),
            extract_text=extract_chat_text,
            auth=AuthStyle.BEARER,
        )
        register_provider(custom)
        try:
            assert get_provider("local") is custom
            assert list_providers()[-1] == "local"
        finally:
            _PROVIDERS.pop("local", None)
