"""OpenAI-compatible chat-completions providers (OpenAI, Z.ai GLM)."""

from __future__ import annotations

from typing import Any

from llm_delegate.providers.base import (
    AuthStyle,
    PayloadBuilder,
    ProviderConfig,
    as_count,
    dig,
)
from llm_delegate.types import TokenUsage

TEMPERATURE = 0.2


def chat_payload_builder(model: str, supports_thinking: bool = False) -> PayloadBuilder:
    """Return a payload builder for a chat-completions ``model``.

    The body is ``{model, messages: [system, user], temperature}``. When
    ``supports_thinking`` is set and the caller asks for thinking, the
    Z.ai ``thinking`` switch is added.
    """

    def build(system_prompt: str, user_prompt: str, thinking: bool = False) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "model": model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "temperature": TEMPERATURE,
        }
        if thinking and supports_thinking:
            payload["thinking"] = {"type": "enabled"}
        return payload

    return build


def extract_chat_text(data: Any) -> str | None:
    """Return ``choices[0].message.content`` if it is a non-empty string."""
    text = dig(data, "choices", 0, "message", "content")
    if isinstance(text, str) and text:
        return text
    return None


def extract_chat_usage(data: Any) -> TokenUsage:
    """Token counts from the ``usage`` block, zeros when absent."""
    return TokenUsage(
        input_tokens=as_count(dig(data, "usage", "prompt_tokens")),
        output_tokens=as_count(dig(data, "usage", "completion_tokens")),
    )


CODEX = ProviderConfig(
    id="codex",
    name="Codex (OpenAI)",
    env_key="OPENAI_API_KEY",
    endpoint="https://api.openai.com/v1/chat/completions",
    model="gpt-4o",
    build_payload=chat_payload_builder("gpt-4o"),
    extract_text=extract_chat_text,
    auth=AuthStyle.BEARER,
    extract_usage=extract_chat_usage,
)

GLM = ProviderConfig(
    id="glm",
    name="GLM-4.7 (Z.ai)",
    env_key="GLM_API_KEY",
    endpoint="https://open.z.ai/api/paas/v4/chat/completions",
    model="glm-4.7",
    build_payload=chat_payload_builder("glm-4.7", supports_thinking=True),
    extract_text=extract_chat_text,
    auth=AuthStyle.BEARER,
    extract_usage=extract_chat_usage,
)
