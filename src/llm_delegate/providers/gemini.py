"""Google Gemini generateContent provider."""

from __future__ import annotations

from typing import Any

from llm_delegate.providers.base import AuthStyle, ProviderConfig, as_count, dig
from llm_delegate.types import TokenUsage

MODEL = "gemini-2.0-flash"
ENDPOINT = (
    "https://generativelanguage.googleapis.com/v1beta/models/"
    f"{MODEL}:generateContent"
)


def build_gemini_payload(
    system_prompt: str,
    user_prompt: str,
    thinking: bool = False,
) -> dict[str, Any]:
    """Body is ``{contents: [{parts: [{text: user_prompt}]}]}``.

    The system prompt is not sent and ``gemini-2.0-flash`` has no thinking
    switch, so both extra arguments are ignored.
    """
    return {"contents": [{"parts": [{"text": user_prompt}]}]}


def extract_gemini_text(data: Any) -> str | None:
    """Return ``candidates[0].content.parts[0].text`` if non-empty."""
    text = dig(data, "candidates", 0, "content", "parts", 0, "text")
    if isinstance(text, str) and text:
        return text
    return None


def extract_gemini_usage(data: Any) -> TokenUsage:
    return TokenUsage(
        input_tokens=as_count(dig(data, "usageMetadata", "promptTokenCount")),
        output_tokens=as_count(dig(data, "usageMetadata", "candidatesTokenCount")),
    )


GEMINI = ProviderConfig(
    id="gemini",
    name="Gemini (Google)",
    env_key="GEMINI_API_KEY",
    endpoint=ENDPOINT,
    model=MODEL,
    build_payload=build_gemini_payload,
    extract_text=extract_gemini_text,
    auth=AuthStyle.QUERY_PARAM,
    extract_usage=extract_gemini_usage,
)
