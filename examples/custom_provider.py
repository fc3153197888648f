"""Demonstrates registering an extra OpenAI-compatible provider.

  LOCAL_LLM_API_KEY=anything python examples/custom_provider.py
  llm-delegate -p local -t "..."   # after the same registration in your own entry point
"""

import asyncio

from llm_delegate import AuthStyle, Dispatcher, ProviderConfig, register_provider
from llm_delegate.providers.openai_compat import (
    chat_payload_builder,
    extract_chat_text,
    extract_chat_usage,
)

LOCAL = ProviderConfig(
    id="local",
    name="Local vLLM",
    env_key="LOCAL_LLM_API_KEY",
    endpoint="http://localhost:8000/v1/chat/completions",
    model="qwen2.5-coder",
    build_payload=chat_payload_builder("qwen2.5-coder"),
    extract_text=extract_chat_text,
    auth=AuthStyle.BEARER,
    extract_usage=extract_chat_usage,
)


async def main() -> None:
    register_provider(LOCAL)

    dispatcher = Dispatcher()
    provider, context = dispatcher.resolve(
        task="Is this regex safe against catastrophic backtracking: (a+)+$",
        agent="security-analyst",
        provider_id="local",
    )
    result = await dispatcher.dispatch(provider, context)
    print(f"Provider: {provider.name}")
    print(f"Response: {result.text}")


if __name__ == "__main__":
    asyncio.run(main())
