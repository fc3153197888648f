"""Delegate a task from Python instead of the command line."""

import asyncio

from llm_delegate import Dispatcher


async def main() -> None:
    """Ask the configured provider (DELEGATE_PROVIDER, default codex) for a review."""
    dispatcher = Dispatcher()
    provider, context = dispatcher.resolve(
        task="Review the retry strategy of a webhook sender",
        agent="architect",
    )
    result = await dispatcher.dispatch(provider, context)
    print(f"Provider: {provider.name}")
    print(f"Answer: {result.text}")
    print(f"Tokens: {result.usage.total_tokens}")
    print(f"Latency: {result.elapsed_seconds:.1f}s")


if __name__ == "__main__":
    asyncio.run(main())
