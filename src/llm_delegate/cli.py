"""Command-line entry point: ``llm-delegate -a architect -t "..." -p glm``."""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Sequence

import httpx
from pydantic import ValidationError

from llm_delegate.config import DelegateConfig
from llm_delegate.dispatcher import Dispatcher
from llm_delegate.exceptions import DelegateError, ProviderNotFoundError, UsageError
from llm_delegate.observability.logging import configure_logging
from llm_delegate.observability.tracing import configure_tracing
from llm_delegate.prompts import AGENT_PROMPTS
from llm_delegate.registry import list_providers

TASK_PREVIEW_CHARS = 80


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the delegate command."""
    parser = argparse.ArgumentParser(
        prog="llm-delegate",
        description="Delegate a task to an LLM provider under a reviewer role.",
        epilog=(
            "API keys are read from OPENAI_API_KEY (codex), GLM_API_KEY (glm) "
            "and GEMINI_API_KEY (gemini)."
        ),
    )
    parser.add_argument(
        "-a",
        "--agent",
        default=None,
        help=f"Agent role selecting the system prompt ({', '.join(AGENT_PROMPTS)}).",
    )
    parser.add_argument("-t", "--task", default="", help="Task description (required).")
    parser.add_argument(
        "-f",
        "--file",
        default=None,
        help="File to reference in the prompt. Only its name is sent.",
    )
    parser.add_argument(
        "-p",
        "--provider",
        default=None,
        help=f"Target provider ({', '.join(list_providers())}). Default: codex.",
    )
    parser.add_argument(
        "--thinking",
        action="store_true",
        default=False,
        help="Ask providers that support it to enable extended thinking.",
    )
    return parser


def main(
    argv: Sequence[str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> int:
    """Run one delegation and return the process exit code.

    Args:
        argv: Arguments without the program name. ``None`` reads sys.argv.
        transport: Optional httpx transport used for the provider request.

    Returns:
        0 on success, 1 on a usage, configuration or runtime error.
    """
    try:
        args = build_parser().parse_args(argv)
    except SystemExit as exc:
        # argparse exits 2 on bad flags; --help exits 0
        return 0 if exc.code in (0, None) else 1

    try:
        config = DelegateConfig()
    except ValidationError as exc:
        print(f"Error: invalid DELEGATE_* setting: {exc}", file=sys.stderr)
        return 1

    configure_logging(level=config.log_level, fmt=config.log_format)
    if config.trace_enabled:
        configure_tracing(
            exporter=config.trace_exporter,
            endpoint=config.trace_endpoint,
            service_name=config.trace_service_name,
        )

    dispatcher = Dispatcher(config=config, transport=transport)

    try:
        provider, context = dispatcher.resolve(
            task=args.task,
            agent=args.agent,
            provider_id=args.provider,
            file=args.file,
            thinking=args.thinking,
        )
    except UsageError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except ProviderNotFoundError as exc:
        print(str(exc), file=sys.stderr)
        print(f"Available: {', '.join(exc.available)}", file=sys.stderr)
        return 1
    except DelegateError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    print(f"\n  Delegating to {provider.name} ({context.agent})...")
    print(f"  Model: {provider.model}")
    print(f"  Task: {context.task[:TASK_PREVIEW_CHARS]}...")

    try:
        result = asyncio.run(dispatcher.dispatch(provider, context))
    except Exception as exc:  # noqa: BLE001
        print(f"\n  Error: {exc}", file=sys.stderr)
        return 1

    print(f"\n{result.text}")
    print(f"\n  Processing time: {result.elapsed_seconds:.1f}s")
    return 0
