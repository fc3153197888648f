"""llm-delegate — hand a task to an LLM provider under a reviewer role.

Usage:
    $ OPENAI_API_KEY=sk-... llm-delegate -a code-reviewer -t "review auth.ts"

    from llm_delegate import Dispatcher

    dispatcher = Dispatcher()
    provider, context = dispatcher.resolve(task="review auth.ts", agent="code-reviewer")
    result = await dispatcher.dispatch(provider, context)
"""

from __future__ import annotations

from llm_delegate.config import DelegateConfig
from llm_delegate.dispatcher import NO_RESPONSE, Dispatcher, RequestContext
from llm_delegate.exceptions import (
    DelegateError,
    MissingCredentialError,
    ProviderError,
    ProviderNotFoundError,
    UsageError,
)
from llm_delegate.prompts import AGENT_PROMPTS, DEFAULT_AGENT
from llm_delegate.providers.base import AuthStyle, ProviderConfig
from llm_delegate.registry import get_provider, list_providers, register_provider
from llm_delegate.types import DelegateResult, TokenUsage

__all__ = [
    # Core
    "Dispatcher",
    "DelegateConfig",
    "RequestContext",
    "NO_RESPONSE",
    # Types
    "DelegateResult",
    "TokenUsage",
    # Providers
    "ProviderConfig",
    "AuthStyle",
    "register_provider",
    "get_provider",
    "list_providers",
    # Prompts
    "AGENT_PROMPTS",
    "DEFAULT_AGENT",
    # Exceptions
    "DelegateError",
    "UsageError",
    "ProviderNotFoundError",
    "MissingCredentialError",
    "ProviderError",
]
