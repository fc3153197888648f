"""Provider registry — maps provider identifiers to their configuration."""

from __future__ import annotations

import logging

from llm_delegate.exceptions import ProviderNotFoundError
from llm_delegate.providers import CODEX, GEMINI, GLM
from llm_delegate.providers.base import ProviderConfig

logger = logging.getLogger(__name__)

# Insertion order is the order shown in "Available: ..." messages.
_PROVIDERS: dict[str, ProviderConfig] = {}


def register_provider(config: ProviderConfig) -> None:
    """Register (or replace) a provider under ``config.id``."""
    _PROVIDERS[config.id] = config
    logger.debug("Registered LLM provider: %s", config.id)


def get_provider(provider_id: str) -> ProviderConfig:
    """Look up a provider by identifier.

    Raises:
        ProviderNotFoundError: If ``provider_id`` is not registered. The
            error carries the list of valid identifiers.
    """
    config = _PROVIDERS.get(provider_id)
    if config is None:
        raise ProviderNotFoundError(provider_id, list_providers())
    return config


def list_providers() -> list[str]:
    """Return identifiers of all registered providers, in registration order."""
    return list(_PROVIDERS.keys())


for _builtin in (CODEX, GLM, GEMINI):
    register_provider(_builtin)
