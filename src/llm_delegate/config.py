"""Delegate configuration via environment variables."""

from __future__ import annotations

import os

from pydantic import Field
from pydantic_settings import BaseSettings

from llm_delegate.exceptions import MissingCredentialError
from llm_delegate.prompts import DEFAULT_AGENT
from llm_delegate.providers.base import ProviderConfig


class DelegateConfig(BaseSettings):
    """llm-delegate configuration.

    All fields are read from environment variables with the ``DELEGATE_``
    prefix. Example: ``DELEGATE_PROVIDER=glm`` makes ``glm`` the default for
    ``--provider``. API keys are *not* settings: each provider names its own
    variable (``OPENAI_API_KEY``, ``GLM_API_KEY``, ``GEMINI_API_KEY``).
    """

    model_config = {"env_prefix": "DELEGATE_", "env_file": ".env", "extra": "ignore"}

    # ── Defaults for CLI flags ──────────────────────────────────
    provider: str = Field(
        default="codex",
        description="Default provider identifier: 'codex', 'glm', 'gemini'.",
    )
    agent: str = Field(
        default=DEFAULT_AGENT,
        description="Default agent role used to pick the system prompt.",
    )

    # ── Request ─────────────────────────────────────────────────
    timeout_seconds: float = Field(default=120.0, gt=0)

    # ── Observability ───────────────────────────────────────────
    trace_enabled: bool = Field(default=False)
    trace_exporter: str = Field(
        default="none",
        description="Trace exporter: 'none', 'console', 'otlp'.",
    )
    trace_endpoint: str = Field(default="http://localhost:4317")
    trace_service_name: str = Field(default="llm-delegate")

    log_level: str = Field(default="WARNING")
    log_format: str = Field(
        default="console",
        description="Log format: 'json' or 'console'.",
    )

    def get_api_key(self, provider: ProviderConfig) -> str:
        """Return the API key for ``provider`` from its environment variable.

        Raises:
            MissingCredentialError: If the variable is unset or empty.
        """
        value = os.environ.get(provider.env_key)
        if not value:
            raise MissingCredentialError(provider.env_key)
        return value
