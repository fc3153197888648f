"""Exception hierarchy for llm-delegate."""

from __future__ import annotations

from collections.abc import Sequence


class DelegateError(Exception):
    """Base exception for all llm-delegate errors."""


class UsageError(DelegateError):
    """Raised when the command line is missing a required value."""


class ProviderNotFoundError(DelegateError):
    """Raised when the requested provider is not in the provider table."""

    def __init__(self, provider: str, available: Sequence[str] = ()) -> None:
        self.provider = provider
        self.available = list(available)
        super().__init__(f"Unknown provider: {provider}")


class MissingCredentialError(DelegateError):
    """Raised when the provider's API key environment variable is unset."""

    def __init__(self, env_key: str) -> None:
        self.env_key = env_key
        super().__init__(f"Missing {env_key} environment variable")


class ProviderError(DelegateError):
    """Raised when the HTTP call or response decoding fails."""

    def __init__(self, provider: str, original: Exception) -> None:
        self.provider = provider
        self.original = original
        super().__init__(f"Provider '{provider}' error: {original}")
