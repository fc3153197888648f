"""Provider configuration — the contract every provider entry must satisfy."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from llm_delegate.types import TokenUsage

PayloadBuilder = Callable[[str, str, bool], dict[str, Any]]
TextExtractor = Callable[[Any], str | None]
UsageExtractor = Callable[[Any], TokenUsage]


class AuthStyle(str, Enum):
    """Where the API key travels on the outbound request."""

    BEARER = "bearer"
    QUERY_PARAM = "query_param"


@dataclass(frozen=True)
class PreparedRequest:
    """Everything needed to issue the single POST for a delegation."""

    url: str
    headers: dict[str, str]
    params: dict[str, str]
    json: dict[str, Any]


def _no_usage(_data: Any) -> TokenUsage:
    return TokenUsage()


@dataclass(frozen=True)
class ProviderConfig:
    """Static description of one target LLM HTTP API.

    Args:
        id: Table key used on the command line (``codex``, ``glm``, ...).
        name: Human-readable display name.
        env_key: Environment variable holding the API key.
        endpoint: Full POST URL, without any authentication query string.
        model: Model identifier sent to (or embedded in the URL of) the API.
        build_payload: ``(system_prompt, user_prompt, thinking) -> body``.
        extract_text: Pulls the answer out of the decoded JSON, or ``None``.
        auth: How the API key is attached to the request.
        extract_usage: Pulls token counts out of the decoded JSON.
    """

    id: str
    name: str
    env_key: str
    endpoint: str
    model: str
    build_payload: PayloadBuilder
    extract_text: TextExtractor
    auth: AuthStyle = AuthStyle.BEARER
    extract_usage: UsageExtractor = field(default=_no_usage)

    def __post_init__(self) -> None:
        if not self.env_key:
            msg = f"Provider '{self.id}' has no env_key"
            raise ValueError(msg)
        if not self.endpoint:
            msg = f"Provider '{self.id}' has no endpoint"
            raise ValueError(msg)

    def prepare(
        self,
        api_key: str,
        system_prompt: str,
        user_prompt: str,
        thinking: bool = False,
    ) -> PreparedRequest:
        """Build the URL, headers, query params and body for one call."""
        headers = {"Content-Type": "application/json"}
        params: dict[str, str] = {}

        if self.auth is AuthStyle.QUERY_PARAM:
            params["key"] = api_key
        else:
            headers["Authorization"] = f"Bearer {api_key}"

        return PreparedRequest(
            url=self.endpoint,
            headers=headers,
            params=params,
            json=self.build_payload(system_prompt, user_prompt, thinking),
        )


def dig(data: Any, *path: str | int) -> Any:
    """Walk *path* through nested dicts/lists, returning ``None`` on any miss.

    Integer steps index into lists, string steps look up dict keys. A step
    that does not match the shape of the data at that point ends the walk.
    """
    current = data
    for step in path:
        if isinstance(step, int):
            if not isinstance(current, list) or not -len(current) <= step < len(current):
                return None
            current = current[step]
        else:
            if not isinstance(current, dict):
                return None
            current = current.get(step)
        if current is None:
            return None
    return current


def as_count(value: Any) -> int:
    """Coerce a token-count field to int; anything unusable becomes 0."""
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return value
