"""Core data types for llm-delegate."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TokenUsage:
    """Token counts reported by the provider for a single call."""

    input_tokens: int = 0
    output_tokens: int = 0

    @property
    def total_tokens(self) -> int:
        """Total tokens consumed."""
        return self.input_tokens + self.output_tokens


@dataclass
class DelegateResult:
    """Outcome of one delegation: the answer text plus call metadata."""

    text: str
    provider: str
    model: str
    elapsed_seconds: float
    status_code: int = 200
    usage: TokenUsage = field(default_factory=TokenUsage)
