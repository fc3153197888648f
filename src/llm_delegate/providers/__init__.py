"""Built-in provider configurations."""

from llm_delegate.providers.base import AuthStyle, PreparedRequest, ProviderConfig
from llm_delegate.providers.gemini import GEMINI
from llm_delegate.providers.openai_compat import CODEX, GLM

__all__ = [
    "AuthStyle",
    "CODEX",
    "GEMINI",
    "GLM",
    "PreparedRequest",
    "ProviderConfig",
]
