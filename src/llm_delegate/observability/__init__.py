"""Observability sub-package — tracing and logging."""

from llm_delegate.observability.logging import configure_logging, get_logger
from llm_delegate.observability.tracing import (
    configure_tracing,
    disable_tracing,
    get_tracer,
    traced_delegation,
)

__all__ = [
    "configure_logging",
    "configure_tracing",
    "disable_tracing",
    "get_logger",
    "get_tracer",
    "traced_delegation",
]
