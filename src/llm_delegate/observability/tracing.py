"""OpenTelemetry tracing for delegation calls."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import ConsoleSpanExporter, SimpleSpanProcessor

from llm_delegate.types import DelegateResult

logger = logging.getLogger(__name__)

# Module-level tracer; None means tracing is off
_tracer: Any = None


def configure_tracing(
    exporter: str = "none",
    endpoint: str = "http://localhost:4317",
    service_name: str = "llm-delegate",
) -> None:
    """Configure OpenTelemetry tracing.

    Args:
        exporter: One of "none", "console", "otlp".
        endpoint: OTLP collector endpoint (only used when exporter="otlp").
        service_name: Service name for spans.
    """
    global _tracer

    if exporter == "none":
        _tracer = None
        return

    resource = Resource.create({"service.name": service_name})
    provider = TracerProvider(resource=resource)

    if exporter == "console":
        provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter()))
    elif exporter == "otlp":
        provider.add_span_processor(
            SimpleSpanProcessor(OTLPSpanExporter(endpoint=endpoint, insecure=True))
        )
    else:
        logger.warning("Unknown trace exporter %r, tracing disabled", exporter)
        _tracer = None
        return

    trace.set_tracer_provider(provider)
    _tracer = trace.get_tracer("llm_delegate")
    logger.info("OTEL tracing configured: exporter=%s, service=%s", exporter, service_name)


def get_tracer() -> Any:
    """Return the configured tracer, or None if tracing is disabled."""
    return _tracer


def disable_tracing() -> None:
    """Disable tracing (useful for tests)."""
    global _tracer
    _tracer = None


@asynccontextmanager
async def traced_delegation(
    provider: str,
    model: str,
    agent: str,
    operation: str = "llm.delegate",
) -> AsyncGenerator[dict[str, Any], None]:
    """Context manager that wraps one delegation in an OTEL span.

    Usage:
        async with traced_delegation("codex", "gpt-4o", "architect") as span_data:
            result = await ...
            span_data["result"] = result

    The span records llm.provider, llm.model and llm.agent up front, and
    status code, token counts and latency from the result on success.
    Exceptions mark the span as errored and propagate.
    """
    span_data: dict[str, Any] = {}

    if _tracer is None:
        yield span_data
        return

    with _tracer.start_as_current_span(operation) as span:
        span.set_attribute("llm.provider", provider)
        span.set_attribute("llm.model", model)
        span.set_attribute("llm.agent", agent)

        try:
            yield span_data
        except Exception as exc:
            span.set_status(trace.StatusCode.ERROR, str(exc))
            span.record_exception(exc)
            raise
        else:
            result = span_data.get("result")
            if isinstance(result, DelegateResult):
                span.set_attribute("llm.status_code", result.status_code)
                span.set_attribute("llm.input_tokens", result.usage.input_tokens)
                span.set_attribute("llm.output_tokens", result.usage.output_tokens)
                span.set_attribute("llm.latency_ms", result.elapsed_seconds * 1000)
