"""Dispatcher — resolves one delegation and performs its single HTTP call."""

from __future__ import annotations

import json
import time
from dataclasses import dataclass, field

import httpx

from llm_delegate.config import DelegateConfig
from llm_delegate.exceptions import ProviderError, UsageError
from llm_delegate.observability.logging import get_logger
from llm_delegate.observability.tracing import traced_delegation
from llm_delegate.prompts import build_user_prompt, resolve_system_prompt
from llm_delegate.providers.base import ProviderConfig
from llm_delegate.registry import get_provider
from llm_delegate.types import DelegateResult

logger = get_logger(__name__)

NO_RESPONSE = "No response"


@dataclass
class RequestContext:
    """Per-invocation state, created once and discarded at exit."""

    agent: str
    task: str
    provider: str
    api_key: str = field(repr=False)
    file: str | None = None
    thinking: bool = False
    start_time: float = field(default_factory=time.monotonic)


class Dispatcher:
    """Turns CLI-level inputs into exactly one provider request.

    Usage:
        dispatcher = Dispatcher()
        provider, context = dispatcher.resolve(
            agent="architect", task="Design the auth system", provider_id="glm",
        )
        result = await dispatcher.dispatch(provider, context)
        print(result.text)

    ``resolve`` does every check that can fail without touching the
    network; ``dispatch`` is the only method that performs I/O. Pass an
    ``httpx`` transport to route the request somewhere other than the
    real API (tests use ``httpx.MockTransport``).
    """

    def __init__(
        self,
        config: DelegateConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or DelegateConfig()
        self._transport = transport

    def resolve(
        self,
        task: str,
        agent: str | None = None,
        provider_id: str | None = None,
        file: str | None = None,
        thinking: bool = False,
    ) -> tuple[ProviderConfig, RequestContext]:
        """Validate inputs and build the request context.

        Raises:
            UsageError: If ``task`` is empty.
            ProviderNotFoundError: If ``provider_id`` is not registered.
            MissingCredentialError: If the provider's API key is not set.
        """
        if not task:
            raise UsageError("--task (-t) is required")

        provider = get_provider(provider_id or self._config.provider)
        api_key = self._config.get_api_key(provider)

        context = RequestContext(
            agent=agent or self._config.agent,
            task=task,
            provider=provider.id,
            api_key=api_key,
            file=file or None,
            thinking=thinking,
        )
        return provider, context

    async def dispatch(
        self,
        provider: ProviderConfig,
        context: RequestContext,
    ) -> DelegateResult:
        """POST the delegation to ``provider`` and extract the answer.

        A response without the expected text field yields ``NO_RESPONSE``
        rather than an error, whatever its HTTP status.

        Raises:
            ProviderError: On transport failure or a body that is not JSON.
        """
        request = provider.prepare(
            api_key=context.api_key,
            system_prompt=resolve_system_prompt(context.agent),
            user_prompt=build_user_prompt(context.task, context.file),
            thinking=context.thinking,
        )
        body = json.dumps(request.json, separators=(",", ":"), ensure_ascii=False)

        logger.info(
            "delegation started",
            provider=provider.id,
            model=provider.model,
            agent=context.agent,
            thinking=context.thinking,
        )

        async with traced_delegation(
            provider=provider.id,
            model=provider.model,
            agent=context.agent,
        ) as span_data:
            try:
                async with httpx.AsyncClient(
                    timeout=self._config.timeout_seconds,
                    transport=self._transport,
                ) as client:
                    response = await client.post(
                        request.url,
                        params=request.params,
                        headers=request.headers,
                        content=body.encode("utf-8"),
                    )
                data = response.json()
            except (httpx.HTTPError, ValueError) as exc:
                raise ProviderError(provider.id, exc) from exc

            if response.is_error:
                logger.warning(
                    "provider returned error status",
                    provider=provider.id,
                    status_code=response.status_code,
                )

            result = DelegateResult(
                text=provider.extract_text(data) or NO_RESPONSE,
                provider=provider.id,
                model=provider.model,
                elapsed_seconds=time.monotonic() - context.start_time,
                status_code=response.status_code,
                usage=provider.extract_usage(data),
            )
            span_data["result"] = result

        logger.info(
            "delegation completed",
            provider=result.provider,
            model=result.model,
            status_code=result.status_code,
            input_tokens=result.usage.input_tokens,
            output_tokens=result.usage.output_tokens,
            latency_ms=round(result.elapsed_seconds * 1000, 1),
        )
        return result
