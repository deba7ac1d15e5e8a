# src/transcript_kit/llms/anthropic.py

import logging
from time import monotonic
from typing import Any

from anthropic import (
    NOT_GIVEN,
    APIConnectionError,
    APIError,
    AsyncAnthropic,
    InternalServerError,
    RateLimitError,
)
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from transcript_kit.observability import names
from transcript_kit.observability.base import (
    MetricsHook,
    NoOpMetricsHook,
    elapsed_ms,
)

from .base import FinishReason, LLMClient, LLMResponse, Message, Role, Usage

logger = logging.getLogger(__name__)

_TRANSIENT_ERRORS = (APIConnectionError, RateLimitError, InternalServerError)

# Anthropic requires max_tokens on every request.
DEFAULT_MAX_TOKENS = 4096

_FINISH_REASONS: dict[str, FinishReason] = {
    "end_turn": "stop",
    "stop_sequence": "stop",
    "max_tokens": "length",
}


class AnthropicLLMClient(LLMClient):
    """Anthropic messages client.

    Stateless. Transport-only retries.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "claude-3-5-sonnet-20241022",
        timeout: float = 60.0,
        max_retries: int = 3,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ):
        self._client = AsyncAnthropic(api_key=api_key, timeout=timeout, max_retries=0)
        self._model = model
        self._max_retries = max_retries
        self.metrics_hook = metrics_hook
        logger.info(
            "Initialized AnthropicLLMClient with model=%s, timeout=%s",
            model,
            timeout,
        )

    async def complete(
        self,
        *,
        messages: list[Message],
        temperature: float = 0.0,
        max_tokens: int | None = None,
    ) -> LLMResponse:
        start = monotonic()
        labels = {"provider": "anthropic", "model": self._model}

        system, conversation = self._extract_system(messages)

        logger.debug(
            "Calling Anthropic: model=%s, messages=%d", self._model, len(messages)
        )

        try:
            raw = await self._call_api(
                system=system,
                messages=[{"role": m.role.value, "content": m.content} for m in conversation],
                temperature=temperature,
                max_tokens=max_tokens or DEFAULT_MAX_TOKENS,
            )
        except APIError:
            self.metrics_hook.increment(names.LLM_ERRORS_TOTAL, labels=labels)
            raise

        latency_ms = elapsed_ms(start)
        response = self._normalize_response(raw, latency_ms)

        self.metrics_hook.record_latency(
            names.LLM_COMPLETION_DURATION, latency_ms, labels=labels
        )
        self.metrics_hook.increment(names.LLM_REQUESTS_TOTAL, labels=labels)
        self.metrics_hook.increment(names.LLM_TOKENS_PROMPT, response.usage.prompt_tokens)
        self.metrics_hook.increment(
            names.LLM_TOKENS_COMPLETION, response.usage.completion_tokens
        )
        self.metrics_hook.increment(names.LLM_TOKENS_TOTAL, response.usage.total_tokens)

        logger.info(
            "Anthropic completion: finish=%s, tokens=%d, latency=%.0fms",
            response.finish_reason,
            response.usage.total_tokens,
            latency_ms,
        )
        return response

    async def _call_api(
        self,
        *,
        system: str | None,
        messages: list[dict[str, str]],
        temperature: float,
        max_tokens: int,
    ) -> Any:
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self._max_retries),
            wait=wait_exponential(multiplier=0.5, min=0.5, max=10),
            retry=retry_if_exception_type(_TRANSIENT_ERRORS),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        ):
            with attempt:
                return await self._client.messages.create(
                    model=self._model,
                    messages=messages,  # type: ignore[arg-type]
                    temperature=temperature,
                    max_tokens=max_tokens,
                    system=system if system else NOT_GIVEN,
                )

    def _extract_system(
        self, messages: list[Message]
    ) -> tuple[str | None, list[Message]]:
        """Pull system messages out of the list.

        Anthropic takes the system prompt as a separate parameter. Several
        system messages are joined with blank lines.
        """
        system_parts = [m.content for m in messages if m.role == Role.SYSTEM]
        conversation = [m for m in messages if m.role != Role.SYSTEM]
        return ("\n\n".join(system_parts) or None), conversation

    def _normalize_response(self, raw: Any, latency_ms: float) -> LLMResponse:
        """Raw provider objects stop here."""
        text_parts = [block.text for block in raw.content if block.type == "text"]

        return LLMResponse(
            content="".join(text_parts) if text_parts else None,
            finish_reason=_FINISH_REASONS.get(raw.stop_reason, "error"),
            usage=Usage(
                prompt_tokens=raw.usage.input_tokens,
                completion_tokens=raw.usage.output_tokens,
                total_tokens=raw.usage.input_tokens + raw.usage.output_tokens,
            ),
            latency_ms=latency_ms,
        )
