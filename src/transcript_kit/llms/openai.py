# src/transcript_kit/llms/openai.py

import logging
from time import monotonic
from typing import Any

from openai import (
    NOT_GIVEN,
    APIConnectionError,
    AsyncOpenAI,
    InternalServerError,
    OpenAIError,
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

from .base import FinishReason, LLMClient, LLMResponse, Message, Usage

logger = logging.getLogger(__name__)

# Network failures, throttling and 5xx; anything else is the caller's problem.
_TRANSIENT_ERRORS = (APIConnectionError, RateLimitError, InternalServerError)

_FINISH_REASONS: dict[str, FinishReason] = {
    "stop": "stop",
    "length": "length",
}


class OpenAILLMClient(LLMClient):
    """OpenAI chat completions client.

    Stateless. Transport-only retries.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "gpt-4o",
        timeout: float = 60.0,
        max_retries: int = 3,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ):
        # SDK-level retries are disabled; tenacity owns the retry policy.
        self._client = AsyncOpenAI(api_key=api_key, timeout=timeout, max_retries=0)
        self._model = model
        self._max_retries = max_retries
        self.metrics_hook = metrics_hook
        logger.info(
            "Initialized OpenAILLMClient with model=%s, timeout=%s",
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
        labels = {"provider": "openai", "model": self._model}

        logger.debug(
            "Calling OpenAI: model=%s, messages=%d", self._model, len(messages)
        )

        try:
            raw = await self._call_api(
                messages=self._convert_messages(messages),
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except OpenAIError:
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
            "OpenAI completion: finish=%s, tokens=%d, latency=%.0fms",
            response.finish_reason,
            response.usage.total_tokens,
            latency_ms,
        )
        return response

    async def _call_api(
        self,
        *,
        messages: list[dict[str, str]],
        temperature: float,
        max_tokens: int | None,
    ) -> Any:
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self._max_retries),
            wait=wait_exponential(multiplier=0.5, min=0.5, max=10),
            retry=retry_if_exception_type(_TRANSIENT_ERRORS),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        ):
            with attempt:
                return await self._client.chat.completions.create(
                    model=self._model,
                    messages=messages,  # type: ignore[arg-type]
                    temperature=temperature,
                    max_tokens=max_tokens if max_tokens else NOT_GIVEN,
                )

    def _convert_messages(self, messages: list[Message]) -> list[dict[str, str]]:
        return [{"role": m.role.value, "content": m.content} for m in messages]

    def _normalize_response(self, raw: Any, latency_ms: float) -> LLMResponse:
        """Raw provider objects stop here."""
        choice = raw.choices[0]
        usage = raw.usage

        return LLMResponse(
            content=choice.message.content,
            finish_reason=_FINISH_REASONS.get(choice.finish_reason, "error"),
            usage=Usage(
                prompt_tokens=usage.prompt_tokens,
                completion_tokens=usage.completion_tokens,
                total_tokens=usage.total_tokens,
            )
            if usage
            else Usage(),
            latency_ms=latency_ms,
        )
