# src/transcript_kit/llms/factory.py

from transcript_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import LLMClient
from .config import LLMConfig


def create_llm_client(
    config: LLMConfig,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> LLMClient:
    """Build the client for ``config.provider``.

    Raises:
        ValueError: If provider is unknown.

    Example:
        >>> config = LLMConfig(provider="anthropic", api_key="sk-...")
        >>> client = create_llm_client(config)
    """
    if config.provider == "openai":
        from .openai import OpenAILLMClient

        return OpenAILLMClient(
            api_key=config.api_key,
            model=config.resolved_model,
            timeout=config.timeout,
            max_retries=config.max_retries,
            metrics_hook=metrics_hook,
        )

    if config.provider == "anthropic":
        from .anthropic import AnthropicLLMClient

        return AnthropicLLMClient(
            api_key=config.api_key,
            model=config.resolved_model,
            timeout=config.timeout,
            max_retries=config.max_retries,
            metrics_hook=metrics_hook,
        )

    raise ValueError(f"Unknown LLM provider: {config.provider}")
