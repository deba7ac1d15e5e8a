# src/transcript_kit/llms/config.py

from dataclasses import dataclass
from typing import Literal

DEFAULT_MODELS = {
    "openai": "gpt-4o",
    "anthropic": "claude-3-5-sonnet-20241022",
}


@dataclass(frozen=True)
class LLMConfig:
    """Configuration for LLM clients.

    Immutable. Explicit. No magic defaults from environment.
    """

    provider: Literal["openai", "anthropic"]
    model: str | None = None  # Provider default when unset
    api_key: str | None = None  # Falls back to provider's env var
    timeout: float = 60.0
    max_retries: int = 3

    @property
    def resolved_model(self) -> str:
        return self.model or DEFAULT_MODELS.get(self.provider, "")
