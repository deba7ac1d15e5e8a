# src/transcript_kit/llms/base.py

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Protocol

from transcript_kit.observability.base import MetricsHook

FinishReason = Literal["stop", "length", "error"]


class Role(str, Enum):
    """Message role in a conversation."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class Message:
    """A single message sent to a model. Immutable, provider-agnostic."""

    role: Role
    content: str

    @classmethod
    def system(cls, content: str) -> "Message":
        return cls(role=Role.SYSTEM, content=content)

    @classmethod
    def user(cls, content: str) -> "Message":
        return cls(role=Role.USER, content=content)


@dataclass(frozen=True)
class Usage:
    """Token usage for one or more completions."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0

    def __add__(self, other: "Usage") -> "Usage":
        return Usage(
            prompt_tokens=self.prompt_tokens + other.prompt_tokens,
            completion_tokens=self.completion_tokens + other.completion_tokens,
            total_tokens=self.total_tokens + other.total_tokens,
        )


@dataclass(frozen=True)
class LLMResponse:
    """Normalized LLM response.

    Provider details never leak outside the adapter.
    This is the only type callers ever see.
    """

    content: str | None
    finish_reason: FinishReason
    usage: Usage
    latency_ms: float

    @property
    def text(self) -> str:
        """Response content, or an empty string when the model sent none."""
        return self.content or ""


class LLMClient(Protocol):
    """Protocol for LLM clients.

    - Stateless: every call receives the full message list
    - Transport only: retries only on network/rate-limit errors
    - No leakage: provider objects never escape the adapter
    """

    metrics_hook: MetricsHook

    async def complete(
        self,
        *,
        messages: list[Message],
        temperature: float = 0.0,
        max_tokens: int | None = None,
    ) -> LLMResponse:
        """Single completion over a full message list.

        Raises:
            Provider-specific errors after retry exhaustion. Output that
            looks wrong is returned as is; judging it is the caller's job.
        """
        ...
