# src/transcript_kit/llms/__init__.py

"""LLM client layer for transcript-kit.

A thin, stateless abstraction over chat-completion providers, used by the
summarizer to run map and reduce calls.

Example:
    >>> from transcript_kit.llms import create_llm_client, LLMConfig, Message
    >>>
    >>> client = create_llm_client(LLMConfig(provider="openai"))
    >>> response = await client.complete(messages=[Message.user("Hello!")])
    >>> print(response.text)
"""

from .base import FinishReason, LLMClient, LLMResponse, Message, Role, Usage
from .config import DEFAULT_MODELS, LLMConfig
from .factory import create_llm_client

__all__ = [
    # Factory
    "create_llm_client",
    # Protocol
    "LLMClient",
    # Config
    "DEFAULT_MODELS",
    "LLMConfig",
    # Types
    "FinishReason",
    "Message",
    "Role",
    "LLMResponse",
    "Usage",
]
