# src/transcript_kit/summarization/config.py

from dataclasses import dataclass
from typing import Literal

from transcript_kit.chunking import DEFAULT_CHUNK_SIZE, DEFAULT_MAP_REDUCE_THRESHOLD

ContentType = Literal["meeting", "lecture", "interview", "podcast", "voice-memo", "general"]

CONTENT_GUIDANCE: dict[str, str] = {
    "meeting": "Focus on: key decisions, action items, participants, and next steps.",
    "lecture": "Focus on: main topics, key concepts, important examples, and takeaways.",
    "interview": "Focus on: main questions, key responses, insights, and quotes.",
    "podcast": "Focus on: main topics discussed, key points, interesting anecdotes.",
    "voice-memo": "Focus on: core message, important details, and any reminders.",
}

LANGUAGE_NAMES: dict[str, str] = {
    "en": "English",
    "it": "Italian",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
    "pt": "Portuguese",
    "nl": "Dutch",
    "ja": "Japanese",
    "zh": "Chinese",
}


def language_name(code: str | None) -> str | None:
    """Display name for a language code; unknown codes fall back to English."""
    if not code:
        return None
    return LANGUAGE_NAMES.get(code.lower(), "English")


@dataclass(frozen=True)
class SummarizationConfig:
    """Settings for one summarization job.

    Immutable. Lengths are in characters.
    """

    content_type: ContentType = "general"
    language: str | None = None
    chunk_size: int = DEFAULT_CHUNK_SIZE
    map_reduce_threshold: int = DEFAULT_MAP_REDUCE_THRESHOLD
    max_concurrency: int = 4
    temperature: float = 0.3
    max_tokens: int | None = None
    min_transcript_length: int = 10
    max_transcript_length: int = 500_000

    def __post_init__(self) -> None:
        if self.content_type not in (*CONTENT_GUIDANCE, "general"):
            raise ValueError(f"Unknown content type: {self.content_type}")
        if self.chunk_size <= 0:
            raise ValueError("chunk_size must be > 0")
        if self.max_concurrency <= 0:
            raise ValueError("max_concurrency must be > 0")
