from .config import (
    CONTENT_GUIDANCE,
    LANGUAGE_NAMES,
    ContentType,
    SummarizationConfig,
    language_name,
)
from .models import Strategy, SummaryResult
from .summarizer import TranscriptSummarizer

__all__ = [
    "CONTENT_GUIDANCE",
    "LANGUAGE_NAMES",
    "ContentType",
    "Strategy",
    "SummarizationConfig",
    "SummaryResult",
    "TranscriptSummarizer",
    "language_name",
]
