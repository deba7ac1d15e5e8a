import logging
import math
import re
from time import monotonic

from transcript_kit.observability import names
from transcript_kit.observability.base import (
    MetricsHook,
    NoOpMetricsHook,
    elapsed_ms,
)

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 10000
DEFAULT_MAP_REDUCE_THRESHOLD = 15000
CHARS_PER_TOKEN = 4

# A boundary follows ., ! or ? when whitespace and an upper-case letter come
# next, or at the end of the text. Abbreviations such as "Dr. Smith" split.
_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+(?=[A-Z])|(?<=[.!?])$")


def split_sentences(text: str) -> list[str]:
    """Split text into trimmed, non-empty sentences."""
    sentences = _SENTENCE_BOUNDARY.split(text)
    return [s.strip() for s in sentences if s.strip()]


def chunk_text(
    text: str,
    target_size: int = DEFAULT_CHUNK_SIZE,
    *,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[str]:
    """Split text into chunks of roughly ``target_size`` characters.

    Chunks are built from whole sentences joined by a single space. A
    sentence that is longer than ``target_size`` on its own is never cut
    and becomes an oversized chunk. Text that already fits is returned
    unchanged as the only chunk.
    """
    start = monotonic()
    if target_size <= 0:
        raise ValueError("target_size must be > 0")

    if len(text) <= target_size:
        chunks = [text]
    else:
        chunks = []
        current = ""

        for sentence in split_sentences(text):
            if current and len(current) + 1 + len(sentence) > target_size:
                chunks.append(current.strip())
                current = sentence
            else:
                current = f"{current} {sentence}" if current else sentence

        if current.strip():
            chunks.append(current.strip())

    metrics_hook.record_latency(names.CHUNKING_DURATION, elapsed_ms(start))
    metrics_hook.increment(names.CHUNKING_CHUNKS_CREATED, len(chunks))
    logger.debug(
        "Chunked %d chars into %d chunks (target_size=%d)",
        len(text),
        len(chunks),
        target_size,
    )
    return chunks


def estimate_tokens(text: str) -> int:
    """Rough token count at four characters per token. Not a tokenizer."""
    return math.ceil(len(text) / CHARS_PER_TOKEN)


def should_use_map_reduce(
    text: str, threshold: int = DEFAULT_MAP_REDUCE_THRESHOLD
) -> bool:
    return len(text) > threshold
