from .chunking import (
    CHARS_PER_TOKEN,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_MAP_REDUCE_THRESHOLD,
    chunk_text,
    estimate_tokens,
    should_use_map_reduce,
    split_sentences,
)

__all__ = [
    "CHARS_PER_TOKEN",
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_MAP_REDUCE_THRESHOLD",
    "chunk_text",
    "estimate_tokens",
    "should_use_map_reduce",
    "split_sentences",
]
