# Chunking
from .chunking import chunk_text, estimate_tokens, should_use_map_reduce, split_sentences

# LLMs
from .llms import LLMClient, LLMConfig, LLMResponse, Message, Role, Usage, create_llm_client

# Observability
from .observability import InMemoryMetricsHook, MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    Block,
    ExecutiveSummary,
    Heading,
    KeyTakeaways,
    ListBlock,
    MarkdownParser,
    Paragraph,
    ParsedSection,
    RegularSection,
    SummaryParser,
    Table,
    parse_markdown,
    parse_summary,
)

# Prompts
from .prompts import Prompt, PromptsLibrary

# Summarization
from .summarization import SummarizationConfig, SummaryResult, TranscriptSummarizer

__all__ = [
    # Chunking
    "chunk_text",
    "estimate_tokens",
    "should_use_map_reduce",
    "split_sentences",
    # LLMs
    "LLMClient",
    "LLMConfig",
    "LLMResponse",
    "Message",
    "Role",
    "Usage",
    "create_llm_client",
    # Observability
    "InMemoryMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "Block",
    "ExecutiveSummary",
    "Heading",
    "KeyTakeaways",
    "ListBlock",
    "MarkdownParser",
    "Paragraph",
    "ParsedSection",
    "RegularSection",
    "SummaryParser",
    "Table",
    "parse_markdown",
    "parse_summary",
    # Prompts
    "Prompt",
    "PromptsLibrary",
    # Summarization
    "SummarizationConfig",
    "SummaryResult",
    "TranscriptSummarizer",
]
