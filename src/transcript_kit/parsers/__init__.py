# src/transcript_kit/parsers/__init__.py

"""Parsers that turn generated markdown into structured content.

Two independent, stateless parsers:

- ``MarkdownParser`` produces a block tree (headings, paragraphs, lists,
  tables) for renderers.
- ``SummaryParser`` splits a summary into executive summary, key takeaways
  and regular sections for display cards.

Example:
    >>> from transcript_kit.parsers import parse_markdown, Heading
    >>> parse_markdown("## Agenda")
    [Heading(level=2, content='Agenda')]
"""

from ._inline import extract_list_items, strip_inline_formatting
from .base import TextParser
from .markdown_parser import MarkdownParser, parse_markdown
from .models import (
    Alignment,
    Block,
    ExecutiveSummary,
    Heading,
    KeyTakeaways,
    ListBlock,
    Paragraph,
    ParsedSection,
    RegularSection,
    Table,
)
from .summary_parser import SummaryParser, parse_summary

__all__ = [
    # Parsers
    "TextParser",
    "MarkdownParser",
    "SummaryParser",
    "parse_markdown",
    "parse_summary",
    # Helpers
    "extract_list_items",
    "strip_inline_formatting",
    # Blocks
    "Alignment",
    "Block",
    "Heading",
    "Paragraph",
    "ListBlock",
    "Table",
    # Sections
    "ParsedSection",
    "ExecutiveSummary",
    "KeyTakeaways",
    "RegularSection",
]
