# src/transcript_kit/summarization/models.py

from dataclasses import dataclass, field
from typing import Literal

from transcript_kit.llms.base import Usage
from transcript_kit.parsers.models import Block, ParsedSection

Strategy = Literal["direct", "map_reduce"]


@dataclass(frozen=True)
class SummaryResult:
    """Final summary plus its parsed forms.

    ``sections`` feeds summary cards, ``blocks`` feeds document renderers.
    """

    markdown: str
    sections: list[ParsedSection]
    blocks: list[Block]
    strategy: Strategy
    chunk_count: int
    usage: Usage = field(default_factory=Usage)
