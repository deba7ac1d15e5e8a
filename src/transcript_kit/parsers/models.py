# src/transcript_kit/parsers/models.py

"""Result types produced by the markdown and summary parsers.

Both result families are tagged unions of frozen dataclasses. Each variant
carries a class-level ``type`` tag matching the wire names used by the
front-end, so callers can either ``match`` on the class or dispatch on
``block.type``.
"""

from dataclasses import dataclass
from typing import ClassVar, Literal, TypeAlias

Alignment: TypeAlias = Literal["left", "center", "right"]


# ============================================================================
# Blocks
# ============================================================================


@dataclass(frozen=True)
class Heading:
    type: ClassVar[Literal["heading"]] = "heading"

    level: Literal[1, 2, 3]
    content: str


@dataclass(frozen=True)
class Paragraph:
    type: ClassVar[Literal["paragraph"]] = "paragraph"

    content: str


@dataclass(frozen=True)
class ListBlock:
    type: ClassVar[Literal["list"]] = "list"

    ordered: bool
    items: list[str]


@dataclass(frozen=True)
class Table:
    """A pipe table.

    ``alignments`` has one entry per header column and every row has
    exactly ``len(headers)`` cells.
    """

    type: ClassVar[Literal["table"]] = "table"

    headers: list[str]
    rows: list[list[str]]
    alignments: list[Alignment]

    @property
    def column_count(self) -> int:
        return len(self.headers)


Block: TypeAlias = Heading | Paragraph | ListBlock | Table


# ============================================================================
# Summary sections
# ============================================================================


@dataclass(frozen=True)
class ExecutiveSummary:
    type: ClassVar[Literal["executive_summary"]] = "executive_summary"

    title: str
    content: str


@dataclass(frozen=True)
class KeyTakeaways:
    type: ClassVar[Literal["key_takeaways"]] = "key_takeaways"

    title: str
    content: str
    items: list[str] | None = None  # None when content has no list items


@dataclass(frozen=True)
class RegularSection:
    type: ClassVar[Literal["regular"]] = "regular"

    content: str
    title: str = ""


ParsedSection: TypeAlias = ExecutiveSummary | KeyTakeaways | RegularSection
