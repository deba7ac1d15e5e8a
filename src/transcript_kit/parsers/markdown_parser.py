# src/transcript_kit/parsers/markdown_parser.py

import logging
import re
from time import monotonic

from transcript_kit.observability import names
from transcript_kit.observability.base import (
    MetricsHook,
    NoOpMetricsHook,
    elapsed_ms,
)

from ._inline import match_list_item, strip_inline_formatting
from .base import TextParser
from .models import Alignment, Block, Heading, ListBlock, Paragraph, Table

logger = logging.getLogger(__name__)

# Only levels 1-3 are headings; "#### x" is paragraph text.
_HEADING = re.compile(r"^(#{1,3})\s+(.+)$")
_SEPARATOR_CELL = re.compile(r"^:?-+:?$")


class MarkdownParser(TextParser[Block]):
    """
    Markdown to block parser for LLM and transcript output.

    - Headings (levels 1-3), paragraphs, flat lists and pipe tables
    - Inline bold/italic markers are stripped to plain text
    - Never raises: unrecognized markup becomes a paragraph
    """

    def __init__(self, metrics_hook: MetricsHook = NoOpMetricsHook()) -> None:
        self.metrics_hook = metrics_hook

    def parse(self, text: str) -> list[Block]:
        if not text or not text.strip():
            return []

        start = monotonic()
        lines = text.splitlines()
        blocks: list[Block] = []
        i = 0

        while i < len(lines):
            stripped = lines[i].strip()

            if not stripped:
                i += 1
                continue

            block: Block
            if stripped.startswith("|"):
                block, i = self._parse_table(lines, i)
            elif (heading := self._parse_heading(stripped)) is not None:
                block, i = heading, i + 1
            elif match_list_item(stripped) is not None:
                block, i = self._parse_list(lines, i)
            else:
                block, i = self._parse_paragraph(lines, i)

            blocks.append(block)

        self.metrics_hook.record_latency(names.MARKDOWN_PARSE_DURATION, elapsed_ms(start))
        self.metrics_hook.increment(names.MARKDOWN_BLOCKS_PARSED, len(blocks))
        logger.debug("Parsed %d markdown blocks from %d lines", len(blocks), len(lines))
        return blocks

    def _parse_heading(self, line: str) -> Heading | None:
        match = _HEADING.match(line)
        if not match:
            return None

        level = len(match.group(1))
        content = strip_inline_formatting(match.group(2).strip())
        return Heading(level=level, content=content)  # type: ignore[arg-type]

    def _parse_table(self, lines: list[str], start: int) -> tuple[Block, int]:
        """
        Consume a run of pipe lines.

        The run is a table only when it has a header row followed by a
        separator row; otherwise it is kept as paragraph text.
        """
        i = start
        run: list[str] = []
        while i < len(lines) and lines[i].strip().startswith("|"):
            run.append(lines[i].strip())
            i += 1

        if len(run) < 2 or not self._is_separator(run[1]):
            logger.debug("Pipe run at line %d is not a table", start)
            return Paragraph(content=strip_inline_formatting(" ".join(run))), i

        headers = [strip_inline_formatting(cell) for cell in _split_row(run[0])]
        width = len(headers)

        alignments: list[Alignment] = _fit(
            [_alignment(cell) for cell in _split_row(run[1])], width, "left"
        )
        rows = [
            _fit([strip_inline_formatting(cell) for cell in _split_row(line)], width, "")
            for line in run[2:]
        ]

        return Table(headers=headers, rows=rows, alignments=alignments), i

    def _is_separator(self, line: str) -> bool:
        cells = _split_row(line)
        return all(_SEPARATOR_CELL.match(cell) for cell in cells)

    def _parse_list(self, lines: list[str], start: int) -> tuple[Block, int]:
        i = start
        items: list[str] = []
        ordered: bool | None = None

        while i < len(lines):
            item = match_list_item(lines[i])
            if item is None:
                break

            # The first marker decides; later markers may differ.
            if ordered is None:
                ordered = item[0]
            items.append(strip_inline_formatting(item[1]))
            i += 1

        return ListBlock(ordered=bool(ordered), items=items), i

    def _parse_paragraph(self, lines: list[str], start: int) -> tuple[Block, int]:
        # The first line always belongs to the paragraph, so the parser
        # keeps moving even when that line merely resembles block markup.
        para_lines = [lines[start].strip()]
        i = start + 1

        while i < len(lines):
            stripped = lines[i].strip()
            if not stripped or self._starts_block(stripped):
                break
            para_lines.append(stripped)
            i += 1

        content = strip_inline_formatting(" ".join(para_lines))
        return Paragraph(content=content), i

    def _starts_block(self, line: str) -> bool:
        return (
            line.startswith("|")
            or _HEADING.match(line) is not None
            or match_list_item(line) is not None
        )


def _split_row(line: str) -> list[str]:
    """Split a pipe row into trimmed cells, keeping empty cells."""
    content = line.strip()
    if content.startswith("|"):
        content = content[1:]
    if content.endswith("|"):
        content = content[:-1]
    return [cell.strip() for cell in content.split("|")]


def _alignment(cell: str) -> Alignment:
    left = cell.startswith(":")
    right = cell.endswith(":")
    if left and right:
        return "center"
    if right:
        return "right"
    return "left"


def _fit(cells: list, width: int, fill: str) -> list:
    """Pad with ``fill`` or truncate so that exactly ``width`` cells remain."""
    return cells[:width] + [fill] * (width - len(cells))


_default_parser = MarkdownParser()


def parse_markdown(markdown: str) -> list[Block]:
    """Parse markdown into blocks with a shared, stateless parser."""
    return _default_parser.parse(markdown)
