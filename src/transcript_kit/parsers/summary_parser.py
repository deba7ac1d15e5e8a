# src/transcript_kit/parsers/summary_parser.py

import logging
import re
from time import monotonic

from transcript_kit.observability import names
from transcript_kit.observability.base import (
    MetricsHook,
    NoOpMetricsHook,
    elapsed_ms,
)

from ._inline import extract_list_items
from .base import TextParser
from .models import ExecutiveSummary, KeyTakeaways, ParsedSection, RegularSection

logger = logging.getLogger(__name__)

# Presence checks: "## EXECUTIVE SUMMARY" or "**EXECUTIVE SUMMARY**", any case.
_EXECUTIVE_SUMMARY_PRESENT = re.compile(
    r"(?:^|\n)(?:##\s*|\*\*)(EXECUTIVE\s+SUMMARY)(?:\*\*)?(?:\s|$)", re.IGNORECASE
)
_KEY_TAKEAWAYS_PRESENT = re.compile(
    r"(?:^|\n)(?:##\s*|\*\*)(KEY\s+TAKEAWAYS?)(?:\*\*)?(?:\s|$)", re.IGNORECASE
)

# Split points. Bold headings must be upper case, so an all-caps bold line
# inside ordinary prose also starts a new section.
_ANY_HEADING = re.compile(r"(?:^|\n)(##\s+[^\n]+|\*\*[A-Z\s]+\*\*)")

_EXECUTIVE_SUMMARY_TITLE = re.compile(r"^EXECUTIVE\s+SUMMARY$", re.IGNORECASE)
_KEY_TAKEAWAYS_TITLE = re.compile(r"^KEY\s+TAKEAWAYS?$", re.IGNORECASE)


class SummaryParser(TextParser[ParsedSection]):
    """
    Shallow section splitter for generated summaries.

    - Recognizes EXECUTIVE SUMMARY and KEY TAKEAWAYS headings
    - Everything else is kept as regular markdown, untouched
    - Without any special heading the whole input is one regular section
    """

    def __init__(self, metrics_hook: MetricsHook = NoOpMetricsHook()) -> None:
        self.metrics_hook = metrics_hook

    def parse(self, text: str) -> list[ParsedSection]:
        if not text or not text.strip():
            return []

        start = monotonic()

        if not (
            _EXECUTIVE_SUMMARY_PRESENT.search(text)
            or _KEY_TAKEAWAYS_PRESENT.search(text)
        ):
            logger.debug("No special sections found, returning content as regular")
            sections: list[ParsedSection] = [RegularSection(content=text)]
        else:
            sections = self._split_sections(text)

        self.metrics_hook.record_latency(names.SUMMARY_PARSE_DURATION, elapsed_ms(start))
        self.metrics_hook.increment(names.SUMMARY_SECTIONS_PARSED, len(sections))
        logger.debug("Parsed %d summary sections", len(sections))
        return sections

    def _split_sections(self, text: str) -> list[ParsedSection]:
        # re.split with one capture group yields
        # [leading, heading, content, heading, content, ...]
        parts = _ANY_HEADING.split(text)
        sections: list[ParsedSection] = []

        leading = parts[0].strip()
        if leading:
            sections.append(RegularSection(content=leading))

        for index in range(1, len(parts), 2):
            heading = parts[index].strip()
            content = parts[index + 1].strip() if index + 1 < len(parts) else ""
            sections.append(self._build_section(heading, content))

        return sections

    def _build_section(self, heading: str, content: str) -> ParsedSection:
        title = _heading_text(heading)

        if _EXECUTIVE_SUMMARY_TITLE.match(title):
            return ExecutiveSummary(title=title, content=content)

        if _KEY_TAKEAWAYS_TITLE.match(title):
            items = extract_list_items(content)
            return KeyTakeaways(title=title, content=content, items=items or None)

        return RegularSection(content=f"{heading}\n{content}" if content else heading)


def _heading_text(heading: str) -> str:
    """Remove the ``## `` prefix or the surrounding ``**`` markers."""
    text = re.sub(r"^##\s+", "", heading)
    text = re.sub(r"^\*\*", "", text)
    text = re.sub(r"\*\*$", "", text)
    return text.strip()


_default_parser = SummaryParser()


def parse_summary(markdown: str) -> list[ParsedSection]:
    """Split a generated summary into sections with a shared, stateless parser."""
    return _default_parser.parse(markdown)
