# src/transcript_kit/parsers/_inline.py

"""Line-level markdown helpers shared by the parsers."""

import re

# "- item", "* item", "+ item"
_UNORDERED_ITEM = re.compile(r"^[-*+]\s+(.+)$")
# "1. item"
_ORDERED_ITEM = re.compile(r"^\d+\.\s+(.+)$")

_BOLD = re.compile(r"\*\*(.+?)\*\*")
_ITALIC = re.compile(r"\*(.+?)\*")


def match_list_item(line: str) -> tuple[bool, str] | None:
    """Match a single list line.

    Returns ``(ordered, text)`` with the marker removed and the text
    trimmed, or None when the line is not a list item.
    """
    stripped = line.strip()

    match = _UNORDERED_ITEM.match(stripped)
    if match:
        return False, match.group(1).strip()

    match = _ORDERED_ITEM.match(stripped)
    if match:
        return True, match.group(1).strip()

    return None


def extract_list_items(content: str) -> list[str]:
    """Collect bullet and numbered item texts from content, in line order.

    Lines that are not list items are skipped.
    """
    items: list[str] = []
    for line in content.split("\n"):
        item = match_list_item(line)
        if item is not None:
            items.append(item[1])
    return items


def strip_inline_formatting(text: str) -> str:
    """Drop ``**bold**`` then ``*italic*`` markers, keeping the inner text.

    Single pass, non-nested, no escape handling.
    """
    text = _BOLD.sub(r"\1", text)
    return _ITALIC.sub(r"\1", text)
