"""Block-level parsing of normalized message text.

Hidden design decisions:
- Line classification order (fence, divider, heading, lists, text)
- How consecutive list lines are aggregated
- Treatment of blank lines and unterminated fences
"""

import logging
import re

from ..config import DIVIDER_LINES, FENCE_DELIMITER, MAX_HEADING_LEVEL, UNORDERED_MARKERS
from ..models import (
    CodeBlockElement,
    DividerElement,
    HeadingElement,
    ListElement,
    ParsedElement,
    TextElement,
)

logger = logging.getLogger(__name__)

# Headings are matched against the raw line, list markers against the stripped line.
HEADING_PATTERN = re.compile(rf"^(#{{1,{MAX_HEADING_LEVEL}}})\s+(.+)$")
UNORDERED_ITEM_PATTERN = re.compile(rf"^[{re.escape(UNORDERED_MARKERS)}]\s+(.+)$")
ORDERED_ITEM_PATTERN = re.compile(r"^[0-9]+\.\s+(.+)$")


class BlockParser:
    """Splits message text into an ordered list of block elements.

    Each line is classified in a fixed priority order. Fenced code and lists
    consume more than one line; everything else maps one line to at most one
    element. Blank lines outside code blocks produce nothing.

    The parser holds no state between calls, so one instance can be shared.
    """

    def __init__(self, merge_lists_across_blank_lines: bool = False):
        """Initialize the parser.

        Args:
            merge_lists_across_blank_lines: If True, blank lines between two
                list lines of the same marker class do not end the list
        """
        self.merge_lists_across_blank_lines = merge_lists_across_blank_lines

    def parse(self, text: str) -> list[ParsedElement]:
        """Parse text into block elements.

        Args:
            text: Preprocessed message text

        Returns:
            Elements in source order

        Raises:
            TypeError: If text is not a string
        """
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")

        lines = text.split("\n")
        elements: list[ParsedElement] = []

        i = 0
        while i < len(lines):
            line = lines[i]
            stripped = line.strip()

            if stripped.startswith(FENCE_DELIMITER):
                element, i = self._consume_code_block(lines, i)
                elements.append(element)
                continue

            if stripped in DIVIDER_LINES:
                elements.append(DividerElement(content=line))
                i += 1
                continue

            heading_match = HEADING_PATTERN.match(line)
            if heading_match:
                elements.append(HeadingElement(
                    level=len(heading_match.group(1)),
                    content=heading_match.group(2),
                ))
                i += 1
                continue

            if UNORDERED_ITEM_PATTERN.match(stripped):
                element, i = self._consume_list(lines, i, ordered=False)
                elements.append(element)
                continue

            if ORDERED_ITEM_PATTERN.match(stripped):
                element, i = self._consume_list(lines, i, ordered=True)
                elements.append(element)
                continue

            if stripped:
                elements.append(TextElement(content=line))
            i += 1

        logger.debug("Parsed %d lines into %d block elements", len(lines), len(elements))
        return elements

    def _consume_code_block(self, lines: list[str], start: int) -> tuple[CodeBlockElement, int]:
        """Collect a fenced code block starting at the opening fence.

        An unterminated fence captures every remaining line.

        Returns:
            The code block and the index of the first line after it
        """
        opening = lines[start].strip()[len(FENCE_DELIMITER):].split()
        language = opening[0] if opening else None

        body: list[str] = []
        i = start + 1
        while i < len(lines):
            if lines[i].strip().startswith(FENCE_DELIMITER):
                i += 1
                break
            body.append(lines[i])
            i += 1

        return CodeBlockElement(language=language, content="\n".join(body)), i

    def _consume_list(self, lines: list[str], start: int, ordered: bool) -> tuple[ListElement, int]:
        """Collect the maximal run of list lines sharing one marker class.

        Returns:
            The list element and the index of the first line after the run
        """
        pattern = ORDERED_ITEM_PATTERN if ordered else UNORDERED_ITEM_PATTERN
        items: list[str] = []

        i = start
        while i < len(lines):
            match = pattern.match(lines[i].strip())
            if match:
                items.append(match.group(1))
                i += 1
                continue

            if self.merge_lists_across_blank_lines and not lines[i].strip():
                next_content = self._skip_blank_lines(lines, i)
                if next_content < len(lines) and pattern.match(lines[next_content].strip()):
                    i = next_content
                    continue
            break

        return ListElement(items=tuple(items), ordered=ordered), i

    @staticmethod
    def _skip_blank_lines(lines: list[str], start: int) -> int:
        i = start
        while i < len(lines) and not lines[i].strip():
            i += 1
        return i


def parse_blocks(text: str, merge_lists_across_blank_lines: bool = False) -> list[ParsedElement]:
    """Parse text into block elements with a one-off parser."""
    return BlockParser(merge_lists_across_blank_lines).parse(text)
