"""Composition of the parsing stages.

Hides the order in which the stages run and how results are memoized.
Rendering is left to the caller, which picks an ElementRenderer.
"""

import logging
from functools import lru_cache

from .config import FormatterSettings
from .models import (
    ElementType,
    FormattedMessage,
    InlineSpan,
    ParsedElement,
    SenderRole,
)
from .parsing import (
    DEFAULT_RULES,
    MARKDOWN_LINK_RULES,
    BlockParser,
    InlineTokenizer,
    TagPreprocessor,
)

logger = logging.getLogger(__name__)


class MessageFormatter:
    """Runs a message through preprocessing and block parsing.

    Results are deterministic, so they are memoized on (text, role). The
    role does not change parsing; it is part of the key because renderers
    style links and code differently per sender.

    Example:
        formatter = MessageFormatter()
        message = formatter.format("# Title\\n- a\\n- b", SenderRole.BOT)
        for element in message.elements:
            ...
    """

    def __init__(self, settings: FormatterSettings | None = None):
        """Initialize the formatter.

        Args:
            settings: Pipeline settings (defaults used if None)
        """
        self.settings = settings or FormatterSettings()
        self.preprocessor = TagPreprocessor()
        self.block_parser = BlockParser(
            merge_lists_across_blank_lines=self.settings.merge_lists_across_blank_lines
        )
        self.tokenizer = InlineTokenizer(
            MARKDOWN_LINK_RULES if self.settings.markdown_links else DEFAULT_RULES
        )
        self._format_cached = lru_cache(maxsize=self.settings.cache_size)(self._format)

    def format(self, text: str, role: SenderRole = SenderRole.BOT) -> FormattedMessage:
        """Preprocess and block-parse a message.

        Args:
            text: Raw message text
            role: Sender of the message

        Returns:
            The parsed message

        Raises:
            TypeError: If text is not a string
        """
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")
        return self._format_cached(text, SenderRole(role))

    def spans(self, text: str) -> list[InlineSpan]:
        """Tokenize one block's free text into inline spans."""
        return self.tokenizer.tokenize(text)

    def element_spans(self, element: ParsedElement) -> list[list[InlineSpan]]:
        """Tokenize the free text of an element.

        Returns one span list per text unit: one for text and heading
        elements, one per item for lists, and none for dividers and code
        blocks (code is displayed verbatim).
        """
        if element.type in (ElementType.TEXT, ElementType.HEADING):
            return [self.tokenizer.tokenize(element.content)]
        if element.type == ElementType.LIST:
            return [self.tokenizer.tokenize(item) for item in element.items]
        return []

    def cache_info(self):
        """Return hit/miss statistics of the memoization cache."""
        return self._format_cached.cache_info()

    def clear_cache(self) -> None:
        """Drop every memoized result."""
        self._format_cached.cache_clear()

    def _format(self, text: str, role: SenderRole) -> FormattedMessage:
        logger.debug("Formatting %d chars for %s (cache miss)", len(text), role.value)
        normalized = self.preprocessor.preprocess(text)
        elements = self.block_parser.parse(normalized)
        return FormattedMessage(
            role=role,
            source=text,
            normalized=normalized,
            elements=tuple(elements),
        )
