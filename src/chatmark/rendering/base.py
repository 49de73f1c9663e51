"""Base class for element renderers.

A renderer turns the block/span model into visual output. The base class
owns the contract every renderer must honour:
- exactly one rendered unit per element, in source order
- free text (text, heading, list items) goes through the inline tokenizer
- code block content is passed through verbatim, never tokenized
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from ..models import (
    CodeBlockElement,
    DividerElement,
    ElementType,
    FormattedMessage,
    HeadingElement,
    InlineSpan,
    ListElement,
    ParsedElement,
    SenderRole,
    TextElement,
)
from ..parsing import InlineTokenizer

T = TypeVar("T")


class ElementRenderer(ABC, Generic[T]):
    """Abstract base class for renderers producing one unit of type T per element."""

    def __init__(self, tokenizer: InlineTokenizer | None = None):
        """Initialize the renderer.

        Args:
            tokenizer: Inline tokenizer for free text (default rules if None)
        """
        self.tokenizer = tokenizer or InlineTokenizer()

    def render(self, message: FormattedMessage) -> list[T]:
        """Render every element of a message.

        Args:
            message: Parsed message

        Returns:
            One rendered unit per element, in source order
        """
        return [self.render_element(element, message.role) for element in message.elements]

    def render_element(self, element: ParsedElement, role: SenderRole) -> T:
        """Render a single element for the given sender."""
        if element.type == ElementType.HEADING:
            return self.render_heading(element, self.tokenizer.tokenize(element.content), role)
        if element.type == ElementType.LIST:
            items = [self.tokenizer.tokenize(item) for item in element.items]
            return self.render_list(element, items, role)
        if element.type == ElementType.CODE_BLOCK:
            return self.render_code_block(element, role)
        if element.type == ElementType.DIVIDER:
            return self.render_divider(element, role)
        return self.render_text(element, self.tokenizer.tokenize(element.content), role)

    @abstractmethod
    def render_text(self, element: TextElement, spans: list[InlineSpan], role: SenderRole) -> T:
        """Render a line of free text."""

    @abstractmethod
    def render_heading(self, element: HeadingElement, spans: list[InlineSpan], role: SenderRole) -> T:
        """Render a heading."""

    @abstractmethod
    def render_list(
        self,
        element: ListElement,
        items: list[list[InlineSpan]],
        role: SenderRole
    ) -> T:
        """Render a list. ``items`` holds the spans of each item."""

    @abstractmethod
    def render_divider(self, element: DividerElement, role: SenderRole) -> T:
        """Render a divider."""

    @abstractmethod
    def render_code_block(self, element: CodeBlockElement, role: SenderRole) -> T:
        """Render a code block verbatim."""
