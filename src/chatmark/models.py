"""Shared data structures for parsed chat messages.

Hides the representation of block elements and inline spans. Every stage of
the pipeline produces or consumes these types and nothing else.
"""

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class SenderRole(str, Enum):
    """Who sent the message. Picks the palette used for links and code."""

    USER = "user"
    BOT = "bot"


class ElementType(str, Enum):
    """Kind of a block-level element."""

    TEXT = "text"
    HEADING = "heading"
    LIST = "list"
    DIVIDER = "divider"
    CODE_BLOCK = "code_block"
    EVENT_INFO = "event_info"  # Reserved, no parsing rule produces it


class SpanType(str, Enum):
    """Kind of an inline span."""

    PLAIN = "plain"
    BOLD = "bold"
    ITALIC = "italic"
    CODE = "code"
    LINK = "link"


class TextElement(BaseModel):
    """A line of free text."""

    model_config = ConfigDict(frozen=True)

    type: Literal[ElementType.TEXT] = ElementType.TEXT
    content: str = Field(description="The source line, unmodified")


class HeadingElement(BaseModel):
    """A `#`, `##` or `###` heading."""

    model_config = ConfigDict(frozen=True)

    type: Literal[ElementType.HEADING] = ElementType.HEADING
    level: int = Field(ge=1, le=3, description="Number of leading '#' characters")
    content: str = Field(description="Heading text after the markers")


class ListElement(BaseModel):
    """A run of consecutive list lines sharing one marker class."""

    model_config = ConfigDict(frozen=True)

    type: Literal[ElementType.LIST] = ElementType.LIST
    items: tuple[str, ...] = Field(description="Raw item texts, markers removed")
    ordered: bool = Field(default=False, description="True for 'N.' markers")


class DividerElement(BaseModel):
    """A horizontal divider line."""

    model_config = ConfigDict(frozen=True)

    type: Literal[ElementType.DIVIDER] = ElementType.DIVIDER
    content: str = Field(default="---", description="The source line")


class CodeBlockElement(BaseModel):
    """A fenced code block. Content is verbatim and never re-parsed."""

    model_config = ConfigDict(frozen=True)

    type: Literal[ElementType.CODE_BLOCK] = ElementType.CODE_BLOCK
    language: str | None = Field(default=None, description="Token after the opening fence")
    content: str = Field(description="Lines between the fences joined by newlines")


ParsedElement = Annotated[
    TextElement | HeadingElement | ListElement | DividerElement | CodeBlockElement,
    Field(discriminator="type"),
]


class InlineSpan(BaseModel):
    """A styled or plain fragment of one block's text."""

    model_config = ConfigDict(frozen=True)

    type: SpanType = Field(description="Span style")
    text: str = Field(description="Text to display, markers stripped")
    literal: str = Field(description="Exact source characters consumed by this span")
    url: str | None = Field(default=None, description="Resolved target for links")

    @classmethod
    def plain(cls, text: str) -> "InlineSpan":
        """Create an unstyled span whose display text is its literal."""
        return cls(type=SpanType.PLAIN, text=text, literal=text)


class FormattedMessage(BaseModel):
    """Result of running a message through preprocessing and block parsing."""

    model_config = ConfigDict(frozen=True)

    role: SenderRole = Field(description="Sender of the message")
    source: str = Field(description="Raw message text as received")
    normalized: str = Field(description="Text after tag preprocessing")
    elements: tuple[ParsedElement, ...] = Field(description="Block elements in source order")
