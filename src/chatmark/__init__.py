"""
Chatmark: turns chat message text into structured, renderable elements.

The pipeline runs in strict order, each stage a pure function:
tag preprocessing -> block parsing -> inline tokenization -> rendering.
"""

__version__ = "0.1.0"

from .config import FormatterSettings, load_settings
from .models import (
    CodeBlockElement,
    DividerElement,
    ElementType,
    FormattedMessage,
    HeadingElement,
    InlineSpan,
    ListElement,
    ParsedElement,
    SenderRole,
    SpanType,
    TextElement,
)
from .parsing import (
    BlockParser,
    InlineTokenizer,
    TagPreprocessor,
    parse_blocks,
    preprocess_tags,
    tokenize_inline,
)
from .pipeline import MessageFormatter

__all__ = [
    # Models
    "CodeBlockElement",
    "DividerElement",
    "ElementType",
    "FormattedMessage",
    "HeadingElement",
    "InlineSpan",
    "ListElement",
    "ParsedElement",
    "SenderRole",
    "SpanType",
    "TextElement",
    # Stages
    "TagPreprocessor",
    "BlockParser",
    "InlineTokenizer",
    "MessageFormatter",
    "preprocess_tags",
    "parse_blocks",
    "tokenize_inline",
    # Configuration
    "FormatterSettings",
    "load_settings",
]
