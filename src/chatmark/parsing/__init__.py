"""Parsing stages of the message pipeline.

Each stage is a pure transformation with no shared state:
- tags.py: backend annotation tags -> inline markup
- blocks.py: text -> block elements
- inline.py: block text -> inline spans
"""

from .blocks import BlockParser, parse_blocks
from .inline import DEFAULT_RULES, MARKDOWN_LINK_RULES, InlineRule, InlineTokenizer, tokenize_inline
from .tags import TAG_RULES, TagPreprocessor, TagRule, preprocess_tags

__all__ = [
    # Stages
    "TagPreprocessor",
    "BlockParser",
    "InlineTokenizer",
    # Rules
    "TagRule",
    "InlineRule",
    "TAG_RULES",
    "DEFAULT_RULES",
    "MARKDOWN_LINK_RULES",
    # Convenience functions
    "preprocess_tags",
    "parse_blocks",
    "tokenize_inline",
]
