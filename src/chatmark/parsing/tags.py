"""Tag preprocessing for backend annotation tags.

The chat backend marks structured event fields with pseudo-XML tags of the
shape ``<i id='KEY'>VALUE</i>``. This module rewrites them into the
lightweight markup understood by the block parser.

Hidden design decisions:
- Rule order (specific keys before the generic fallback)
- Emoji labels used for well-known event fields
- What counts as leftover tag markup to strip
"""

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TagRule:
    """A single rewrite rule applied to the whole message."""

    name: str
    pattern: re.Pattern[str]
    replacement: str
    until_stable: bool = False

    def apply(self, text: str) -> str:
        text, count = self.pattern.subn(self.replacement, text)
        # Stripping can splice fragments into a new tag, so repeat until none are left.
        while self.until_stable and count:
            text, count = self.pattern.subn(self.replacement, text)
        return text


def _rule(name: str, pattern: str, replacement: str, until_stable: bool = False) -> TagRule:
    return TagRule(name, re.compile(pattern, re.IGNORECASE), replacement, until_stable)


# Specific rules must run before the generic fallback, which would swallow them.
TAG_RULES: tuple[TagRule, ...] = (
    _rule("date", r"<i id='date'>Date:\s*([^<]+)</i>", "📅 **Date:** \\1"),
    _rule("location", r"<i id='location'>Location:\s*([^<]+)</i>", "📍 **Location:** \\1"),
    _rule("name", r"<i id='name'>([^<]+)</i>", "🎯 **Event:** \\1"),
    _rule(
        "price_link",
        r"<i id='price'>Tickets:\s*\[Get Tickets\]\s*\(([^)]+)\)</i>",
        "🎟️ **Tickets:** [Get Tickets](\\1)",
    ),
    _rule("price", r"<i id='price'>Tickets:\s*\[Get Tickets\]</i>", "🎟️ **Tickets:** Get Tickets"),
    _rule("description", r"<i id='description'>([^<]+)</i>", "📝 **Details:** \\1"),
    _rule("generic", r"<i id='([^']+)'>([^<]+)</i>", "**\\1:** \\2"),
    # Leftover <i ...> / </i> markup; other tags such as <img> pass through.
    _rule("cleanup", r"</?i(?:\s[^>]*)?>", "", until_stable=True),
)


class TagPreprocessor:
    """Rewrites backend annotation tags into inline markup.

    A pure string transform: it never raises for string input and never
    inspects anything but the text it is given.
    """

    def __init__(self, rules: tuple[TagRule, ...] = TAG_RULES):
        self._rules = rules

    @property
    def rules(self) -> tuple[TagRule, ...]:
        """Rules in the order they are applied."""
        return self._rules

    def preprocess(self, text: str) -> str:
        """Rewrite every annotation tag in the text.

        Args:
            text: Raw message text

        Returns:
            Text with no ``<i>`` tags remaining

        Raises:
            TypeError: If text is not a string
        """
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")
        if "<" not in text:
            return text

        original_length = len(text)
        for rule in self._rules:
            text = rule.apply(text)
        logger.debug("Tag preprocessing: %d -> %d chars", original_length, len(text))
        return text


def preprocess_tags(text: str) -> str:
    """Rewrite annotation tags using the default rules."""
    return _DEFAULT_PREPROCESSOR.preprocess(text)


_DEFAULT_PREPROCESSOR = TagPreprocessor()
