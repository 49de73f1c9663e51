"""Inline tokenization of a single block's text.

Hidden design decisions:
- The ordered set of inline constructs and their patterns
- How overlapping constructs are resolved (earliest match, then rule order)
- How link targets are resolved from the matched text
"""

import logging
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ..config import WWW_LINK_SCHEME
from ..models import InlineSpan, SpanType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InlineRule:
    """One inline construct: a pattern and how to turn a match into a span.

    Patterns capture the display text in a group named ``body``.
    """

    name: str
    pattern: str
    build: Callable[[re.Match[str]], InlineSpan]


def _styled(span_type: SpanType) -> Callable[[re.Match[str]], InlineSpan]:
    def build(match: re.Match[str]) -> InlineSpan:
        return InlineSpan(type=span_type, text=match.group("body"), literal=match.group(0))
    return build


def _bare_url(match: re.Match[str]) -> InlineSpan:
    literal = match.group(0)
    return InlineSpan(type=SpanType.LINK, text=literal, literal=literal, url=literal)


def _www_url(match: re.Match[str]) -> InlineSpan:
    literal = match.group(0)
    return InlineSpan(type=SpanType.LINK, text=literal, literal=literal, url=WWW_LINK_SCHEME + literal)


def _labelled_link(match: re.Match[str]) -> InlineSpan:
    return InlineSpan(
        type=SpanType.LINK,
        text=match.group("body"),
        literal=match.group(0),
        url=match.group("target"),
    )


BOLD_RULE = InlineRule("bold", r"\*\*(?P<body>[^*]+)\*\*", _styled(SpanType.BOLD))
ITALIC_RULE = InlineRule("italic", r"\*(?P<body>[^*]+)\*", _styled(SpanType.ITALIC))
CODE_RULE = InlineRule("code", r"`(?P<body>[^`]+)`", _styled(SpanType.CODE))
URL_RULE = InlineRule("url", r"https?://[^\s]+", _bare_url)
WWW_RULE = InlineRule("www", r"www\.[^\s]+", _www_url)
MARKDOWN_LINK_RULE = InlineRule(
    "markdown_link",
    r"\[(?P<body>[^\]]+)\]\((?P<target>https?://[^)\s]+)\)",
    _labelled_link,
)

DEFAULT_RULES: tuple[InlineRule, ...] = (BOLD_RULE, ITALIC_RULE, CODE_RULE, URL_RULE, WWW_RULE)
MARKDOWN_LINK_RULES: tuple[InlineRule, ...] = (
    BOLD_RULE, ITALIC_RULE, CODE_RULE, MARKDOWN_LINK_RULE, URL_RULE, WWW_RULE,
)


class InlineTokenizer:
    """Splits one block's text into plain and styled spans.

    All rules are combined into a single alternation, so the leftmost match in
    the text wins and, at equal positions, the earlier rule wins. Styled
    content is not tokenized again. Text between matches becomes plain spans,
    so concatenating every span's ``literal`` reproduces the input exactly.
    """

    def __init__(self, rules: Sequence[InlineRule] = DEFAULT_RULES):
        """Initialize the tokenizer.

        Args:
            rules: Inline constructs in priority order
        """
        self._rules = tuple(rules)
        self._single = {rule.name: re.compile(rule.pattern) for rule in self._rules}
        self._combined = re.compile(
            "|".join(f"(?P<{rule.name}>{self._strip_group_names(rule.pattern)})" for rule in self._rules)
        )

    @property
    def rules(self) -> tuple[InlineRule, ...]:
        """Rules in priority order."""
        return self._rules

    def tokenize(self, text: str) -> list[InlineSpan]:
        """Tokenize text into inline spans.

        Args:
            text: Free text of one block (a line, heading or list item)

        Returns:
            Spans in source order; empty for empty input

        Raises:
            TypeError: If text is not a string
        """
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")

        spans: list[InlineSpan] = []
        position = 0
        for match in self._combined.finditer(text):
            if match.start() > position:
                spans.append(InlineSpan.plain(text[position:match.start()]))
            spans.append(self._build(match))
            position = match.end()

        if position < len(text):
            spans.append(InlineSpan.plain(text[position:]))

        logger.debug("Tokenized %d chars into %d spans", len(text), len(spans))
        return spans

    def _build(self, match: re.Match[str]) -> InlineSpan:
        for rule in self._rules:
            if match.group(rule.name) is not None:
                own_match = self._single[rule.name].fullmatch(match.group(0))
                return rule.build(own_match)
        raise AssertionError("combined pattern matched without a rule group")

    @staticmethod
    def _strip_group_names(pattern: str) -> str:
        # Group names repeat across rules, which a single alternation does not allow.
        return re.sub(r"\(\?P<\w+>", "(?:", pattern)


def tokenize_inline(text: str, markdown_links: bool = False) -> list[InlineSpan]:
    """Tokenize text with the default rule set."""
    tokenizer = _MARKDOWN_LINK_TOKENIZER if markdown_links else _DEFAULT_TOKENIZER
    return tokenizer.tokenize(text)


_DEFAULT_TOKENIZER = InlineTokenizer()
_MARKDOWN_LINK_TOKENIZER = InlineTokenizer(MARKDOWN_LINK_RULES)
