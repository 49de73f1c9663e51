"""Unit and property-based tests for inline tokenization."""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from chatmark import InlineSpan, SpanType
from chatmark.parsing import MARKDOWN_LINK_RULES, InlineTokenizer, tokenize_inline


def kinds(spans):
    return [span.type for span in spans]


class TestStyledSpans:
    """Tests for bold, italic and code spans."""

    def test_bold(self, tokenizer):
        """Test '**X**' becomes a bold span."""
        spans = tokenizer.tokenize("a **b** c")
        assert spans == [
            InlineSpan.plain("a "),
            InlineSpan(type=SpanType.BOLD, text="b", literal="**b**"),
            InlineSpan.plain(" c"),
        ]

    def test_italic(self, tokenizer):
        """Test '*X*' becomes an italic span."""
        (span,) = tokenizer.tokenize("*soft*")
        assert span.type == SpanType.ITALIC
        assert span.text == "soft"
        assert span.literal == "*soft*"

    def test_code(self, tokenizer):
        """Test backticks become a code span with literal content."""
        spans = tokenizer.tokenize("run `pip **install**` now")
        assert kinds(spans) == [SpanType.PLAIN, SpanType.CODE, SpanType.PLAIN]
        assert spans[1].text == "pip **install**"

    def test_bold_content_is_not_tokenized(self, tokenizer):
        """Test styled content is taken literally."""
        (span,) = tokenizer.tokenize("**see www.example.com**")
        assert span.type == SpanType.BOLD
        assert span.text == "see www.example.com"

    def test_bold_wins_over_italic(self, tokenizer):
        """Test the earlier rule wins at the same position."""
        assert kinds(tokenizer.tokenize("**x**")) == [SpanType.BOLD]

    def test_earliest_position_wins(self, tokenizer):
        """Test a later-priority rule that starts first is used."""
        spans = tokenizer.tokenize("`a` **b**")
        assert kinds(spans) == [SpanType.CODE, SpanType.PLAIN, SpanType.BOLD]

    def test_unclosed_markers_are_plain(self, tokenizer):
        """Test markers without a closing pair fall through to plain text."""
        assert tokenizer.tokenize("2 * 3 = 6 and `tick") == [InlineSpan.plain("2 * 3 = 6 and `tick")]

    def test_empty_markers_are_plain(self, tokenizer):
        """Test '****' and '``' have no content and stay plain."""
        assert kinds(tokenizer.tokenize("**** ``")) == [SpanType.PLAIN]

    def test_date_label(self, tokenizer):
        """Test a preprocessed date line tokenizes into three spans."""
        spans = tokenizer.tokenize("📅 **Date:** Jan 5")
        assert spans == [
            InlineSpan.plain("📅 "),
            InlineSpan(type=SpanType.BOLD, text="Date:", literal="**Date:**"),
            InlineSpan.plain(" Jan 5"),
        ]


class TestLinks:
    """Tests for URL spans."""

    def test_http_url(self, tokenizer):
        """Test a bare https URL links to itself."""
        spans = tokenizer.tokenize("see https://example.com/a?b=1 now")
        assert spans[1] == InlineSpan(
            type=SpanType.LINK,
            text="https://example.com/a?b=1",
            literal="https://example.com/a?b=1",
            url="https://example.com/a?b=1",
        )

    def test_plain_http_url(self, tokenizer):
        """Test http URLs are recognized too."""
        (span,) = tokenizer.tokenize("http://example.org")
        assert span.url == "http://example.org"

    def test_www_url_gets_scheme(self, tokenizer):
        """Test a www URL displays as written and resolves with https."""
        (_, span) = tokenizer.tokenize("visit www.example.com")
        assert span.type == SpanType.LINK
        assert span.text == "www.example.com"
        assert span.url == "https://www.example.com"

    def test_url_runs_to_whitespace(self, tokenizer):
        """Test trailing punctuation is part of a bare URL."""
        (_, span) = tokenizer.tokenize("at https://example.com.")
        assert span.text == "https://example.com."

    def test_markdown_link_is_not_special_by_default(self, tokenizer):
        """Test '[label](url)' is plain text plus a bare URL by default."""
        spans = tokenizer.tokenize("[Get Tickets](https://t.example.com)")
        assert spans[0] == InlineSpan.plain("[Get Tickets](")
        assert spans[1].type == SpanType.LINK
        assert spans[1].url == "https://t.example.com)"

    def test_markdown_link_rule(self):
        """Test the optional rule turns '[label](url)' into one link."""
        tokenizer = InlineTokenizer(MARKDOWN_LINK_RULES)
        spans = tokenizer.tokenize("🎟️ **Tickets:** [Get Tickets](https://t.example.com)")
        assert spans[-1] == InlineSpan(
            type=SpanType.LINK,
            text="Get Tickets",
            literal="[Get Tickets](https://t.example.com)",
            url="https://t.example.com",
        )

    def test_markdown_link_needs_http_target(self):
        """Test a non-URL target is left to the other rules."""
        spans = tokenize_inline("[a](b)", markdown_links=True)
        assert spans == [InlineSpan.plain("[a](b)")]


class TestTokenizerEdgeCases:
    """Tests for degenerate input."""

    def test_empty_text(self, tokenizer):
        """Test empty input yields no spans."""
        assert tokenizer.tokenize("") == []

    def test_whitespace_is_preserved(self, tokenizer):
        """Test plain spans keep exact whitespace and case."""
        assert tokenizer.tokenize("  MiXeD  ") == [InlineSpan.plain("  MiXeD  ")]

    def test_non_string_input_raises(self, tokenizer):
        """Test that non-string input is rejected."""
        with pytest.raises(TypeError):
            tokenizer.tokenize(42)  # type: ignore

    def test_rule_names_in_priority_order(self, tokenizer):
        """Test the default rule order."""
        assert [rule.name for rule in tokenizer.rules] == ["bold", "italic", "code", "url", "www"]


inline_text = st.text(alphabet=st.sampled_from(list("ab *`_[]()./:wth \n")) | st.characters())


class TestTokenizerProperties:
    """Property-based tests for inline tokenization."""

    @given(inline_text)
    def test_literals_reproduce_input(self, text: str):
        """Property test: concatenated literals equal the input."""
        spans = tokenize_inline(text)
        assert "".join(span.literal for span in spans) == text

    @given(inline_text)
    def test_literals_reproduce_input_with_markdown_links(self, text: str):
        """Property test: the optional link rule keeps the round trip."""
        spans = tokenize_inline(text, markdown_links=True)
        assert "".join(span.literal for span in spans) == text

    @given(inline_text)
    def test_no_adjacent_plain_spans(self, text: str):
        """Property test: plain runs are never split."""
        spans = tokenize_inline(text)
        for left, right in zip(spans, spans[1:]):
            assert not (left.type == SpanType.PLAIN and right.type == SpanType.PLAIN)

    @given(inline_text)
    def test_deterministic(self, text: str):
        """Property test: tokenization is deterministic."""
        assert tokenize_inline(text) == tokenize_inline(text)

    @given(st.text(alphabet=st.characters(exclude_characters="*`:w")))
    def test_text_without_markers_is_one_plain_span(self, text: str):
        """Property test: text that cannot hold a construct is a single plain span."""
        spans = tokenize_inline(text)
        assert spans == ([InlineSpan.plain(text)] if text else [])
