"""Rich console renderer.

Hides the details of turning elements into Rich renderables: text styling,
list markers, code block panels and divider rules.
"""

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.rule import Rule
from rich.syntax import Syntax
from rich.text import Text

from ..config import BULLET_GLYPH, CODE_FALLBACK_LEXER
from ..models import (
    CodeBlockElement,
    DividerElement,
    FormattedMessage,
    HeadingElement,
    InlineSpan,
    ListElement,
    SenderRole,
    SpanType,
    TextElement,
)
from ..parsing import InlineTokenizer
from .base import ElementRenderer
from .themes import RolePalette, palette_for

# Extra emphasis per heading level; level 1 stands out most.
HEADING_LEVEL_STYLES = {1: "underline", 2: "", 3: "italic"}


class RichElementRenderer(ElementRenderer[RenderableType]):
    """Renders elements as Rich renderables, styled per sender."""

    def __init__(self, tokenizer: InlineTokenizer | None = None, code_theme: str = "monokai"):
        """Initialize the renderer.

        Args:
            tokenizer: Inline tokenizer for free text
            code_theme: Pygments theme name for code blocks
        """
        super().__init__(tokenizer)
        self.code_theme = code_theme

    def render_group(self, message: FormattedMessage) -> Group:
        """Render a whole message as a single Rich group."""
        return Group(*self.render(message))

    def render_spans(self, spans: list[InlineSpan], role: SenderRole) -> Text:
        """Build a Text from inline spans using the sender's palette."""
        palette = palette_for(role)
        text = Text(style=palette.text, overflow="fold")
        for span in spans:
            text.append(span.text, style=self._span_style(span, palette))
        return text

    def render_text(self, element: TextElement, spans: list[InlineSpan], role: SenderRole) -> Text:
        return self.render_spans(spans, role)

    def render_heading(self, element: HeadingElement, spans: list[InlineSpan], role: SenderRole) -> Text:
        text = self.render_spans(spans, role)
        text.stylize(f"{palette_for(role).heading} {HEADING_LEVEL_STYLES.get(element.level, '')}".strip())
        return text

    def render_list(
        self,
        element: ListElement,
        items: list[list[InlineSpan]],
        role: SenderRole
    ) -> Text:
        lines = []
        for number, spans in enumerate(items, start=1):
            marker = f"{number}. " if element.ordered else f"{BULLET_GLYPH} "
            line = Text("  " + marker)
            line.append_text(self.render_spans(spans, role))
            lines.append(line)
        return Text("\n").join(lines)

    def render_divider(self, element: DividerElement, role: SenderRole) -> Rule:
        return Rule(style=palette_for(role).divider)

    def render_code_block(self, element: CodeBlockElement, role: SenderRole) -> Panel:
        syntax = Syntax(
            element.content,
            element.language or CODE_FALLBACK_LEXER,
            theme=self.code_theme,
            word_wrap=True,
        )
        return Panel(
            syntax,
            title=Text(element.language) if element.language else None,
            title_align="left",
            border_style=palette_for(role).code_block_border,
        )

    @staticmethod
    def _span_style(span: InlineSpan, palette: RolePalette):
        if span.type == SpanType.BOLD:
            return "bold"
        if span.type == SpanType.ITALIC:
            return "italic"
        if span.type == SpanType.CODE:
            return palette.code
        if span.type == SpanType.LINK:
            return palette.link_style(span.url)
        return ""
