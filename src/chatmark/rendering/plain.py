"""Plain text renderer.

Renders elements as unstyled strings: inline markers are dropped, list
items get a bullet or number, dividers become a line of box characters.
Used for logs, terminals without styling and tests.
"""

from ..config import BULLET_GLYPH, PLAIN_DIVIDER_WIDTH
from ..models import (
    CodeBlockElement,
    DividerElement,
    FormattedMessage,
    HeadingElement,
    InlineSpan,
    ListElement,
    SenderRole,
    TextElement,
)
from ..parsing import InlineTokenizer
from .base import ElementRenderer


class PlainTextRenderer(ElementRenderer[str]):
    """Renders elements as plain strings."""

    def __init__(self, tokenizer: InlineTokenizer | None = None, divider_width: int = PLAIN_DIVIDER_WIDTH):
        super().__init__(tokenizer)
        self.divider_width = divider_width

    def render_to_string(self, message: FormattedMessage) -> str:
        """Render a whole message, one element per paragraph."""
        return "\n".join(self.render(message))

    def render_text(self, element: TextElement, spans: list[InlineSpan], role: SenderRole) -> str:
        return self._join(spans)

    def render_heading(self, element: HeadingElement, spans: list[InlineSpan], role: SenderRole) -> str:
        return self._join(spans)

    def render_list(
        self,
        element: ListElement,
        items: list[list[InlineSpan]],
        role: SenderRole
    ) -> str:
        lines = []
        for number, spans in enumerate(items, start=1):
            marker = f"{number}." if element.ordered else BULLET_GLYPH
            lines.append(f"{marker} {self._join(spans)}")
        return "\n".join(lines)

    def render_divider(self, element: DividerElement, role: SenderRole) -> str:
        return "─" * self.divider_width

    def render_code_block(self, element: CodeBlockElement, role: SenderRole) -> str:
        return element.content

    @staticmethod
    def _join(spans: list[InlineSpan]) -> str:
        return "".join(span.text for span in spans)
