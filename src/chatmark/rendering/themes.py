"""Color palettes for rendered messages.

This module hides the design decisions about:
- Which colors each sender's messages use
- How links, inline code and code blocks are styled per sender

User messages sit on a strong accent bubble, so their links and code stay
close to white. Bot messages use the purple accent for links and headings.
"""

from dataclasses import dataclass

from rich.style import Style

from ..models import SenderRole

ACCENT = "#8b5cf6"
ACCENT_LIGHT = "#a78bfa"


@dataclass(frozen=True)
class RolePalette:
    """Styles used when rendering one sender's messages."""

    text: str
    heading: str
    link: str
    code: str
    code_block_border: str
    divider: str

    def link_style(self, url: str | None) -> Style:
        """Style for a link span pointing at url."""
        return Style.parse(self.link) + Style(underline=True, link=url)


BOT_PALETTE = RolePalette(
    text="",
    heading=f"bold {ACCENT}",
    link=ACCENT,
    code=f"{ACCENT_LIGHT} on #1f1633",
    code_block_border=ACCENT,
    divider="#38383a",
)

USER_PALETTE = RolePalette(
    text="",
    heading="bold",
    link="bright_white",
    code="bright_white on #333333",
    code_block_border="#5b5b5b",
    divider="#5b5b5b",
)

PALETTES: dict[SenderRole, RolePalette] = {
    SenderRole.BOT: BOT_PALETTE,
    SenderRole.USER: USER_PALETTE,
}


def palette_for(role: SenderRole) -> RolePalette:
    """Return the palette for a sender."""
    return PALETTES[SenderRole(role)]
