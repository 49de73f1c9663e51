"""Rendering of parsed messages.

Module structure (each module hides a design decision):
- base.py: The renderer contract (one unit per element, code verbatim)
- themes.py: Per-sender color palettes
- console.py: Rich renderables for terminals
- plain.py: Unstyled strings
- factory.py: Renderer construction by name
"""

from .base import ElementRenderer
from .console import RichElementRenderer
from .factory import create_renderer
from .plain import PlainTextRenderer
from .themes import BOT_PALETTE, USER_PALETTE, RolePalette, palette_for

__all__ = [
    "ElementRenderer",
    "RichElementRenderer",
    "PlainTextRenderer",
    "create_renderer",
    "RolePalette",
    "BOT_PALETTE",
    "USER_PALETTE",
    "palette_for",
]
