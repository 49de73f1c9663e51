from typing import Any

from .base import ElementRenderer
from .console import RichElementRenderer
from .plain import PlainTextRenderer


def create_renderer(kind: str, **config: Any) -> ElementRenderer:
    """Create an element renderer.

    This factory function hides which renderer classes exist.

    Args:
        kind: Renderer type ('rich' or 'plain')
        **config: Renderer-specific configuration
            For both:
                - tokenizer: InlineTokenizer | None
            For rich:
                - code_theme: str (default: 'monokai')
            For plain:
                - divider_width: int (default: 40)

    Returns:
        Initialized renderer instance

    Raises:
        ValueError: If renderer type is not supported

    Examples:
        >>> renderer = create_renderer("plain", divider_width=20)
    """
    kind_lower = kind.lower()

    if kind_lower == "rich":
        return RichElementRenderer(**config)

    if kind_lower == "plain":
        return PlainTextRenderer(**config)

    raise ValueError(
        f"Unsupported renderer: {kind}. "
        f"Supported renderers: 'rich', 'plain'"
    )
