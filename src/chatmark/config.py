"""Configuration for the formatting pipeline.

Centralizes syntax constants and the tunable settings, and hides how
settings are read from the environment.
"""

import os

from pydantic import BaseModel, ConfigDict, Field

# Block syntax
FENCE_DELIMITER = "```"
DIVIDER_LINES = ("---", "***", "___")
UNORDERED_MARKERS = "-*•"
MAX_HEADING_LEVEL = 3

# Inline syntax
WWW_LINK_SCHEME = "https://"

# Rendering
BULLET_GLYPH = "•"
PLAIN_DIVIDER_WIDTH = 40
CODE_FALLBACK_LEXER = "text"

# Environment variable names
ENV_MERGE_LISTS = "CHATMARK_MERGE_LISTS_ACROSS_BLANK_LINES"
ENV_MARKDOWN_LINKS = "CHATMARK_MARKDOWN_LINKS"
ENV_CACHE_SIZE = "CHATMARK_CACHE_SIZE"
ENV_LOG_LEVEL = "CHATMARK_LOG_LEVEL"

DEFAULT_CACHE_SIZE = 256
DEFAULT_LOG_LEVEL = "WARNING"


class FormatterSettings(BaseModel):
    """Tunable behaviour of the parsing pipeline."""

    model_config = ConfigDict(frozen=True)

    merge_lists_across_blank_lines: bool = Field(
        default=False,
        description="Keep aggregating a list when blank lines separate its items"
    )
    markdown_links: bool = Field(
        default=False,
        description="Recognize [label](url) as a single link span"
    )
    cache_size: int = Field(
        default=DEFAULT_CACHE_SIZE,
        ge=0,
        le=4096,
        description="Maximum number of memoized messages (0 disables caching)"
    )


def load_settings() -> FormatterSettings:
    """Build settings from environment variables.

    Returns:
        Settings with any overrides found in the environment

    Raises:
        pydantic.ValidationError: If a variable holds an invalid value

    Environment variables:
        CHATMARK_MERGE_LISTS_ACROSS_BLANK_LINES: true/false (default: false)
        CHATMARK_MARKDOWN_LINKS: true/false (default: false)
        CHATMARK_CACHE_SIZE: Memoized messages, 0-4096 (default: 256)
    """
    overrides = {}
    env_fields = {
        ENV_MERGE_LISTS: "merge_lists_across_blank_lines",
        ENV_MARKDOWN_LINKS: "markdown_links",
        ENV_CACHE_SIZE: "cache_size",
    }
    for env_name, field_name in env_fields.items():
        value = os.getenv(env_name)
        if value is not None and value.strip():
            overrides[field_name] = value.strip()
    return FormatterSettings.model_validate(overrides)


def log_level_from_env() -> str:
    """Return the log level name configured for the CLI."""
    return os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper()
