"""Pytest configuration and shared fixtures."""
import pytest

from chatmark import FormatterSettings, MessageFormatter
from chatmark.parsing import BlockParser, InlineTokenizer, TagPreprocessor


@pytest.fixture
def preprocessor():
    """Return a tag preprocessor with the default rules."""
    return TagPreprocessor()


@pytest.fixture
def block_parser():
    """Return a block parser with the default list policy."""
    return BlockParser()


@pytest.fixture
def tokenizer():
    """Return an inline tokenizer with the default rules."""
    return InlineTokenizer()


@pytest.fixture
def formatter():
    """Return a formatter with default settings."""
    return MessageFormatter(FormatterSettings())


@pytest.fixture
def event_message():
    """Return a typical bot reply describing an event."""
    return (
        "# Upcoming events\n"
        "<i id='name'>Jazz Night</i>\n"
        "<i id='date'>Date: Jan 5</i>\n"
        "<i id='location'>Location: Blue Room</i>\n"
        "<i id='price'>Tickets: [Get Tickets](https://tickets.example.com/jazz)</i>\n"
        "---\n"
        "Things to bring:\n"
        "- a **warm** coat\n"
        "- your *friends*\n"
        "\n"
        "```bash\n"
        "echo 'see you there'\n"
        "```"
    )
