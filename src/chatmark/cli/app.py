"""Main CLI application using Typer."""
import logging
import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from ..config import load_settings, log_level_from_env
from ..models import ElementType, SenderRole
from ..pipeline import MessageFormatter
from ..rendering import PlainTextRenderer, RichElementRenderer

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="chatmark",
    help="Parse chat message text into structured elements and render them",
    no_args_is_help=True,
    add_completion=False,
)

# Console for rich output
console = Console()
err_console = Console(stderr=True)

SOURCE_HELP = "Message file to read, or '-' for stdin"


@app.callback()
def main(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Logging level (default: $CHATMARK_LOG_LEVEL or WARNING)"
    )
):
    """Configure logging before any command runs."""
    level = getattr(logging, (log_level or log_level_from_env()).upper(), None)
    logging.basicConfig(
        level=level if isinstance(level, int) else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _read_source(source: str) -> str:
    """Read message text from a file or stdin."""
    if source == "-":
        return sys.stdin.read()
    try:
        return Path(source).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        err_console.print(f"[red]Error: cannot read {escape(source)}: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)


def _formatter() -> MessageFormatter:
    try:
        return MessageFormatter(load_settings())
    except ValidationError as e:
        err_console.print(f"[red]Error: invalid settings in environment:[/red]\n{escape(str(e))}")
        raise typer.Exit(code=1)


@app.command()
def preprocess(
    source: str = typer.Argument(..., help=SOURCE_HELP)
):
    """Rewrite backend annotation tags and print the normalized text."""
    text = _read_source(source)
    message = _formatter().format(text)
    typer.echo(message.normalized, nl=False)


@app.command()
def parse(
    source: str = typer.Argument(..., help=SOURCE_HELP),
    as_json: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Print elements as JSON instead of a table"
    )
):
    """Parse a message into block elements."""
    text = _read_source(source)
    message = _formatter().format(text)

    if as_json:
        typer.echo(message.model_dump_json(indent=2))
        return

    table = Table(title=f"Elements ({len(message.elements)})")
    table.add_column("#", style="dim", justify="right", no_wrap=True)
    table.add_column("Type", style="cyan", no_wrap=True)
    table.add_column("Details")
    table.add_column("Content")

    for idx, element in enumerate(message.elements, start=1):
        if element.type == ElementType.HEADING:
            details, content = f"level={element.level}", element.content
        elif element.type == ElementType.LIST:
            details = "ordered" if element.ordered else "unordered"
            content = "\n".join(element.items)
        elif element.type == ElementType.CODE_BLOCK:
            details, content = f"language={element.language or '-'}", element.content
        else:
            details, content = "", element.content
        table.add_row(str(idx), element.type.value, Text(details), Text(content))

    console.print(table)


@app.command()
def spans(
    text: str = typer.Argument(..., help="Text of a single block")
):
    """Tokenize one line of text into inline spans."""
    table = Table(title="Inline spans")
    table.add_column("Type", style="cyan", no_wrap=True)
    table.add_column("Text")
    table.add_column("URL", style="dim")

    for span in _formatter().spans(text):
        table.add_row(span.type.value, Text(span.text), Text(span.url or ""))

    console.print(table)


@app.command()
def render(
    source: str = typer.Argument(..., help=SOURCE_HELP),
    role: SenderRole = typer.Option(
        SenderRole.BOT,
        "--role",
        "-r",
        help="Sender of the message"
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        "-p",
        help="Render unstyled text"
    )
):
    """Parse a message and render it to the terminal."""
    text = _read_source(source)
    formatter = _formatter()
    message = formatter.format(text, role)

    if plain:
        renderer = PlainTextRenderer(formatter.tokenizer)
        typer.echo(renderer.render_to_string(message))
        return

    renderer = RichElementRenderer(formatter.tokenizer)
    console.print(renderer.render_group(message))


if __name__ == "__main__":
    app()
