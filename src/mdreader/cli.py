"""mdreader CLI - Print a validated markdown file to standard output."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import structlog
import typer
import yaml
from rich.console import Console
from rich.markup import escape

from . import __version__
from .args import parse_arguments, PARSE_ERROR_TYPES
from .config import Config
from .errors import (
    Content,
    FileNotFound,
    FileTooLarge,
    InvalidExtension,
    InvalidPath,
    NotAFile,
    ReadError,
    ReadFailure,
)
from .log import configure_logging
from .reader import read_markdown_file

EXIT_SUCCESS = 0
EXIT_ERROR = 1

app = typer.Typer(
    name="mdreader",
    help="Read a markdown file and print its contents.",
    add_completion=False,
)
console = Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)
log = structlog.get_logger()

HINTS = {
    FileNotFound: "Make sure the file path is correct and the file exists.",
    InvalidExtension: "Markdown files must have a .md or .markdown extension.",
    InvalidPath: "Please provide a valid file path.",
    NotAFile: "The path points to a directory, not a markdown file.",
    FileTooLarge: "Only files up to 10MB can be read.",
    ReadError: "Check file permissions and ensure the file is valid UTF-8.",
}

# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------


def hint_for(failure: ReadFailure) -> str:
    """Return the one-line hint shown under a read failure."""
    return HINTS.get(type(failure), "An unexpected error occurred.")


def _print_error(message: str) -> None:
    console.print(f"[red]Error:[/red] {escape(message)}")


def display_usage_error(message: str) -> None:
    _print_error(message)
    console.print()
    console.print("Use 'mdreader --help' for more information.")


def display_read_failure(failure: ReadFailure, show_hint: bool = True) -> None:
    _print_error(failure.message)
    if show_hint:
        console.print(f"[yellow]Hint:[/yellow] {escape(hint_for(failure))}")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"mdreader v{__version__}")
        raise typer.Exit(EXIT_SUCCESS)


# ---------------------------------------------------------------------------
# read command
# ---------------------------------------------------------------------------


@app.command(
    context_settings={
        "help_option_names": ["-h", "--help"],
        "ignore_unknown_options": True,
    }
)
def read(
    args: Optional[list[str]] = typer.Argument(
        None,
        metavar="MARKDOWN_FILE",
        help="Path to the markdown file to read (must end in .md or .markdown)",
        show_default=False,
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to mdreader.yaml",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log each validation step to stderr",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version information and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """Read a markdown file and print its contents.

    Examples: 'mdreader README.md', 'mdreader docs/guide.md'.
    """
    try:
        cfg = Config.load(config_path)
    except (ValueError, yaml.YAMLError) as e:
        _print_error(f"Invalid config: {e}")
        raise typer.Exit(EXIT_ERROR)

    configure_logging("DEBUG" if verbose else cfg.logging.level)

    parsed = parse_arguments(list(args or []))
    if isinstance(parsed, PARSE_ERROR_TYPES):
        log.debug("arguments_rejected", reason=parsed.message)
        display_usage_error(f"Invalid arguments: {parsed.message}")
        raise typer.Exit(EXIT_ERROR)

    result = read_markdown_file(parsed)

    if isinstance(result, Content):
        text = result.text
        if cfg.output.trailing_newline and not text.endswith("\n"):
            text += "\n"
        # color=True keeps any escape sequences in the file untouched
        typer.echo(text, nl=False, color=True)
        raise typer.Exit(EXIT_SUCCESS)

    display_read_failure(result, show_hint=cfg.output.hints)
    raise typer.Exit(EXIT_ERROR)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main():
    app()


if __name__ == "__main__":
    main()
