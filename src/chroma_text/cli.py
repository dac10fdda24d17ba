"""Command-line interface for Chroma Text."""

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from chroma_text import __version__
from chroma_text.config import get_settings
from chroma_text.core.compiler import MarkupCompiler

app = typer.Typer(
    name="chroma-text",
    help="Compile chat markup with hex colors and gradients.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


class OutputFormat(str, Enum):
    """Available renderings of the compiled markup."""

    JSON = "json"
    PLAIN = "plain"
    PREVIEW = "preview"


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Chroma Text v{__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool, level: str) -> None:
    """Route log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def read_source(text: Optional[str], input_file: Optional[Path]) -> str:
    """Pick the markup from the argument, the input file or stdin."""
    if text is not None:
        return text
    if input_file is not None:
        return input_file.read_text(encoding="utf-8").rstrip("\n")
    return sys.stdin.read().rstrip("\n")


def print_raw(value: str) -> None:
    """Write machine output to stdout byte for byte, tabs and control characters included."""
    typer.echo(value, color=True)


@app.command()
def main(
    text: Optional[str] = typer.Argument(
        None,
        help="Markup to compile (reads --input or stdin if omitted)",
    ),
    input_file: Optional[Path] = typer.Option(
        None,
        "--input",
        "-i",
        help="Read the markup from a file",
        exists=True,
        dir_okay=False,
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.JSON,
        "--format",
        "-f",
        case_sensitive=False,
        help="Output: json (attributed text), plain (legacy codes) or preview",
    ),
    approximate: bool = typer.Option(
        False,
        "--approximate",
        "-a",
        help="Use the 16 legacy palette colors instead of exact hex colors",
    ),
    no_gradients: bool = typer.Option(
        False,
        "--no-gradients",
        help="Keep gradient notations as literal text",
    ),
    escape_lead: Optional[str] = typer.Option(
        None,
        "--escape-lead",
        "-e",
        help="Character introducing marker sequences (default: §)",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Indent JSON output",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Compile markup into attributed-text JSON or legacy plain text.

    Examples:

        chroma-text "§#FF00AAhello"

        chroma-text "§<#FF0000:0 #0000FF:1>rainbow" --format plain

        chroma-text --input motd.txt --approximate --pretty

        chroma-text "&#55FF55&lok" --escape-lead "&" --format preview
    """
    settings = get_settings()
    configure_logging(verbose, settings.log_level)

    if escape_lead is not None and len(escape_lead) != 1:
        raise typer.BadParameter(
            "must be exactly one character", param_hint="--escape-lead"
        )

    updates: dict = {}
    if escape_lead is not None:
        updates["escape_lead"] = escape_lead
    if no_gradients:
        updates["gradients_enabled"] = False
    if approximate:
        updates["approximate_colors"] = True

    compiler = MarkupCompiler(settings.model_copy(update=updates))
    source = read_source(text, input_file)

    if output_format == OutputFormat.PLAIN:
        print_raw(compiler.to_plain_text(source))
    elif output_format == OutputFormat.PREVIEW:
        console.print(compiler.to_rich_text(source), soft_wrap=True)
    elif pretty:
        console.print_json(compiler.to_json(source))
    else:
        print_raw(compiler.to_json(source))


if __name__ == "__main__":
    app()
