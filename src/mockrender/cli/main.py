"""mockrender CLI - Mock declaration rendering tool.

This module provides the command-line interface for mockrender, rendering
mocked declarations, matcher accessors and initializer proxies from a JSON
description of a mockable type.
"""

from __future__ import annotations

import json
import logging
import traceback
from pathlib import Path
from typing import Annotated, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console

from mockrender.core.models import MockableTypeInput

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="mockrender",
    help="Render mock declarations from resolved method metadata",
    no_args_is_help=True,
)

# Rich console for formatted output
console = Console()
err_console = Console(stderr=True)

# Global verbose flag
_verbose: bool = False


def set_verbose(verbose: bool) -> None:
    """Set global verbose mode."""
    global _verbose
    _verbose = verbose


def is_verbose() -> bool:
    """Check if verbose mode is enabled."""
    return _verbose


def print_exception(e: Exception) -> None:
    """Print exception details in verbose mode."""
    if _verbose:
        err_console.print("\n[dim]--- Traceback (verbose mode) ---[/dim]")
        err_console.print(f"[dim]{traceback.format_exc()}[/dim]", markup=False)


def setup_logging(verbose: bool) -> None:
    """Configure root logging from settings; verbose forces DEBUG."""
    from mockrender.core.config import get_config

    level = logging.DEBUG if verbose else getattr(logging, get_config().log_level)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        force=True,
    )


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output with full tracebacks"),
    ] = False,
) -> None:
    """mockrender CLI - Mock declaration rendering."""
    set_verbose(verbose)
    setup_logging(verbose)


InputFile = Annotated[
    Path,
    typer.Argument(
        help="JSON file describing the mockable type and its methods",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
    ),
]


def load_input(path: Path) -> MockableTypeInput:
    """Load a type input document with error handling."""
    from mockrender.core.serializer import SerializationError, load_type_input

    try:
        return load_type_input(path.read_text(encoding="utf-8"))
    except SerializationError as e:
        err_console.print(f"[red]Error:[/red] {e.message}")
        if e.details:
            err_console.print(f"  {e.details}", markup=False)
        print_exception(e)
        raise typer.Exit(1)


@app.command()
def render(
    input_file: InputFile,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write rendered code to this file"),
    ] = None,
) -> None:
    """Render mocked declarations, accessors and initializer proxies.

    Example:
        mockrender render bird.json
        mockrender render bird.json -o BirdMock.generated.swift
    """
    from mockrender.services.render_service import RenderService

    type_input = load_input(input_file)
    result = RenderService().render_type(type_input)

    for warning in result.warnings:
        err_console.print(f"[yellow]Warning:[/yellow] {warning}", highlight=False)

    if output is None:
        typer.echo(result.text)
        return

    output.write_text(result.text + "\n", encoding="utf-8")
    console.print(f"[green]✓[/green] Rendered to: {output}")
    console.print(f"  Methods: {len(result.methods)}")
    console.print(f"  Initializer proxies: {len(result.initializer_proxies)}")


@app.command()
def proxies(input_file: InputFile) -> None:
    """Render only the initializer proxies of a type.

    Example:
        mockrender proxies bird.json
    """
    from mockrender.services.render_service import RenderService

    type_input = load_input(input_file)
    result = RenderService().render_type(type_input)

    if not result.initializer_proxies:
        console.print("[yellow]No initializer proxies[/yellow]")
        return

    typer.echo("\n\n".join(proxy.body for proxy in result.initializer_proxies))


@app.command()
def signatures(
    input_file: InputFile,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output machine-readable JSON"),
    ] = False,
) -> None:
    """List the mocking and matching signatures of every method.

    Example:
        mockrender signatures bird.json --json
    """
    from mockrender.cli._tables import build_signatures_table
    from mockrender.services.render_service import RenderService

    type_input = load_input(input_file)
    result = RenderService().render_type(type_input)

    rows = [
        {
            "method": rendering.selector,
            "mocking": rendering.mocked.definition_signature if rendering.mocked else "",
            "matching": [a.definition_signature for a in rendering.accessors],
        }
        for rendering in result.methods
    ]

    if json_output:
        typer.echo(json.dumps(rows, ensure_ascii=False, indent=2))
        return

    if not rows:
        console.print("[yellow]No methods found[/yellow]")
        return
    console.print(build_signatures_table(rows))


@app.command()
def validate(input_file: InputFile) -> None:
    """Check method metadata for shapes that would render badly.

    Example:
        mockrender validate bird.json
    """
    from mockrender.cli._tables import build_validation_table
    from mockrender.core.validator import validate_type

    type_input = load_input(input_file)
    result = validate_type(type_input)

    if result.is_valid:
        console.print(f"[green]✓[/green] {len(type_input.methods)} methods are valid")
        return

    err_console.print(build_validation_table(result.errors))
    raise typer.Exit(1)


if __name__ == "__main__":
    app()
