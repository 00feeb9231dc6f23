"""Main CLI entry point using Typer.

This module defines the top-level CLI commands:
- kvcollection show: Render a collection as a table
- kvcollection get: Look up a single key
- kvcollection keys / values: List keys or values
- kvcollection first / last: Show the first or last value
- kvcollection count: Count entries
- kvcollection filter: Drop falsy values
"""

from __future__ import annotations

import sys
from typing import Annotated

import structlog
import typer
from rich.console import Console

from kvcollection import __version__
from kvcollection.config import get_config

app = typer.Typer(
    name="kvcollection",
    help="kvcollection - Inspect JSON documents as ordered collections",
    no_args_is_help=True,
)
console = Console()

SourceArg = Annotated[
    str,
    typer.Argument(help="JSON file to read, or '-' for stdin."),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"kvcollection {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output."),
    ] = False,
) -> None:
    """kvcollection - Inspect JSON documents as ordered collections.

    Use 'kvcollection COMMAND --help' for information on specific commands.
    """
    level = 10 if verbose else get_config().effective_log_level  # 10 = DEBUG
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )


@app.command()
def show(source: SourceArg) -> None:
    """Render a collection as a key/value table.

    Examples:
        kvcollection show data.json

        cat data.json | kvcollection show -
    """
    from kvcollection.cli.commands.inspect import show_table  # noqa: PLC0415

    show_table(source=source)


@app.command()
def get(
    source: SourceArg,
    key: Annotated[str, typer.Argument(help="Key to look up.")],
    default: Annotated[
        str | None,
        typer.Option("--default", "-d", help="Value to print when the key is absent."),
    ] = None,
) -> None:
    """Print the value stored at KEY.

    Numeric keys such as '0' address integer keys.

    Examples:
        kvcollection get data.json name

        kvcollection get data.json 0 --default none
    """
    from kvcollection.cli.commands.inspect import show_value  # noqa: PLC0415

    show_value(source=source, key=key, default=default)


@app.command()
def keys(source: SourceArg) -> None:
    """Print the keys as a JSON array."""
    from kvcollection.cli.commands.inspect import show_keys  # noqa: PLC0415

    show_keys(source=source)


@app.command()
def values(source: SourceArg) -> None:
    """Print the values as a JSON array."""
    from kvcollection.cli.commands.inspect import show_values  # noqa: PLC0415

    show_values(source=source)


@app.command()
def first(source: SourceArg) -> None:
    """Print the first value."""
    from kvcollection.cli.commands.inspect import show_edge  # noqa: PLC0415

    show_edge(source=source, which="first")


@app.command()
def last(source: SourceArg) -> None:
    """Print the last value."""
    from kvcollection.cli.commands.inspect import show_edge  # noqa: PLC0415

    show_edge(source=source, which="last")


@app.command()
def count(source: SourceArg) -> None:
    """Print the number of entries."""
    from kvcollection.cli.commands.inspect import show_count  # noqa: PLC0415

    show_count(source=source)


@app.command(name="filter")
def filter_(source: SourceArg) -> None:
    """Drop falsy values and print the rest, keys preserved.

    Falsy values are null, false, 0, "", "0", [] and {}.

    Examples:
        kvcollection filter data.json
    """
    from kvcollection.cli.commands.inspect import show_filtered  # noqa: PLC0415

    show_filtered(source=source)


if __name__ == "__main__":
    app()
