"""Inspection command implementations."""

from __future__ import annotations

import json
from typing import Any, Literal

import structlog
from rich.console import Console
from rich.table import Table
from rich.text import Text

from kvcollection.collection import Collection
from kvcollection.config import get_config
from kvcollection.errors import CollectionJsonError
from kvcollection.serialization import dumps, load_path

console = Console()
err_console = Console(stderr=True)
logger = structlog.get_logger()


def _load(source: str) -> Collection[Any, Any]:
    try:
        return load_path(source)
    except CollectionJsonError as err:
        err_console.print(f"[red]✗[/red] Failed to load collection: {err}")
        raise SystemExit(1) from None


def _render(value: Any) -> str:
    indent = get_config().json_indent or None
    try:
        return dumps(value, indent=indent)
    except CollectionJsonError as err:
        err_console.print(f"[red]✗[/red] Cannot render value: {err}")
        raise SystemExit(1) from None


def _emit(text: str) -> None:
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def show_table(*, source: str) -> None:
    """Execute show command.

    Args:
        source: Path to the JSON document, or '-' for stdin.
    """
    collection = _load(source)

    table = Table(title=f"{source} ({collection.count()} entries)")
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key, value in collection.items():
        table.add_row(Text(str(key)), Text(json.dumps(value, ensure_ascii=False)))
    console.print(table)


def show_value(*, source: str, key: str, default: str | None) -> None:
    """Execute get command.

    Args:
        source: Path to the JSON document, or '-' for stdin.
        key: Key to look up.
        default: Printed instead when the key is absent.
    """
    collection = _load(source)

    if not collection.has(key) and default is None:
        err_console.print(f"[red]✗[/red] Key not found: [cyan]{key}[/cyan]")
        raise SystemExit(1)
    _emit(_render(collection.get(key, default)))


def show_keys(*, source: str) -> None:
    """Execute keys command."""
    _emit(_render(_load(source).keys()))


def show_values(*, source: str) -> None:
    """Execute values command."""
    _emit(_render(_load(source).values()))


def show_edge(*, source: str, which: Literal["first", "last"]) -> None:
    """Execute first/last commands.

    Args:
        source: Path to the JSON document, or '-' for stdin.
        which: Which end of the collection to print.
    """
    collection = _load(source)

    if collection.is_empty():
        err_console.print(f"[red]✗[/red] Collection is empty, no {which} value")
        raise SystemExit(1)
    value = collection.first() if which == "first" else collection.last()
    _emit(_render(value))


def show_count(*, source: str) -> None:
    """Execute count command."""
    _emit(str(_load(source).count()))


def show_filtered(*, source: str) -> None:
    """Execute filter command."""
    collection = _load(source)
    kept = collection.filter()
    logger.debug("filtered", before=collection.count(), after=kept.count())
    _emit(_render(kept))
