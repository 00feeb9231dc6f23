"""JSON encoding and decoding of collections.

Encoding follows array semantics:
- keys exactly ``0..n-1`` in order encode as a JSON array
- anything else encodes as a JSON object, keys stringified, insertion order kept
- nested collections encode recursively
- NaN/Infinity are rejected

Decoding turns a top-level array into keys ``0..n-1`` and a top-level object
into normalized keys (``"3"`` becomes ``3``). Nested values stay plain Python.
NaN/Infinity are rejected on this side too.
"""

from __future__ import annotations

import json
import math
import sys
from pathlib import Path
from typing import Any

import structlog

from kvcollection.collection import Collection
from kvcollection.errors import CollectionJsonError

logger = structlog.get_logger()


def _is_list_like(collection: Collection[Any, Any]) -> bool:
    return all(key == index for index, key in enumerate(collection.all()))


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, Collection):
        if _is_list_like(value):
            return [_to_jsonable(v) for v in value]
        return {str(k): _to_jsonable(v) for k, v in value.items()}
    if isinstance(value, float) and not math.isfinite(value):
        msg = f"non-finite float values cannot be encoded as JSON: {value!r}"
        raise CollectionJsonError(msg)
    if isinstance(value, dict):
        return {str(k): _to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(v) for v in value]
    return value


def dumps(value: Any, *, indent: int | None = None) -> str:
    """Serialize a collection, or any value that may contain collections, to JSON.

    Args:
        value: The collection or value to encode.
        indent: Pretty-print indent; ``None`` or ``0`` gives compact output.

    Raises:
        CollectionJsonError: If a value cannot be represented in JSON.
    """
    payload = _to_jsonable(value)
    try:
        if indent:
            return json.dumps(payload, indent=indent, ensure_ascii=False, allow_nan=False)
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as exc:
        msg = f"Collection is not JSON serializable: {exc}"
        raise CollectionJsonError(msg) from exc


def _reject_constant(name: str) -> Any:
    msg = f"non-finite number {name} is not allowed in a collection document"
    raise CollectionJsonError(msg)


def loads(text: str) -> Collection[Any, Any]:
    """Parse a JSON array or object into a collection.

    Raises:
        CollectionJsonError: If the text is not valid JSON, is a scalar, or
            contains NaN/Infinity.
    """
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        msg = f"Invalid JSON: {exc}"
        raise CollectionJsonError(msg) from exc

    if not isinstance(data, (dict, list)):
        msg = f"Expected a JSON array or object, got {type(data).__name__}"
        raise CollectionJsonError(msg)
    return Collection(data)


def load_path(path: Path | str) -> Collection[Any, Any]:
    """Read a collection from a JSON file, or from stdin when ``path`` is ``-``.

    Raises:
        CollectionJsonError: If the file cannot be read or parsed.
    """
    source = str(path)
    try:
        if source == "-":
            text = sys.stdin.read()
        else:
            text = Path(source).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        msg = f"Cannot read {source}: not valid UTF-8 ({exc.reason} at byte {exc.start})"
        raise CollectionJsonError(msg) from exc
    except OSError as exc:
        msg = f"Cannot read {source}: {exc.strerror or exc}"
        raise CollectionJsonError(msg) from exc

    collection = loads(text)
    logger.debug("collection_loaded", source=source, count=collection.count())
    return collection
