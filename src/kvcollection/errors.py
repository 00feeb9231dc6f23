"""Exception types raised by collections."""

from __future__ import annotations

from typing import Any


class KeyNotFoundError(KeyError):
    """Raised when an indexed read addresses a key that is not present.

    Only ``collection[key]`` raises this. ``get``, ``first`` and ``last``
    fall back to a default instead.
    """

    def __init__(self, key: Any) -> None:
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"Key not found in collection: {self.key!r}"


class InvalidKeyError(TypeError):
    """Raised when a key cannot be used as a collection key."""


class CollectionJsonError(ValueError):
    """Raised when a collection cannot be read from or written to JSON."""
