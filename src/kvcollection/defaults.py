"""Eager and deferred default values for collection lookups."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

D = TypeVar("D")


@dataclass(frozen=True)
class Lazy(Generic[D]):
    """A default computed only when the lookup misses.

    The supplier receives the key that was looked up (``None`` for
    ``first``/``last`` on an empty collection).

    Example:
        >>> items = Collection({"a": 1})
        >>> items.get("b", Lazy(lambda key: f"no {key}"))
        'no b'
    """

    supplier: Callable[[Any], D]

    def resolve(self, key: Any) -> D:
        return self.supplier(key)


def resolve_default(default: Any, key: Any) -> Any:
    """Return ``default``, invoking it first when it is a :class:`Lazy`.

    Plain callables are returned untouched; only ``Lazy`` is deferred.
    """
    if isinstance(default, Lazy):
        return default.resolve(key)
    return default
