"""Ordered associative container with array-style keys."""

from __future__ import annotations

import numbers
from collections.abc import Callable, Iterable, Iterator, Mapping, Sized
from typing import Any, Generic, TypeVar, overload

from kvcollection.defaults import Lazy, resolve_default
from kvcollection.errors import InvalidKeyError, KeyNotFoundError
from kvcollection.keys import next_integer_key, normalize_key

KT = TypeVar("KT", bound="str | int")
VT = TypeVar("VT")
D = TypeVar("D")
R = TypeVar("R")

_UNUSABLE = object()


def _lookup_key(key: Any) -> Any:
    """Normalize a key for reading; keys that cannot be stored map to a sentinel."""
    try:
        return normalize_key(key)
    except InvalidKeyError:
        return _UNUSABLE


def is_truthy(value: object) -> bool:
    """Array-style truthiness used by ``filter()`` without a predicate.

    Falsy values are ``None``, ``False``, numeric zero, ``""``, ``"0"`` and
    any empty sized container. Everything else is truthy.
    """
    if value is None or value is False:
        return False
    if isinstance(value, numbers.Number):
        return value != 0
    if isinstance(value, str):
        return value not in ("", "0")
    if isinstance(value, Sized):
        return len(value) > 0
    return True


class Collection(Generic[KT, VT]):
    """An insertion-ordered mapping from array keys to arbitrary values.

    Keys are ``str`` or ``int`` (see :mod:`kvcollection.keys`). Values are
    stored by reference. Writing an existing key overwrites it in place
    without changing its position; ``add`` appends under the next integer key.

    Iterating yields the values; use :meth:`items` for ``(key, value)`` pairs.
    Only ``collection[key]`` raises for a missing key. Lookups, existence
    checks and removals treat an unusable key (``None``, a tuple) as absent.

    Example:
        >>> items = Collection([10, 20, 30])
        >>> items.put("total", 60).first()
        10
        >>> items.keys().to_list()
        [0, 1, 2, 'total']
    """

    _items: dict[KT, VT]
    _next_key: int | None

    def __init__(self, items: Mapping[Any, VT] | Iterable[VT] | None = None) -> None:
        self._items = {}
        self._next_key = 0
        if items is None:
            return
        if isinstance(items, Collection):
            items = items._items
        if isinstance(items, Mapping):
            for key, value in items.items():
                self.put(key, value)
        else:
            for value in items:
                self.add(value)

    # -- lookups -----------------------------------------------------------

    @overload
    def get(self, key: Any) -> VT | None: ...

    @overload
    def get(self, key: Any, default: Lazy[D]) -> VT | D: ...

    @overload
    def get(self, key: Any, default: D) -> VT | D: ...

    def get(self, key: Any, default: Any = None) -> Any:
        """Get an item by key, or the resolved ``default`` when it is absent."""
        normalized = _lookup_key(key)
        if normalized in self._items:
            return self._items[normalized]
        return resolve_default(default, key if normalized is _UNUSABLE else normalized)

    def has(self, key: Any, *keys: Any) -> bool:
        """Return True if every given key is present.

        Presence is what counts: a key mapped to ``None`` is present.
        """
        return self.has_all((key, *keys))

    def has_all(self, keys: Iterable[Any]) -> bool:
        """Return True if every key in ``keys`` is present."""
        return all(_lookup_key(key) in self._items for key in keys)

    @overload
    def first(self) -> VT | None: ...

    @overload
    def first(self, default: Lazy[D]) -> VT | D: ...

    @overload
    def first(self, default: D) -> VT | D: ...

    def first(self, default: Any = None) -> Any:
        """Get the earliest-inserted value, or the resolved ``default`` if empty."""
        for value in self._items.values():
            return value
        return resolve_default(default, None)

    @overload
    def last(self) -> VT | None: ...

    @overload
    def last(self, default: Lazy[D]) -> VT | D: ...

    @overload
    def last(self, default: D) -> VT | D: ...

    def last(self, default: Any = None) -> Any:
        """Get the latest-inserted value, or the resolved ``default`` if empty."""
        for value in reversed(self._items.values()):
            return value
        return resolve_default(default, None)

    # -- mutation ----------------------------------------------------------

    def add(self, value: VT) -> Collection[KT, VT]:
        """Append ``value`` under the next integer key."""
        if self._next_key is None:
            self._next_key = next_integer_key(self._items)
        key = self._next_key
        self._items[key] = value  # type: ignore[index]
        self._next_key = key + 1
        return self

    def put(self, key: Any, value: VT) -> Collection[KT, VT]:
        """Set ``value`` at ``key``; a ``None`` key appends like :meth:`add`."""
        if key is None:
            return self.add(value)
        normalized = normalize_key(key)
        self._items[normalized] = value  # type: ignore[index]
        if (
            isinstance(normalized, int)
            and self._next_key is not None
            and normalized >= self._next_key
        ):
            self._next_key = normalized + 1
        return self

    def forget(self, key: Any, *keys: Any) -> Collection[KT, VT]:
        """Remove the given keys. Absent keys are ignored."""
        return self.forget_all((key, *keys))

    def forget_all(self, keys: Iterable[Any]) -> Collection[KT, VT]:
        """Remove every key in ``keys``. Absent keys are ignored."""
        for key in keys:
            normalized = _lookup_key(key)
            if normalized not in self._items:
                continue
            del self._items[normalized]
            # Highest int key gone: recompute on next add.
            if isinstance(normalized, int) and normalized + 1 == self._next_key:
                self._next_key = None
        return self

    def clear(self) -> Collection[KT, VT]:
        """Remove all items, keeping this instance."""
        self._items.clear()
        self._next_key = 0
        return self

    # -- views -------------------------------------------------------------

    def all(self) -> dict[KT, VT]:
        """Return a snapshot of the items as a plain dict."""
        return dict(self._items)

    def items(self) -> list[tuple[KT, VT]]:
        """Return a snapshot of the ``(key, value)`` pairs in order."""
        return list(self._items.items())

    def to_list(self) -> list[VT]:
        """Return the values in order, discarding keys."""
        return list(self._items.values())

    def count(self) -> int:
        """Count the number of items."""
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def keys(self) -> Collection[int, KT]:
        """Return a new collection of the keys, indexed from 0."""
        return type(self)(list(self._items))  # type: ignore[return-value]

    def values(self) -> Collection[int, VT]:
        """Return a new collection of the values, indexed from 0."""
        return type(self)(list(self._items.values()))  # type: ignore[return-value]

    def map(self, callback: Callable[[VT, KT], R]) -> Collection[KT, R]:
        """Apply ``callback(value, key)`` to every item, keeping the keys.

        Callers only interested in the value can ignore the second argument.
        """
        return type(self)(  # type: ignore[return-value]
            {key: callback(value, key) for key, value in self._items.items()}
        )

    def filter(self, callback: Callable[[VT, KT], object] | None = None) -> Collection[KT, VT]:
        """Keep the items where ``callback(value, key)`` is truthy, keeping keys.

        Without a callback, falsy values are dropped (see :func:`is_truthy`).
        """
        if callback is None:
            kept = {key: value for key, value in self._items.items() if is_truthy(value)}
        else:
            kept = {key: value for key, value in self._items.items() if callback(value, key)}
        return type(self)(kept)

    # -- protocols ---------------------------------------------------------

    def __getitem__(self, key: Any) -> VT:
        normalized = _lookup_key(key)
        try:
            return self._items[normalized]  # type: ignore[index]
        except KeyError:
            raise KeyNotFoundError(key if normalized is _UNUSABLE else normalized) from None

    def __setitem__(self, key: Any, value: VT) -> None:
        self.put(key, value)

    def __delitem__(self, key: Any) -> None:
        self.forget(key)

    def __contains__(self, key: object) -> bool:
        return self.has(key)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[VT]:
        """Iterate over the values as they were when iteration started."""
        return iter(list(self._items.values()))

    def __reversed__(self) -> Iterator[VT]:
        return iter(list(reversed(self._items.values())))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Collection):
            return list(self._items.items()) == list(other._items.items())
        if isinstance(other, Mapping):
            if len(other) != len(self._items):
                return False
            normalized = {_lookup_key(key): value for key, value in other.items()}
            return _UNUSABLE not in normalized and self._items == normalized
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"
