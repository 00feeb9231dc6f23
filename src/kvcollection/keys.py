"""Array-key normalization.

Collection keys are either ``str`` or ``int``. Other scalar types are coerced
the way associative arrays coerce them:

- ``bool`` becomes ``0`` / ``1``
- a string holding a canonical decimal integer (``"7"``, ``"-3"``) becomes
  that integer; ``"07"``, ``"+7"``, ``"-0"`` and ``"7.0"`` stay strings
- a ``float`` is truncated toward zero
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable
from typing import Any

from kvcollection.errors import InvalidKeyError

Key = str | int

_INTEGER_STRING = re.compile(r"-?(0|[1-9][0-9]*)")


def normalize_key(key: Any) -> Key:
    """Coerce ``key`` into its canonical array-key form.

    Raises:
        InvalidKeyError: If the key is not a str, int, bool or finite float.
    """
    if isinstance(key, bool):
        return int(key)
    if isinstance(key, int):
        return key
    if isinstance(key, str):
        if _INTEGER_STRING.fullmatch(key) and key != "-0":
            return int(key)
        return key
    if isinstance(key, float):
        if not math.isfinite(key):
            msg = f"Cannot use non-finite float as a collection key: {key!r}"
            raise InvalidKeyError(msg)
        return int(key)
    msg = f"Collection keys must be str or int, got {type(key).__name__}"
    raise InvalidKeyError(msg)


def next_integer_key(keys: Iterable[Key]) -> int:
    """Return the key ``add`` assigns: one past the largest int key, never negative."""
    highest = -1
    for key in keys:
        if isinstance(key, int) and key > highest:
            highest = key
    return highest + 1
