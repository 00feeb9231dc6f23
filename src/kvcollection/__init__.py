"""kvcollection: an ordered associative container with array-style keys.

Example:
    >>> from kvcollection import Collection, Lazy
    >>>
    >>> scores = Collection({"ann": 3, "bob": 0, "cy": 5})
    >>> scores.filter().keys().to_list()
    ['ann', 'cy']
    >>> scores.get("dee", Lazy(lambda key: f"{key} has no score"))
    'dee has no score'
"""

from __future__ import annotations

from kvcollection.collection import Collection, is_truthy
from kvcollection.defaults import Lazy, resolve_default
from kvcollection.errors import CollectionJsonError, InvalidKeyError, KeyNotFoundError
from kvcollection.keys import normalize_key

__version__ = "0.1.0"

__all__ = [
    "Collection",
    "CollectionJsonError",
    "InvalidKeyError",
    "KeyNotFoundError",
    "Lazy",
    "__version__",
    "is_truthy",
    "normalize_key",
    "resolve_default",
]
