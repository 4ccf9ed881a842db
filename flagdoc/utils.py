"""
flagdoc utilities (internal helpers, carefully exposed)

Overview
- UnsetType / Unset
  • Singleton sentinel to represent “value not provided” without conflating with None.
  • Falsey (bool(Unset) is False), printable as "Unset", and non-subclassable.

- coalesce(value, default=None)
  • Replace Unset with a concrete default, but preserve legitimate falsey values like None/0/""/[].

- mirror("attr")
  • Read-only property factory exposing a private backing field (self._attr), returning fresh
    copies for containers so callers cannot reach into a record's state.

- listify(value)
  • Normalize “a name or a sequence of names” (the shape accepted by boolean/string/alias options)
    into a fresh list.

Stability and contract
- Names not in __all__ are internal and may change without notice.

Quick examples
    >>> coalesce(Unset, "fallback")
    'fallback'
    >>> listify("h")
    ['h']
    >>> listify(("h", "?"))
    ['h', '?']
"""
import functools
from collections.abc import Sequence, Mapping, Set
from typing import final


@final
class UnsetType:
    """
    Internal sentinel type representing a value that was not provided.

    Characteristics
    - Boolean-false: bool(Unset) is False, but it is distinct from None and 0.
    - Printable: repr(Unset) -> "Unset".
    - Non-subclassable and a singleton per process.
    """

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo, /):
        return self

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def coalesce(object, default=None, /):
    """
    Resolve the Unset sentinel to a concrete default.

    Falsey values like None, 0, "" or [] are preserved as-is; only Unset is replaced.

    Examples
    - coalesce("name", "fallback") -> "name"
    - coalesce(Unset, "fallback")  -> "fallback"
    - coalesce(None, "fallback")   -> None
    """
    return object if object is not Unset else default


def listify(object, /):
    """
    Normalize a single name or a sequence of names into a new list.

    Accepted shapes
    - Unset / None: an empty list.
    - str: a one-element list (a string is never split into characters).
    - any other iterable of str: its items, in order.

    Raises
    - TypeError: when the value, or one of its items, is not a string.
    """
    if object is Unset or object is None:
        return []
    if isinstance(object, str):
        return [object]
    if isinstance(object, Mapping) or not isinstance(object, Sequence | Set):
        raise TypeError(f"expected a name or a sequence of names, got {type(object).__name__!r}")
    names = list(object)
    for name in names:
        if not isinstance(name, str):
            raise TypeError(f"flag names must be strings, got {type(name).__name__!r}")
    return names


def _immortalize(object):
    """
    Recursively copy container values.

    - Sequence (non-string): a new list with each element processed.
    - Mapping: a new dict with the original keys and processed values.
    - Set: a new set.
    - Anything else: returned as-is.
    """
    if isinstance(object, Sequence) and not isinstance(object, str):
        return list(map(_immortalize, object))
    elif isinstance(object, Mapping):
        return dict(zip(object.keys(), map(_immortalize, object.values())))
    elif isinstance(object, Set):
        return set(map(_immortalize, object))
    else:
        return object


def mirror(name, /):
    """
    Define a read-only property that mirrors a private backing attribute "_{name}".

    Container values are returned as fresh copies (see _immortalize); the Unset sentinel is
    returned as None so the public surface never leaks it.
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")

    def getter(self):
        return coalesce(_immortalize(getattr(self, "_" + name)))

    getter.__name__ = getter.__qualname__ = name
    return property(getter)


Unset = UnsetType()
"""
Internal sentinel for “not provided”.

Use Unset as a default when None is a valid, user-meaningful value but you still
need to distinguish “no input” from “explicitly passed None”.
"""


__all__ = (
    # Functions
    "coalesce",
    "listify",
    "mirror",

    # Types
    "UnsetType",

    # Constants
    "Unset",
)
