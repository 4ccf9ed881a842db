r"""
flagdoc flag registry: option normalization and flag metadata.

Overview
- normalize(options, **overrides)
  • Derive a fresh, independent copy of the caller's options with the conventional help flag
    merged in (aliases "h" and "?", description "Display usage information").
  • A caller that already describes "help" keeps its own declaration untouched.
- flag_infos(options)
  • Enumerate the canonical flags of a (normalized) options mapping as FlagInfo records.
- FlagInfo
  • Read-only record: name, aliases (shortest first), type, description, argument, default.
- Default / DefaultKind
  • Tagged default value ({string, number, boolean, other}) classified once on ingest and
    formatted for display with describe().

Recognized options
- description: Mapping[str, str]    flag → one-line description.
- argument:    Mapping[str, str]    flag → placeholder shown as <name>.
- boolean:     str | Sequence[str]  presence flags.
- string:      str | Sequence[str]  flags taking a verbatim string.
- alias:       Mapping[str, str | Sequence[str]]  flag → short names.
- default:     Mapping[str, Any]    flag → default value (None means no default).
- preamble:    str                  text printed before "Options:".
- unknown:     Callable[[str], Any] called for every unrecognized token.

Ordering
- Flags appear in first-mention order across descriptions, booleans, strings, arguments and
  defaults; "help" is always moved last, and names registered as aliases are dropped.

Quick example:
    >>> infos = flag_infos(normalize(description={"output": "Output directory"}))
    >>> [info.name for info in infos]
    ['output', 'help']
    >>> infos[-1].aliases
    ['h', '?']
"""
import itertools
import math
import re
from collections.abc import Mapping
from decimal import Decimal
from enum import StrEnum

from .utils import *

HELP = "help"
HELP_ALIASES = ("h", "?")
HELP_DESCRIPTION = "Display usage information"

# Options whose values are mappings keyed by flag name.
_MAPPINGS = ("description", "argument", "alias", "default")
# Options whose values are a name or a list of names.
_LISTS = ("boolean", "string")

_EXPONENT = re.compile(r"e([+-])0*(\d)")

# Placeholders synthesized from an inferred type when none is given explicitly.
_PLACEHOLDERS = {
    "string": "str",
    "number": "num",
    "boolean": Unset,
}


class DefaultKind(StrEnum):
    """
    Classification of a default value, decided once when the default is ingested.
    """
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OTHER = "other"


class Default:
    """
    A flag default tagged with its kind.

    Formatting (describe)
    - string  → double-quoted text:  "out"
    - number  → decimal literal:     8080, 0.5, 1e+21 (exponent only below 1e-6 or from 1e21)
    - boolean → true / false
    - other   → the value's type name (e.g. list)
    """
    __slots__ = ("_kind", "_value", "_typename")

    kind = mirror("kind")
    value = mirror("value")
    typename = mirror("typename")

    def __init__(self, value, /):
        match value:
            # bool is checked before int since it subclasses it.
            case bool():
                self._kind = DefaultKind.BOOLEAN
            case int() | float():
                self._kind = DefaultKind.NUMBER
            case str():
                self._kind = DefaultKind.STRING
            case _:
                self._kind = DefaultKind.OTHER
        self._value = value
        if self._kind is DefaultKind.OTHER:
            self._typename = type(value).__name__
        else:
            self._typename = self._kind.value

    def describe(self):
        match self._kind:
            case DefaultKind.STRING:
                return f'"{self._value}"'
            case DefaultKind.NUMBER:
                return _number(self._value)
            case DefaultKind.BOOLEAN:
                return "true" if self._value else "false"
            case _:
                return self._typename

    def __eq__(self, other):
        if not isinstance(other, Default):
            return NotImplemented
        return self._kind is other._kind and self._value == other._value

    __hash__ = None

    def __repr__(self):
        return f"Default({self._value!r})"

    def __rich_repr__(self):
        yield self._value


def _number(value):
    if not isinstance(value, float):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if 1e-6 <= abs(value) < 1e21:
        if value.is_integer():
            return str(int(value))
        # Shortest round-trip digits, written out positionally: 1e-05 → 0.00001.
        return format(Decimal(repr(value)), "f")
    # Exponent form without zero padding: 1e-07 → 1e-7, 1e+300 stays.
    return _EXPONENT.sub(r"e\1\2", repr(value))


class FlagInfo:
    """
    Display metadata for one canonical flag.

    Fields
    - name: canonical flag name (never an alias of another flag).
    - aliases: alternative names, shortest first (stable on ties).
    - type: "boolean", "string", "number", another type name, or None when untyped.
    - description: one-line description, or None.
    - argument: value placeholder (rendered as <argument>), or None.
    - default: Default, or None when the flag has no default.

    Records are created per call by flag_infos() and never shared.
    """
    __slots__ = ("_name", "_aliases", "_type", "_description", "_argument", "_default")

    name = mirror("name")
    aliases = mirror("aliases")
    type = mirror("type")
    description = mirror("description")
    argument = mirror("argument")
    default = mirror("default")

    def __init__(self, name, /, aliases=(), type=Unset, description=Unset, argument=Unset, default=Unset):
        if not isinstance(name, str) or not name:
            raise TypeError("FlagInfo() name must be a non-empty string")
        self._name = name
        self._aliases = tuple(sorted(listify(aliases), key=len))
        self._type = type
        self._description = description
        self._argument = argument
        self._default = default

    @property
    def names(self):
        """
        The canonical name and all aliases, shortest first (declaration order on ties).
        """
        return sorted((self._name, *self._aliases), key=len)

    def __repr__(self):
        fields = ", ".join(f"{key}={value!r}" for key, value in self.__rich_repr__())
        return f"FlagInfo({self._name!r}{', ' if fields else ''}{fields})"

    def __rich_repr__(self):
        for field in ("aliases", "type", "description", "argument", "default"):
            value = getattr(self, "_" + field)
            if value is not Unset and value != ():
                yield field, value


def _merge(options, overrides):
    if options is Unset or options is None:
        options = {}
    if not isinstance(options, Mapping):
        raise TypeError(f"options must be a mapping, got {type(options).__name__!r}")
    return {**options, **overrides}


def _copy(options):
    copied = {}
    for key, value in options.items():
        if key in _MAPPINGS and value is not None:
            if not isinstance(value, Mapping):
                raise TypeError(f"option {key!r} must be a mapping, got {type(value).__name__!r}")
            value = {flag: (listify(item) if key == "alias" else item) for flag, item in value.items()}
        elif key in _LISTS:
            value = listify(value)
        copied[key] = value
    return copied


def normalize(options=Unset, /, **overrides):
    """
    Return a new options dict with the help flag merged in.

    - The caller's mapping (and every nested mapping or list) is copied; nothing is mutated.
    - When a non-empty "help" description already exists the copy is returned as is.
    - Otherwise "help" gains the aliases ("h", "?") and the default description.
    - Alias values are normalized to lists; boolean/string options to lists of names.

    Keyword overrides are merged over the given mapping before copying.
    """
    options = _copy(_merge(options, overrides))
    if (options.get("description") or {}).get(HELP):
        return options
    options["alias"] = {**(options.get("alias") or {}), HELP: list(HELP_ALIASES)}
    options["description"] = {**(options.get("description") or {}), HELP: HELP_DESCRIPTION}
    return options


def _placeholder(kind, explicit, switch):
    if switch:
        return Unset
    if explicit:
        return explicit
    if kind is Unset:
        return Unset
    return _PLACEHOLDERS.get(kind, "arg")


def flag_infos(options, /):
    """
    Enumerate canonical flags as FlagInfo records, in display order.

    Type inference (highest first): boolean list, string list, kind of the default value.
    Placeholders: none for flags in the boolean list, else the explicit "argument" entry, else
    str/num/arg by type (nothing for booleans inferred from a default).
    """
    options = _copy(_merge(options, {}))
    descriptions = options.get("description") or {}
    arguments = options.get("argument") or {}
    defaults = options.get("default") or {}
    aliases = options.get("alias") or {}
    booleans = options.get("boolean", [])
    strings = options.get("string", [])

    names = dict.fromkeys(itertools.chain(descriptions, booleans, strings, arguments, defaults))
    names.pop(HELP, None)
    names[HELP] = None
    for alias in itertools.chain.from_iterable(aliases.values()):
        names.pop(alias, None)

    infos = []
    for name in names:
        default = defaults.get(name)
        default = Default(default) if default is not None else Unset
        if name in booleans:
            kind = DefaultKind.BOOLEAN.value
        elif name in strings:
            kind = DefaultKind.STRING.value
        elif default is not Unset:
            kind = default.typename
        else:
            kind = Unset
        infos.append(FlagInfo(
            name,
            aliases=aliases.get(name, ()),
            type=kind,
            description=descriptions.get(name) or Unset,
            argument=_placeholder(kind, arguments.get(name), name in booleans),
            default=default,
        ))
    return infos


__all__ = (
    "HELP",
    "HELP_ALIASES",
    "HELP_DESCRIPTION",
    "DefaultKind",
    "Default",
    "FlagInfo",
    "normalize",
    "flag_infos",
)
