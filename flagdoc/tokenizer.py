"""
flagdoc tokenizer adapter: drive argparse from normalized flag options.

Tokenization is argparse's job; this module only translates an options mapping into an
ArgumentParser and shapes its output into the result mapping handed back to callers.

Translation
- every canonical flag (and every flag known only through "alias") becomes one option whose
  option strings are the flag and its aliases ("-x" for one character, "--name" otherwise).
- boolean flags: presence switches, with "--no-<name>" negation when a long spelling exists.
- string flags: one optional value kept verbatim ("" when missing).
- other flags: one optional value coerced to a number when it looks numeric (True when missing).

Result
- a dict: flag → value for every flag that was given or has a default, booleans default to
  False, alias keys mirror their flag, and positional tokens under POSITIONALS ("_").
- tokens after a bare "--" are positional as-is.
- single-dash clusters led by a switch ("-cz") are split before parsing; a switch given an
  inline value ("--clean=yes") is not parsed but reported like any other leftover.
- leftover tokens are offered to handler.report_unknown(token); falsy answers drop the token.

Errors
- the parser never exits on its own; any argparse.ArgumentError it still raises propagates.
"""
import argparse
import re

from .registry import flag_infos
from .usage import switch
from .utils import listify

POSITIONALS = "_"
SEPARATOR = "--"

_INTEGER = re.compile(r"[-+]?\d+")
_NUMBER = re.compile(r"[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?")


def coerce(value, /):
    """
    Convert numeric-looking strings to int/float; return anything else unchanged.
    """
    if not isinstance(value, str):
        return value
    if _INTEGER.fullmatch(value):
        return int(value)
    if _NUMBER.fullmatch(value):
        return float(value)
    return value


def is_flag(token, /):
    """
    Whether a token is spelled like a flag ("-x", "--name", "--name=value").
    """
    return len(token) > 1 and token.startswith("-")


def _layout(options):
    aliases = options.get("alias") or {}
    booleans = listify(options.get("boolean"))
    strings = listify(options.get("string"))

    names = [info.name for info in flag_infos(options)]
    names.extend(name for name in aliases if name not in names)

    for name in names:
        flags = [switch(item) for item in sorted((name, *aliases.get(name, ())), key=len)]
        if name in booleans:
            yield name, flags, "boolean"
        elif name in strings:
            yield name, flags, "string"
        else:
            yield name, flags, "other"


def spellings(options, /):
    """
    Return (switches, known): the spellings that take no value and every declared spelling.
    """
    switches, known = set(), set()
    for _, flags, kind in _layout(options):
        known.update(flags)
        if kind == "boolean":
            switches.update(flags)
            switches.update("--no-" + flag[2:] for flag in flags if flag.startswith("--"))
    return switches, known | switches


def build_parser(options, /):
    parser = argparse.ArgumentParser(
        add_help=False,
        allow_abbrev=False,
        exit_on_error=False,
        conflict_handler="resolve",
    )
    for name, flags, kind in _layout(options):
        if kind == "boolean":
            if any(flag.startswith("--") for flag in flags):
                action = argparse.BooleanOptionalAction
            else:
                action = "store_true"
            parser.add_argument(*flags, dest=name, action=action, default=argparse.SUPPRESS)
        elif kind == "string":
            parser.add_argument(*flags, dest=name, nargs="?", const="", default=argparse.SUPPRESS)
        else:
            parser.add_argument(*flags, dest=name, nargs="?", const=True, type=coerce, default=argparse.SUPPRESS)
    return parser


def _split(token, switches, known):
    # "-cvofile" → "-c", "-v", "-ofile": switches stand alone, a value flag keeps the rest.
    for index, char in enumerate(token[1:], 1):
        flag = "-" + char
        if flag in switches or flag not in known:
            yield flag
        else:
            yield flag + token[index + 1:]
            return


def prepare(args, switches, known, /):
    """
    Rewrite tokens argparse cannot take as-is.

    - single-dash clusters led by a switch ("-cz") are split into one token per flag.
    - switches given an inline value ("--clean=yes") are set aside as rejected.

    Returns (tokens, rejected).
    """
    tokens, rejected = [], []
    for token in args:
        flag, separator, _ = token.partition("=")
        if separator and flag in switches:
            rejected.append(token)
        elif (
            is_flag(token) and
            not token.startswith("--") and
            len(token) > 2 and
            not separator and
            token not in known and
            token[:2] in switches
        ):
            tokens.extend(_split(token, switches, known))
        else:
            tokens.append(token)
    return tokens, rejected


def tokenize(args, options, handler, /):
    """
    Parse raw tokens against normalized options.

    Parameters
    - args: Iterable[str], the raw command-line tokens (without the program name).
    - options: normalized options mapping (see registry.normalize).
    - handler: object with report_unknown(token) -> Any, consulted for every leftover token.

    Returns
    - dict with flag values and the positional tokens under "_".
    """
    args = list(args)
    for token in args:
        if not isinstance(token, str):
            raise TypeError(f"arguments must be strings, got {type(token).__name__!r}")

    if SEPARATOR in args:
        index = args.index(SEPARATOR)
        args, rest = args[:index], args[index + 1:]
    else:
        rest = []

    aliases = options.get("alias") or {}
    defaults = options.get("default") or {}
    strings = listify(options.get("string"))

    args, rejected = prepare(args, *spellings(options))
    namespace, extras = build_parser(options).parse_known_args(args)

    result = {name: False for name in listify(options.get("boolean"))}
    result.update((name, value) for name, value in defaults.items() if value is not None)
    result.update(vars(namespace))

    positionals = []
    for token in rejected + extras:
        if not handler.report_unknown(token):
            continue
        if is_flag(token):
            key, separator, value = token.lstrip("-").partition("=")
            result[key] = coerce(value) if separator else True
        else:
            positionals.append(token if POSITIONALS in strings else coerce(token))
    positionals.extend(rest)

    for name, names in aliases.items():
        if name in result:
            for alias in listify(names):
                result[alias] = result[name]

    result[POSITIONALS] = positionals
    return result


__all__ = (
    "POSITIONALS",
    "coerce",
    "is_flag",
    "spellings",
    "prepare",
    "build_parser",
    "tokenize",
)
