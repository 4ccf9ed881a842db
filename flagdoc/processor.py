r"""
flagdoc flag processing: normalize, tokenize, then decide.

Overview
- parse_flags(args, options, **overrides)
  • Normalize the options (help flag merged in) and tokenize; never halts.
- process_flags(args, options, *, shell=True, console=..., **overrides)
  • Same as parse_flags, then stop when help was requested or unknown flags were seen:
    print "Unknown arguments: ..." (if any), a blank line, the usage block, and exit with
    status 1. With shell=False the fault is raised instead (see flagdoc.faults).
- UnknownFlagCollector
  • The handler given to the tokenizer for one call. It records flag-like tokens and forwards
    every token to the caller's own "unknown" callback, whose answer decides whether the token
    is kept (tokens are kept when there is no callback).

Quick example:
    >>> result = process_flags(["--output", "site", "page.md"], {
    ...     "description": {"output": "Output directory"},
    ...     "string": ["output"],
    ...     "default": {"output": "out"},
    ... })
    >>> result["output"], result["_"]
    ('site', ['page.md'])
"""
from .faults import HelpRequested, UnknownFlagsError, trigger
from .registry import HELP, flag_infos, normalize
from .tokenizer import is_flag, tokenize
from .usage import render
from .utils import Unset


class UnknownFlagCollector:
    """
    Per-call accumulator for unrecognized flag tokens.

    report_unknown(token) records the token when it is flag-like, then answers with the result
    of the caller's callback (or True when there is none).
    """

    def __init__(self, callback=None, /):
        if callback is not None and not callable(callback):
            raise TypeError("unknown callback must be callable")
        self._callback = callback
        self._unknown = {}

    @property
    def unknown(self):
        return list(self._unknown)

    def report_unknown(self, token, /):
        if is_flag(token):
            self._unknown[token] = None
        if self._callback is None:
            return True
        return self._callback(token)

    def __bool__(self):
        return bool(self._unknown)


def _tokenize(args, options, overrides):
    options = normalize(options, **overrides)
    collector = UnknownFlagCollector(options.get("unknown"))
    return options, collector, tokenize(args, options, collector)


def parse_flags(args, options=Unset, /, **overrides):
    """
    Normalize the options and tokenize the arguments; no help or unknown-flag handling.

    Checking result["help"] is the caller's responsibility.
    """
    _, _, result = _tokenize(args, options, overrides)
    return result


def process_flags(args, options=Unset, /, *, shell=True, console=Unset, **overrides):
    """
    Parse the arguments; show usage and halt on --help or unknown flags.

    Parameters
    - args: Iterable[str], the raw tokens (e.g. sys.argv[1:]).
    - options: flag options mapping (see flagdoc.registry); keyword overrides are merged over it.
    - shell: print and exit (True) or raise the fault (False).
    - console: rich Console receiving the text in shell mode (defaults to standard output).

    Returns
    - dict with flag values and the positional tokens under "_".

    Raises
    - SystemExit(1) in shell mode, UnknownFlagsError / HelpRequested otherwise.
    """
    options, collector, result = _tokenize(args, options, overrides)
    if result.get(HELP) or collector:
        usage = render(flag_infos(options), preamble=options.get("preamble"))
        fault = UnknownFlagsError(usage, collector.unknown) if collector else HelpRequested(usage)
        trigger(fault, shell=shell, console=console)
    return result


__all__ = (
    "UnknownFlagCollector",
    "parse_flags",
    "process_flags",
)
