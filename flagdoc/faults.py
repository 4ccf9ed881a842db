"""
flagdoc faults and their rendering.

Scope
- FaultCode: stable numeric identifiers for the two stop conditions of flag processing.
- UsageFault: base type carrying the usage text, the unknown tokens and the runtime options;
  knows how to render itself (__rich__) and how to surface itself (__trigger__).
- UnknownFlagsError / HelpRequested: the concrete stop conditions.
- trigger(): central entry point to surface any fault.

Surfacing
- shell mode (default): print through the rich console, then exit the process with status 1.
- embedded mode (shell=False): raise the fault; nothing is printed.

Text
    Unknown arguments: --bogus            (only when unknown tokens were recorded)
                                          (one blank line)
    Options:
      ...
"""
import sys
from enum import IntEnum
from types import MappingProxyType

from .usage import Verbatim, emit
from .utils import Unset


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    - UNKNOWN_FLAG: one or more flag-like tokens matched no declared flag or alias.
    - HELP_REQUESTED: the help flag was set; not an error, but it halts the same way.
    """
    UNKNOWN_FLAG    = 11112
    HELP_REQUESTED  = 11201


class UsageFault(Exception):
    code = Unset

    def __init__(self, usage, /, unknown=(), **options):
        assert isinstance(usage, str)
        # Unique tokens, first occurrence order.
        self.unknown = tuple(dict.fromkeys(unknown))
        self.usage = usage
        self.options = MappingProxyType(options)
        super().__init__(self.message)

    @property
    def message(self):
        if self.unknown:
            return "Unknown arguments: " + " ".join(self.unknown)
        return "Help requested"

    def render(self):
        """
        The exact text shown to the user: the unknown-arguments notice, if any, then usage.
        """
        if self.unknown:
            return f"{self.message}\n\n{self.usage}"
        return self.usage

    def __rich__(self):
        return Verbatim(self.render())

    def __trigger__(self) -> None:
        if not self.options.get("shell", True):
            raise self from None
        emit(self, console=self.options.get("console", Unset))
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.usage, unknown=self.unknown, **{**self.options, **overrides})


class UnknownFlagsError(UsageFault):
    code = FaultCode.UNKNOWN_FLAG


class HelpRequested(UsageFault):
    code = FaultCode.HELP_REQUESTED


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see UsageFault).
    - options are merged into the fault via __replace__(**options) before triggering.
    - typical options: shell (bool), console (rich Console).
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    fault.__replace__(**options).__trigger__()


__all__ = (
    "FaultCode",
    "UsageFault",
    "UnknownFlagsError",
    "HelpRequested",
    "trigger",
)
