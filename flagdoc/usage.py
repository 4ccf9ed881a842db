"""
flagdoc usage rendering.

Overview
- render(infos, *, preamble=None) → str
  • Pure, deterministic rendering of FlagInfo records into an aligned "Options:" block.
- format_usage(options, **overrides) → str
  • normalize → flag_infos → render, honoring the "preamble" option.
- log_usage(options, *, console=..., **overrides)
  • format_usage, then print through a rich Console (plain text, no markup, no wrapping, no tab
    expansion).

Layout
    Options:
      --output <dir>  Output directory (default: "out")
      -h, -?, --help  Display usage information

- Each line: two spaces, the flag column padded to the widest flag plus two spaces, then the
  description column.
- Flag column: every name prefixed with "-" (one character) or "--" (longer), shortest first,
  joined by ", ", then " <placeholder>" when the flag takes a value.
- Description column: "<description> (default: <value>)", "Default: <value>", or empty.
- A preamble is printed verbatim and separated from "Options:" by one blank line.
- No trailing line break.
"""
from rich.console import Console
from rich.segment import Segment

from .registry import flag_infos, normalize
from .utils import Unset, coalesce

stdout = Console(soft_wrap=True, highlight=False, markup=False, emoji=False)


def switch(name, /):
    """
    Return the command-line spelling of a flag name: "-x" or "--name".
    """
    return ("-" if len(name) == 1 else "--") + name


def flag_string(info, /):
    string = ", ".join(map(switch, info.names))
    if info.argument:
        string += f" <{info.argument}>"
    return string


def description_string(info, /):
    default = info.default.describe() if info.default is not None else None
    if info.description:
        if default is None:
            return info.description
        return f"{info.description} (default: {default})"
    if default is not None:
        return f"Default: {default}"
    return ""


def render(infos, /, *, preamble=None):
    """
    Render FlagInfo records as an aligned usage block.

    Parameters
    - infos: Iterable[FlagInfo], already in display order.
    - preamble: optional text placed before the "Options:" header.

    Returns
    - str: the block, without a trailing line break.
    """
    rows = [(flag_string(info), description_string(info)) for info in infos]
    width = max((len(flags) for flags, _ in rows), default=0)
    lines = ["Options:"]
    lines.extend(f"  {flags.ljust(width)}  {description}" for flags, description in rows)
    usage = "\n".join(lines)
    if preamble:
        usage = f"{preamble}\n\n{usage}"
    return usage


def format_usage(options=Unset, /, **overrides):
    """
    Normalize the options (adding the help flag) and render their usage block.
    """
    options = normalize(options, **overrides)
    return render(flag_infos(options), preamble=options.get("preamble"))


class Verbatim:
    """
    Renderable that reaches the console as a single unstyled segment.

    Unlike Text, nothing is rewritten on the way out: no markup, no tab expansion, no wrapping.
    """
    __slots__ = ("text",)

    def __init__(self, text, /):
        self.text = text

    def __rich_console__(self, console, options):
        yield Segment(self.text)
        yield Segment.line()


def emit(renderable, /, *, console=Unset):
    """
    Print text (or a renderable) through a rich console, byte for byte.
    """
    if isinstance(renderable, str):
        renderable = Verbatim(renderable)
    coalesce(console, stdout).print(renderable, soft_wrap=True)


def log_usage(options=Unset, /, *, console=Unset, **overrides):
    emit(format_usage(options, **overrides), console=console)


__all__ = (
    "render",
    "Verbatim",
    "emit",
    "format_usage",
    "log_usage",
    "switch",
)
