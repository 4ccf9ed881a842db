"""
Usage rendering tests (layout, alignment, defaults, preamble, console output).

Conventions
- Test method names follow CamelCase per project convention.
- Console output is captured with a rich Console writing to a StringIO.
"""
import io
import unittest
from unittest import TestCase

from rich.console import Console

from flagdoc.registry import FlagInfo, Default, flag_infos, normalize
from flagdoc.usage import Verbatim, emit, format_usage, log_usage, render, switch

OUTPUT = {
    "description": {"output": "Output directory"},
    "argument": {"output": "dir"},
    "string": ["output"],
    "default": {"output": "out"},
}

OUTPUT_USAGE = (
    "Options:\n"
    '  --output <dir>  Output directory (default: "out")\n'
    "  -h, -?, --help  Display usage information"
)


class TestFormatUsage(TestCase):
    """Behavioral tests for the rendered usage block."""

    def testSingleStringFlag(self):
        self.assertEqual(format_usage(OUTPUT), OUTPUT_USAGE)

    def testPreamble(self):
        usage = format_usage({**OUTPUT, "preamble": "Usage: my-tool <options>"})
        self.assertEqual(usage, "Usage: my-tool <options>\n\n" + OUTPUT_USAGE)

    def testPreambleAsOverride(self):
        usage = format_usage(OUTPUT, preamble="Usage: my-tool <options>")
        self.assertTrue(usage.startswith("Usage: my-tool <options>\n\nOptions:\n"))

    def testEmptyOptions(self):
        self.assertEqual(format_usage(), "Options:\n  -h, -?, --help  Display usage information")

    def testNoTrailingLineBreak(self):
        self.assertFalse(format_usage(OUTPUT).endswith("\n"))

    def testDeterministic(self):
        self.assertEqual(format_usage(OUTPUT), format_usage(OUTPUT))

    def testHelpLineIsLast(self):
        usage = format_usage({
            "description": {"help": "Show this text", "verbose": "Talk more"},
            "alias": {"help": "h", "verbose": "v"},
            "boolean": ["verbose"],
        })
        self.assertEqual(usage.splitlines()[-1], "  -h, --help     Show this text")

    def testDefaultOnly(self):
        usage = format_usage({"default": {"depth": 3}})
        self.assertIn("  --depth <num>   Default: 3", usage.splitlines())

    def testDescriptionWithBooleanDefault(self):
        usage = format_usage({
            "description": {"clean": "Clean output directory"},
            "boolean": ["clean"],
            "alias": {"clean": "c"},
            "default": {"clean": True},
        })
        self.assertIn("  -c, --clean     Clean output directory (default: true)", usage.splitlines())

    def testBareFlagKeepsPadding(self):
        usage = format_usage({"boolean": ["verbose"]})
        self.assertEqual(usage.splitlines()[1], "  " + "--verbose".ljust(14) + "  ")

    def testBooleanNeverShowsPlaceholder(self):
        usage = format_usage({"boolean": ["clean"], "argument": {"clean": "yes"}, "default": {"clean": "no"}})
        self.assertNotIn("<", usage.splitlines()[1])

    def testBooleanDefaultWithExplicitPlaceholder(self):
        usage = format_usage({"default": {"x": True}, "argument": {"x": "flag"}})
        self.assertEqual(usage.splitlines()[1], "  -x <flag>       Default: true")

    def testOtherDefault(self):
        usage = format_usage({"description": {"paths": "Search paths"}, "default": {"paths": ["a"]}})
        self.assertIn("  --paths <arg>   Search paths (default: list)", usage.splitlines())

    def testCallerOptionsUntouched(self):
        options = {"description": {"output": "Output directory"}}
        format_usage(options)
        self.assertEqual(options, {"description": {"output": "Output directory"}})

    def testFullExample(self):
        usage = format_usage({
            "description": {
                "clean": "Clean output directory before processing",
                "input": "Input directory",
                "output": "Output directory",
            },
            "string": ["input", "output"],
            "boolean": ["clean", "noDescription"],
            "alias": {"clean": "c", "input": "i", "output": "o", "noDescription": "x"},
            "argument": {"output": "dir", "par": "param"},
            "default": {"input": "content", "output": "out", "clean": True},
        })
        self.assertEqual(usage, "\n".join([
            "Options:",
            "  -c, --clean          Clean output directory before processing (default: true)",
            '  -i, --input <str>    Input directory (default: "content")',
            '  -o, --output <dir>   Output directory (default: "out")',
            "  -x, --noDescription  ",
            "  --par <param>        ",
            "  -h, -?, --help       Display usage information",
        ]))


class TestRender(TestCase):
    """Behavioral tests for render() on explicit records."""

    def testSwitch(self):
        self.assertEqual(switch("v"), "-v")
        self.assertEqual(switch("?"), "-?")
        self.assertEqual(switch("verbose"), "--verbose")

    def testStableShortestFirst(self):
        infos = [FlagInfo("output", aliases=["ou", "o", "op"])]
        self.assertEqual(render(infos), "Options:\n  -o, --ou, --op, --output  ")

    def testDescriptionAndDefault(self):
        infos = [FlagInfo("port", type="number", description="Port", argument="num", default=Default(8080))]
        self.assertEqual(render(infos), "Options:\n  --port <num>  Port (default: 8080)")

    def testPreambleOmittedWhenEmpty(self):
        infos = flag_infos(normalize())
        self.assertEqual(render(infos, preamble=""), render(infos))
        self.assertTrue(render(infos).startswith("Options:\n"))


class TestLogUsage(TestCase):
    """Behavioral tests for printing through a rich console."""

    def testPrintsExactText(self):
        file = io.StringIO()
        log_usage(OUTPUT, console=Console(file=file))
        self.assertEqual(file.getvalue(), OUTPUT_USAGE + "\n")

    def testMarkupIsNotInterpreted(self):
        file = io.StringIO()
        log_usage({"description": {"style": "Use [bold]style[/bold]"}}, console=Console(file=file))
        self.assertIn("Use [bold]style[/bold]", file.getvalue())

    def testTabsAreKept(self):
        file = io.StringIO()
        options = {"description": {"x": "a\tb"}}
        log_usage(options, console=Console(file=file))
        self.assertEqual(file.getvalue(), format_usage(options) + "\n")
        self.assertIn("a\tb", file.getvalue())

    def testEmitRenderable(self):
        file = io.StringIO()
        emit(Verbatim("a\tb [i]c[/i]"), console=Console(file=file))
        self.assertEqual(file.getvalue(), "a\tb [i]c[/i]\n")


if __name__ == "__main__":
    unittest.main()
