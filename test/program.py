"""
Program metadata, help/version rendering and entry wrapper tests.

Scope
- Validate render_help/render_version content in plain mode.
- Validate getopts(): metadata defaults, argv handling and fault routing.
- Validate the module-level shortcuts bound to the process-wide parser.

Conventions
- Test method names follow CamelCase per project convention.
- The process-wide parser is swapped for a fresh one where a test needs it.
"""
import io
import sys
import unittest
from unittest import TestCase, mock

from rich.console import Console
from rich.panel import Panel

import sigilopt
from sigilopt import faults, parser as parsing, program as programs
from sigilopt.utils import Unset
from sigilopt import (
    Parser,
    Program,
    UnrecognizedOptionError,
    getopts,
    render_help,
    render_version,
    print_help,
    print_version,
)


def _recorder():
    return Console(file=io.StringIO(), width=100, color_system=None)


def _render(renderable):
    console = _recorder()
    console.print(renderable)
    return console.file.getvalue()


class TestHelp(TestCase):

    def setUp(self):
        self.parser = Parser()
        self.parser.flag("f", "force", "overwrite existing files")
        self.parser.single_arg("o", "output", "file to write")
        self.parser.multi_arg("I", "include", "search path")
        self.parser.counter("v", "verbose", "more output")
        self.program = Program("tool", "1.2.3", "does things")

    def testHeaderAndDescription(self):
        output = _render(render_help(self.parser, self.program, colorful=False))
        self.assertIn("tool — 1.2.3", output)
        self.assertIn("does things", output)
        self.assertIn("options:", output)

    def testOneRowPerOption(self):
        output = _render(render_help(self.parser, self.program, colorful=False))
        self.assertIn("-f/--force", output)
        self.assertIn("-o/--output VALUE", output)
        self.assertIn("-I/--include VALUE...", output)
        self.assertIn("-v/--verbose [=N]", output)
        self.assertIn("overwrite existing files", output)

    def testOverwrittenOptionListedOnce(self):
        self.parser.counter("f", "force", "now a counter")
        output = _render(render_help(self.parser, self.program, colorful=False))
        self.assertEqual(output.count("--force"), 1)
        self.assertIn("now a counter", output)
        self.assertNotIn("overwrite existing files", output)

    def testNoOptionsSection(self):
        output = _render(render_help(Parser(), self.program, colorful=False))
        self.assertNotIn("options:", output)

    def testFancyHelpIsPanel(self):
        self.assertIsInstance(render_help(self.parser, self.program, fancy=True), Panel)

    def testPrintHelp(self):
        console = _recorder()
        print_help(self.parser, self.program, console=console, colorful=False)
        self.assertIn("-f/--force", console.file.getvalue())


class TestVersion(TestCase):

    def testVersionLine(self):
        output = _render(render_version(Program("tool", "2.0"), colorful=False))
        self.assertEqual(output.strip(), "tool — 2.0")

    def testUnsetVersionDefaults(self):
        output = _render(render_version(Program("tool"), colorful=False))
        self.assertIn("tool — 0.0.1", output)

    def testFancyVersionIsPanel(self):
        self.assertIsInstance(render_version(Program("tool", "2.0"), fancy=True), Panel)

    def testPrintVersion(self):
        console = _recorder()
        print_version(Program("tool", "2.0"), console=console, colorful=False)
        self.assertIn("tool — 2.0", console.file.getvalue())


class TestGetopts(TestCase):

    def setUp(self):
        self.parser = Parser()
        self.force = self.parser.flag("f", "force", "force")

    def testExplicitArgv(self):
        rest = getopts(["-f", "a"], parser=self.parser, program=Program("tool", "1.0"))
        self.assertTrue(self.force.passed)
        self.assertEqual(rest, ["a"])
        self.assertIs(rest, self.parser.rest)

    def testReadsProcessArguments(self):
        program = Program()
        with mock.patch.object(sys, "argv", ["/usr/bin/tool", "--force", "x"]):
            rest = getopts(parser=self.parser, program=program)
        self.assertTrue(self.force.passed)
        self.assertEqual(rest, ["x"])
        self.assertEqual(program.name, "tool")
        self.assertEqual(program.version, "0.0.1")

    def testKeepsGivenMetadata(self):
        program = Program("mine", "9.9")
        getopts([], parser=self.parser, program=program)
        self.assertEqual((program.name, program.version), ("mine", "9.9"))

    def testFaultRaisedOutsideShell(self):
        with self.assertRaises(UnrecognizedOptionError) as context:
            getopts(["--nope"], parser=self.parser, program=Program("tool", "1.0"))
        self.assertEqual(context.exception.options["prog"], "tool")
        self.assertFalse(context.exception.options["shell"])

    def testFaultPrintedAndExitsInShell(self):
        recorder = _recorder()
        with mock.patch.object(faults, "console", recorder):
            with self.assertRaises(SystemExit):
                getopts(["--nope"], parser=self.parser, program=Program("tool", "1.0"), shell=True, colorful=False)
        self.assertIn("[ tool —", recorder.file.getvalue())
        self.assertIn("unrecognized long option 'nope'", recorder.file.getvalue())

    def testDefaultsToProcessWideParserAndProgram(self):
        with mock.patch.object(parsing, "default", self.parser), \
                mock.patch.object(programs, "default", Program()):
            with mock.patch.object(sys, "argv", ["tool", "-f"]):
                getopts()
            self.assertEqual(programs.default.name, "tool")
        self.assertTrue(self.force.passed)


class TestModuleShortcuts(TestCase):

    def setUp(self):
        self.patcher = mock.patch.object(parsing, "default", Parser())
        self.patcher.start()

    def tearDown(self):
        self.patcher.stop()

    def testShortcutsUseProcessWideParser(self):
        force = sigilopt.new_flag("f", "force", "force")
        output = sigilopt.new_single_arg("o", "output", "output")
        include = sigilopt.new_multi_arg("I", "include", "include")
        verbose = sigilopt.new_counter("v", "verbose", "verbose")

        sigilopt.parse_argv(["-fvv", "-oout", "-Ia", "--include=b", "left"])

        self.assertTrue(force.passed)
        self.assertEqual(output.value, "out")
        self.assertEqual(include.values, ["a", "b"])
        self.assertEqual(verbose.count, 2)
        self.assertEqual(sigilopt.rest(), ["left"])
        self.assertIs(sigilopt.rest(), parsing.default.rest)

    def testStdinHandlerOnProcessWideParser(self):
        calls = []
        parsing.default.stdin_handler = lambda: calls.append(True)
        sigilopt.parse_argv(["-"])
        self.assertEqual(calls, [True])

    def testProgramDefaultsAreUnset(self):
        program = Program()
        self.assertIs(program.name, Unset)
        self.assertIs(program.version, Unset)
        self.assertEqual(program.description, "")


if __name__ == '__main__':
    unittest.main()
