"""
Program metadata, help/version rendering and the process entry wrapper.

What this module provides
- Program: name, version and description of the running tool.
- render_help(parser, program) / render_version(program): rich renderables.
- print_help(...) / print_version(...): print them to stdout.
- getopts(argv): read sys.argv[1:], fill in unset metadata, parse with the
  process-wide parser, and surface faults through trigger().

Customization
- Define a mapping named __styles__ in __main__ to override any palette entry.
- When colorful is False, styling is suppressed.
"""
import os.path
import sys
from collections import defaultdict

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from . import parser as _parser
from .faults import ParseError, trigger
from .utils import Unset, nullify

DEFAULT_VERSION = "0.0.1"


class Program:
    """
    Program metadata consumed by help/version rendering.

    name and version stay Unset until given or filled in by getopts().
    """
    __slots__ = ("name", "version", "description")

    def __init__(self, name=Unset, version=Unset, description=""):
        self.name = name
        self.version = version
        self.description = description

    def __rich_repr__(self):
        yield "name", self.name
        yield "version", self.version
        yield "description", self.description, ""

    def __repr__(self):
        return "program(name=%r, version=%r, description=%r)" % (self.name, self.version, self.description)


default = Program()
"""
process-wide program metadata, used when getopts() is not given one.
"""


def _palette(colorful):
    styles = defaultdict(str, {
        # === Head ===
        "program-name": "bold #FF4D94",  # MAGENTA-PINK → brand pop
        "program-version": "bold #00E6FF",  # CYAN version
        "description-section": "italic #A3A3A3",  # Neutral gray

        # === Options ===
        "group-label": "bold #FFFFFF",  # Pure white headers
        "option-name": "bold #00E6FF",  # CYAN for value-taking options
        "flag-name": "bold #22C55E",  # GREEN for flags and counters
        "metavar": "bold #FFD600",  # AMBER for parameters
        "argument-description": "#9CA3AF",  # Muted gray

        # === Fancy panel ===
        "panel-title": "bold #FF4D94",
    } | getattr(__import__('__main__'), "__styles__", {}))

    def styler(style):
        return styles[style] if colorful else ""

    def text(fragment, style=""):
        if not fragment:
            return Text("")
        if not colorful:
            return Text(str(fragment))
        if isinstance(fragment, Text):
            return fragment
        return Text(str(fragment), style)

    return styler, text


def _header(program, styler, text):
    return Text(" — ").join((
        text(nullify(program.name, "?"), styler("program-name")),
        text(nullify(program.version, DEFAULT_VERSION), styler("program-version")),
    ))


def render_help(parser=Unset, program=Unset, /, *, colorful=True, fancy=False):
    """
    Build the help view: header, description, then one row per reachable option:

        -c/--long VALUE    help text
    """
    parser = nullify(parser, _parser.default)
    program = nullify(program, default)
    styler, text = _palette(colorful)

    renders = [_header(program, styler, text)]

    if program.description:
        renders.append(text(program.description, styler("description-section")))

    if len(parser.registry):
        table = Table.grid(padding=(0, 4))
        table.add_column(no_wrap=True)
        table.add_column()
        for option in parser.registry:
            style = "option-name" if option.valued else "flag-name"
            names = Text("/").join(text(name, styler(style)) for name in option.names)
            if metavar := option.__metavar__:
                names.append(" ").append(text(metavar, styler("metavar")))
            table.add_row(Text("  ") + names, text(option.help, styler("argument-description")))
        renders.append(Text.assemble("\n", text("options", styler("group-label")), ":"))
        renders.append(table)

    renderable = Group(*renders)

    if fancy:
        renderable = Panel(
            renderable,
            title=Text.assemble("[ ", f"{nullify(program.name, '?')} HELP".upper(), " ]", style=styler("panel-title")),
            title_align="left",
        )

    return renderable


def render_version(program=Unset, /, *, colorful=True, fancy=False):
    """
    Build the version view: "<name> — <version>".
    """
    program = nullify(program, default)
    styler, text = _palette(colorful)

    renderable = _header(program, styler, text)

    if fancy:
        renderable = Panel(
            renderable,
            title=Text.assemble("[ ", f"{nullify(program.name, '?')} VERSION".upper(), " ]", style=styler("panel-title")),
            title_align="left",
        )

    return renderable


def print_help(parser=Unset, program=Unset, /, *, console=Unset, **options):
    nullify(console, Console()).print(render_help(parser, program, **options))


def print_version(program=Unset, /, *, console=Unset, **options):
    nullify(console, Console()).print(render_version(program, **options))


def getopts(argv=Unset, /, *, parser=Unset, program=Unset, shell=False, fancy=False, colorful=True):
    """
    Parse the real process arguments (or `argv`) with the process-wide parser.

    Behavior
    - argv Unset: read sys.argv[1:].
    - unset program metadata is filled in: name from basename(sys.argv[0]),
      version "0.0.1".
    - parse faults go through trigger(): raised again when shell is False,
      printed with rich and exited with status 1 when shell is True.

    Returns
    - the parser's leftover list.
    """
    parser = nullify(parser, _parser.default)
    program = nullify(program, default)

    if program.name is Unset:
        program.name = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "?"
    if program.version is Unset:
        program.version = DEFAULT_VERSION

    try:
        parser.parse_argv(sys.argv[1:] if argv is Unset else argv)
    except ParseError as fault:
        trigger(fault, shell=shell, fancy=fancy, colorful=colorful, prog=program.name)

    return parser.rest


__all__ = (
    "Program",
    "render_help",
    "render_version",
    "print_help",
    "print_version",
    "getopts",
)
