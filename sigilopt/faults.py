"""
sigilopt faults (parse errors) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every user-facing parse error.
- ParseError: base type that carries message + options and knows how to render itself
  in a friendly, lowercased, and actionable way.
- UnrecognizedOptionError / MissingArgumentError / BooleanParseError / NumberParseError:
  the concrete faults raised by the parser.
- trigger(): central entry point to surface a fault (raise it, or print it and exit).

UX goals
- Position-first messages: every message names the ordinal position of the token
  that failed (“at third position”).
- Short titles, one-sentence bodies, a single clear hint.

Integration
- Parser.parse_argv raises these faults directly; nothing is logged.
- getopts() catches them and calls trigger(fault, **ctx). In non-shell mode the fault
  is raised again; in shell mode it is rendered via rich on stderr and the process exits.
"""
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes used by the parser (stable identifiers).

    grouping
    - options (1111x/1112x)
      • UNRECOGNIZED_OPTION, MISSING_ARGUMENT
    - literals (1113x)
      • BOOLEAN_LITERAL, NUMBER_LITERAL

    normalize() allows host remapping to custom labels while keeping code-stability.
    """
    # --- option errors (111xx) ---
    UNRECOGNIZED_OPTION = 11112
    MISSING_ARGUMENT    = 11117

    # --- literal errors (111xx) ---
    BOOLEAN_LITERAL     = 11131
    NUMBER_LITERAL      = 11132

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class ParseError(Exception):
    """
    base class of every fault raised by Parser.parse_argv.

    the fault keeps its context in `options` (read-only): code, title, hint,
    index and the kind-specific fields (name, short, long, literal, option),
    plus render flags merged later by trigger() (shell, fancy, colorful, prog).
    """

    def __init__(self, message, /, **options):
        assert isinstance(message, str)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    @property
    def code(self):
        return self.options.get("code")

    @property
    def index(self):
        return self.options.get("index")

    def __rich__(self):
        main = __import__("__main__")

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        } | getattr(main, "__styles__", {}))

        colorful = self.options.get("colorful", True)
        fancy = self.options.get("fancy", False)

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

        prog = text(getattr(main, "__prog__", self.options.get("prog", "sigilopt")), styler("prog-name"))
        code = self.code.normalize() if isinstance(self.code, FaultCode) else "?"

        header = Text.assemble(
            "[ ",
            prog,
            " — ",
            text(code, styler("code")),
            " | ",
            text(self.options.get("title", "parse error").title(), styler("error-title")),
            " ]"
        )
        message = text(self.message, styler("error-message"))
        renders = [message]
        if hint := self.options.get("hint"):
            renders.append(Text.assemble(text(" → ", styler("hint-arrow")), text(hint, styler("hint"))))

        if fancy:
            return Panel(Group(*renders), title=header, title_align="left")

        return Group(header, *renders)

    def __trigger__(self) -> None:
        if not self.options.get("shell"):
            raise self from None
        console.print(self)
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class UnrecognizedOptionError(ParseError):
    # long name (without "--") or short character
    name = property(lambda self: self.options["name"])


class MissingArgumentError(ParseError):
    short = property(lambda self: self.options["short"])
    long = property(lambda self: self.options["long"])


class BooleanParseError(ParseError):
    literal = property(lambda self: self.options["literal"])
    option = property(lambda self: self.options["option"])


class NumberParseError(ParseError):
    literal = property(lambda self: self.options["literal"])
    option = property(lambda self: self.options["option"])


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see ParseError).
    - options are merged into the fault via __replace__(**options) before triggering.
    - in shell mode, rendering happens via the rich console and the process exits;
      otherwise the fault is raised.

    typical options
    - shell, fancy, colorful, prog.
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
    "ParseError",
    "UnrecognizedOptionError",
    "MissingArgumentError",
    "BooleanParseError",
    "NumberParseError",
    "trigger",
)
