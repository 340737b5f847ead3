"""
sigilopt parser: classify argv-like tokens into option effects and leftovers.

What this module provides
- Parser: an explicit parsing context owning a Registry, the `rest` leftovers and the
  `stdin_handler` callback. Register options on it, then call parse_argv(tokens).
- default: a process-wide Parser, plus module-level shortcuts bound to it
  (new_flag, new_single_arg, new_multi_arg, new_counter, parse_argv, rest).

Token grammar (per token, in order)
- ""                 skipped
- <anything>         taken verbatim as the value when a SingleArg/MultiArg is waiting
- "-"                stdin_handler() is called; never a leftover
- "x"                leftover
- "-x" / "+x"        positive / negated short option; unknown letters are ignored
- "--"               terminator: every later token is a leftover, verbatim
- "--name"           positive long option; unknown names are an error
- "--name=VALUE"     assignment; unknown names are ignored
- "-abc"             short cluster; a value-taking letter swallows the rest of the
                     token as its value, or waits for the next token when last
- "+abc"             negated short cluster; never waits for a value
- anything else      leftover

Every fault is raised right away; effects applied before it stay applied.
"""
from collections import deque
from collections.abc import Iterable

from .faults import *
from .options import Flag, SingleArg, MultiArg, Counter
from .registry import Registry
from .utils import Unset, nullify, ordinal

# fault shape per failing coercion: (code, title, hint)
_LITERAL_FAULTS = {
    BooleanParseError: (
        FaultCode.BOOLEAN_LITERAL,
        "bad boolean value",
        "use t, true, f or false (letter case does not matter)",
    ),
    NumberParseError: (
        FaultCode.NUMBER_LITERAL,
        "bad number value",
        "use an integer such as 3, -1, 0x1f, 0o17 or 0b101",
    ),
}


def _noop():
    return None


class Parser:
    """
    Explicit parsing context.

    Attributes
    - registry: Registry of every option registered on this parser.
    - rest: list of leftover tokens; it only grows across parse_argv calls until
      the caller clears it (reset()) or replaces it.
    - stdin_handler: zero-argument callable run for the lone "-" token; whatever it
      raises propagates unchanged.

    A Parser is not thread-safe; independent parsers share nothing.
    """

    def __init__(self, stdin_handler=Unset):
        self.registry = Registry()
        self.rest = []
        self.stdin_handler = nullify(stdin_handler, _noop)

    def flag(self, short, long, help="", /):
        return self.registry.register(Flag(short, long, help))

    def single_arg(self, short, long, help="", /):
        return self.registry.register(SingleArg(short, long, help))

    def multi_arg(self, short, long, help="", /):
        return self.registry.register(MultiArg(short, long, help))

    def counter(self, short, long, help="", /):
        return self.registry.register(Counter(short, long, help))

    def reset(self):
        """
        drop every collected leftover.
        """
        self.rest.clear()

    def parse_argv(self, tokens, /):
        """
        apply every option found in `tokens` and collect the leftovers into `rest`.

        parameters
        - tokens: Iterable[str] (a bare string is rejected)

        raises
        - UnrecognizedOptionError: unknown "--name" or unknown letter in a cluster.
        - MissingArgumentError: tokens ran out while an option waited for its value.
        - BooleanParseError / NumberParseError: bad "--name=VALUE" literal.
        - whatever stdin_handler raises.
        """
        if isinstance(tokens, str) or not isinstance(tokens, Iterable):
            raise TypeError("parse_argv() argument must be an iterable of strings")
        tokens = deque(tokens)
        if not all(isinstance(token, str) for token in tokens):
            raise TypeError("parse_argv() argument must be an iterable of strings")

        # per-call scan state; stdin_handler may re-enter parse_argv on this parser
        index = 0
        waiting = None

        while tokens:
            token = tokens.popleft()
            index += 1

            if not token:
                continue

            if waiting:
                # the value is taken as-is, even when it looks like an option
                option, _ = waiting
                option.apply_assignment(token)
                waiting = None
                continue

            if len(token) == 1:
                if token == "-":
                    self.stdin_handler()
                else:
                    self.rest.append(token)
            elif token == "--":
                self.rest.extend(tokens)
                return
            elif len(token) == 2 and token[0] in "-+":
                waiting = self._parse_short(token, index)
            elif token.startswith("--"):
                waiting = self._parse_long(token[2:], index)
            elif token[0] in "-+":
                waiting = self._parse_cluster(token, index)
            else:
                self.rest.append(token)

        if waiting:
            option, index = waiting
            raise MissingArgumentError(
                "option %s at %s position expects an argument" % ("/".join(option.names), ordinal(index)),
                code=FaultCode.MISSING_ARGUMENT,
                title="missing argument",
                hint="pass a value after it (for example: --%s <value>) or inline (--%s=<value>)" % (
                    option.long, option.long
                ),
                short=option.short,
                long=option.long,
                index=index,
            )

    def _parse_short(self, token, index):
        # "-x" / "+x"; letters nobody registered are skipped without a fault
        sigil, char = token
        if (option := self.registry.short(char)) is None:
            return
        if sigil == "+":
            option.apply_negate()
        elif option.apply_positive():
            return option, index

    def _parse_long(self, body, index):
        name, equals, literal = body.partition("=")
        option = self.registry.long(name)

        if not equals:
            if option is None:
                raise UnrecognizedOptionError(
                    "unrecognized long option %r at %s position" % (name, ordinal(index)),
                    code=FaultCode.UNRECOGNIZED_OPTION,
                    title="unrecognized option",
                    hint="check the spelling of '--%s' against the registered options" % name,
                    name=name,
                    index=index,
                )
            if option.apply_positive():
                return option, index
            return

        # "--name=VALUE" for an unknown name is skipped without a fault
        if option is not None:
            self._assign(option, literal, index)

    def _parse_cluster(self, token, index):
        sigil = token[0]
        for offset, char in enumerate(token[1:], 1):
            if (option := self.registry.short(char)) is None:
                raise UnrecognizedOptionError(
                    "unrecognized short option %r in %r at %s position" % (char, token, ordinal(index)),
                    code=FaultCode.UNRECOGNIZED_OPTION,
                    title="unrecognized option",
                    hint="letters before %r were already applied; remove or fix it" % char,
                    name=char,
                    index=index,
                )

            if sigil == "+":
                option.apply_negate()
                continue

            if option.valued and (remainder := token[offset + 1:]):
                self._assign(option, remainder, index)
                return
            if option.apply_positive():
                return option, index

    def _assign(self, option, literal, index):
        try:
            option.apply_assignment(literal)
        except ValueError:
            code, title, hint = _LITERAL_FAULTS[option.__fault__]
            raise option.__fault__(
                "unable to parse %r for %s %r at %s position" % (
                    literal, option.__typename__, option.long, ordinal(index)
                ),
                code=code,
                title=title,
                hint=hint,
                literal=literal,
                option=option.long,
                index=index,
            ) from None


default = Parser()
"""
process-wide parser behind the module-level shortcuts.
"""


def new_flag(short, long, help="", /):
    return default.flag(short, long, help)


def new_single_arg(short, long, help="", /):
    return default.single_arg(short, long, help)


def new_multi_arg(short, long, help="", /):
    return default.multi_arg(short, long, help)


def new_counter(short, long, help="", /):
    return default.counter(short, long, help)


def parse_argv(tokens, /):
    return default.parse_argv(tokens)


def rest():
    """
    leftover tokens collected by the process-wide parser (the live list).
    """
    return default.rest


__all__ = (
    "Parser",
    "new_flag",
    "new_single_arg",
    "new_multi_arg",
    "new_counter",
    "parse_argv",
    "rest",
)
