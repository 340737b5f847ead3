r"""
sigilopt option descriptors.

Overview
- Kinds
  • Flag: presence-only switch; true when passed, false when negated.
  • SingleArg: holds one string value, overwritten on each occurrence.
  • MultiArg: holds an ordered list of string values, appended on each occurrence.
  • Counter: holds an integer, bumped per occurrence or set directly.

- Capability
  Every kind answers the same three calls, so the parser never switches on type:
  • apply_positive(): bare "-x" / "--long". Returns True when the option now
    waits for a value in the next token (SingleArg, MultiArg).
  • apply_negate(): "+x". Resets or decrements.
  • apply_assignment(literal): "--long=VALUE" or the attached "-xVALUE" form.
    Raises ValueError when the literal cannot be coerced; the parser reports it
    with the fault class named by __fault__.

- Identity (sanitized on construction)
  • short: one character, not a sigil ('-', '+') nor '='.
  • long: non-empty word without '=' that does not start with '-'.
  • help: free text shown in help output.

Descriptors are mutated in place by every matching parse call and never destroyed.
"""
import functools
import operator
import re

from .coercion import to_bool, to_int
from .faults import BooleanParseError, NumberParseError
from .utils import rename


class OptionType(type):
    """
    Metaclass giving every descriptor kind a stable repr and a rich repr.

    Conventions
    - __typename__ is derived from the class name (camel-case split with hyphens),
      e.g. SingleArg -> "single-arg", and is used in messages and help output.
    - __introspectable__ lists the fields shown by __repr__/__rich_repr__.
    """
    __introspectable__ = ()

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {"__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower()},
        )

        @rename("__repr__")
        def __repr__(self):
            return "%s(%s)" % (
                type(self).__typename__,
                ", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__())),
            )
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            for name in type(self).__introspectable__:
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        return self


def _sanitize_identity(cls, short, long, help, /):
    """
    Internal: validate the (short, long, help) triple shared by all kinds.

    Raises
    - TypeError: when any field is not a string.
    - ValueError: when short is not a single usable character, or long is
      empty, contains '=' or starts with '-'.
    """
    if not isinstance(short, str):
        raise TypeError(f"{cls.__typename__} short name must be a string")
    elif len(short) != 1:
        raise ValueError(f"{cls.__typename__} short name must be a single character")
    elif short in "-+=":
        raise ValueError(f"{cls.__typename__} short name cannot be {short!r}")

    if not isinstance(long, str):
        raise TypeError(f"{cls.__typename__} long name must be a string")
    elif not long:
        raise ValueError(f"{cls.__typename__} long name cannot be empty")
    elif "=" in long or long.startswith("-"):
        raise ValueError(f"{cls.__typename__} long name cannot contain '=' or start with '-'")

    if not isinstance(help, str):
        raise TypeError(f"{cls.__typename__} help must be a string")


class Option(metaclass=OptionType):
    """
    Base descriptor: identity plus the three-call effect capability.

    Subclasses set `valued` (whether the bare form waits for a value) and
    `__fault__` (the fault raised by the parser when apply_assignment fails).
    """
    __slots__ = ("short", "long", "help")

    valued = False
    __fault__ = None
    # value placeholder shown in help output
    __metavar__ = ""

    def __init__(self, short, long, help="", /):
        _sanitize_identity(type(self), short, long, help)
        self.short = short
        self.long = long
        self.help = help

    @property
    def names(self):
        """
        the user-facing spellings, e.g. ("-v", "--verbose").
        """
        return "-" + self.short, "--" + self.long

    def apply_positive(self):
        raise NotImplementedError

    def apply_negate(self):
        raise NotImplementedError

    def apply_assignment(self, literal, /):
        raise NotImplementedError


class Flag(Option):
    """
    Boolean option. "-f"/"--force" set it, "+f" clears it, and
    "--force=true"/"--force=F" assign it from a boolean literal.
    """
    __slots__ = ("passed",)
    __introspectable__ = ("short", "long", "help", "passed")
    __fault__ = BooleanParseError

    def __init__(self, short, long, help="", /):
        super().__init__(short, long, help)
        self.passed = False

    def apply_positive(self):
        self.passed = True
        return False

    def apply_negate(self):
        self.passed = False

    def apply_assignment(self, literal, /):
        self.passed = to_bool(literal)


class SingleArg(Option):
    """
    Option taking one argument; later occurrences overwrite earlier ones.
    "--file=a.txt", "--file a.txt", "-fa.txt" and "-f a.txt" all set value to "a.txt".
    """
    __slots__ = ("value",)
    __introspectable__ = ("short", "long", "help", "value")

    valued = True
    __metavar__ = "VALUE"

    def __init__(self, short, long, help="", /):
        super().__init__(short, long, help)
        self.value = ""

    def apply_positive(self):
        return True

    def apply_negate(self):
        self.value = ""

    def apply_assignment(self, literal, /):
        self.value = literal


class MultiArg(Option):
    """
    Option collecting every argument it is given, in encounter order.
    "+x" drops everything collected so far.
    """
    __slots__ = ("values",)
    __introspectable__ = ("short", "long", "help", "values")

    valued = True
    __metavar__ = "VALUE..."

    def __init__(self, short, long, help="", /):
        super().__init__(short, long, help)
        self.values = []

    def apply_positive(self):
        return True

    def apply_negate(self):
        self.values = []

    def apply_assignment(self, literal, /):
        self.values.append(literal)


class Counter(Option):
    """
    Occurrence counter: "-vvv", "--verbose --verbose --verbose" and "--verbose=3"
    all leave count at 3. Each "+v" takes one away.
    """
    __slots__ = ("count",)
    __introspectable__ = ("short", "long", "help", "count")
    __fault__ = NumberParseError
    __metavar__ = "[=N]"

    def __init__(self, short, long, help="", /):
        super().__init__(short, long, help)
        self.count = 0

    def apply_positive(self):
        self.count += 1
        return False

    def apply_negate(self):
        self.count -= 1

    def apply_assignment(self, literal, /):
        self.count = to_int(literal)


__all__ = (
    "Option",
    "Flag",
    "SingleArg",
    "MultiArg",
    "Counter",
)
