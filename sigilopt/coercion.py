"""
Literal coercion used by the assignment forms (--name=VALUE, -xVALUE).

- to_bool(text): "t", "true", "f", "false" in any letter case.
- to_int(text): integer literal with its base detected from the prefix
  (0x, 0o, 0b, or a bare leading zero for octal), bounded to a signed 32-bit range.

Both raise ValueError on bad input; the parser turns that into the matching fault.
"""
import re

_TRUTHS = {"t": True, "true": True, "f": False, "false": False}

INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1


def to_bool(text, /):
    if not isinstance(text, str):
        raise TypeError("to_bool() argument must be a string")
    try:
        return _TRUTHS[text.lower()]
    except KeyError:
        raise ValueError("unable to parse %r as a boolean" % text) from None


def to_int(text, /):
    """
    convert an integer literal, detecting the base from its prefix.

    accepted
    - decimal:      "42", "-7", "+3", "1_000"
    - hexadecimal:  "0x2A", "0X2a"
    - octal:        "0o52", and the legacy "052" form
    - binary:       "0b101010"

    rejected (ValueError)
    - anything int(..., 0) rejects, surrounding whitespace included.
    - non-ASCII digits, which int() would otherwise accept.
    - values outside the signed 32-bit range.
    """
    if not isinstance(text, str):
        raise TypeError("to_int() argument must be a string")
    if not text or not text.isascii() or text != text.strip():
        raise ValueError("invalid integer literal %r" % text)

    # int(..., 0) refuses "052"; read it as octal instead.
    if match := re.fullmatch(r"([+-]?)0(_?[0-7][0-7_]*)", text):
        literal = "%s0o%s" % (match[1], match[2])
    else:
        literal = text

    try:
        number = int(literal, 0)
    except ValueError:
        raise ValueError("invalid integer literal %r" % text) from None

    if not INT_MIN <= number <= INT_MAX:
        raise ValueError("integer literal %r is out of range" % text)
    return number


__all__ = (
    "to_bool",
    "to_int",
)
