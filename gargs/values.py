"""
gargs coerced values (the sum type carried by a parsed mapping).

A parsed mapping stores native Python objects, each one a variant of:

    Arg = float | int | bool | str | list[Arg]

- float   → any numeric literal (integers included: "1" becomes 1.0).
- int     → an unsigned 32-bit integer written as "0x<hex digits>".
- bool    → a boolean literal ("true", "F", ...) or a presence-only flag.
- str     → anything else, unchanged.
- list    → a flag given more than once (see parsing.assemble for the nesting rule).

ArgKind names the variant and kindof() discriminates a value. render() gives the
canonical spelling of a value, the one coerce() maps back onto the same value.
"""
import math
from enum import IntEnum


class ArgKind(IntEnum):
    """
    discriminant of a coerced value.

    ordering follows the coercion priority (float first, string last); LIST only
    appears for repeated flags.
    """
    FLOAT   = 1
    HEX     = 2
    BOOLEAN = 3
    STRING  = 4
    LIST    = 5


def kindof(value, /):
    """
    return the ArgKind of a coerced value.

    bool is tested before int since bool subclasses int.
    raises TypeError for objects outside the union.
    """
    if isinstance(value, bool):
        return ArgKind.BOOLEAN
    if isinstance(value, float):
        return ArgKind.FLOAT
    if isinstance(value, int):
        return ArgKind.HEX
    if isinstance(value, str):
        return ArgKind.STRING
    if isinstance(value, list):
        return ArgKind.LIST
    raise TypeError("kindof() argument must be a coerced value, not %r" % type(value).__name__)


def render(value, /):
    """
    canonical string form of a coerced value.

    examples
    - render(1.0)       -> "1.0"
    - render(26)        -> "0x1a"
    - render(True)      -> "true"
    - render("x")       -> "x"
    - render([1.0, 26]) -> "[1.0, 0x1a]"
    """
    match kindof(value):
        case ArgKind.FLOAT:
            if math.isnan(value):
                return "nan"
            return repr(value)
        case ArgKind.HEX:
            return "0x%x" % value
        case ArgKind.BOOLEAN:
            return "true" if value else "false"
        case ArgKind.STRING:
            return value
        case ArgKind.LIST:
            return "[" + ", ".join(map(render, value)) + "]"


__all__ = (
    "ArgKind",
    "kindof",
    "render",
)
