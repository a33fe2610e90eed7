r"""
gargs value coercion.

coerce() turns one raw token into a typed value, trying each parser in a fixed
priority order and keeping the first that accepts the token:

    1. parse_float  → float   ("1", "-2.5e3", "1_000", ".5", "Inf", "nan", "0x1p-2")
    2. parse_hex    → int     ("0x1A" → 26, unsigned, at most 0xFFFFFFFF)
    3. parse_bool   → bool    ("true", "F", "TRUE", ...)
    4. the token itself, unchanged (str)

Since floats are tried first, "10" is 10.0 and never a hex or a boolean, while
"0x1A" has no binary exponent, is rejected as a float and lands on the hex rule.

Each parser raises ValueError on rejection; coerce() itself never raises for a
string input.
"""
import math
import re

# decimal mantissa with an optional exponent; no whitespace
_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
# hexadecimal float literal, binary exponent mandatory
_HEXFLOAT = re.compile(r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?\d+", re.ASCII)
# only infinities take a sign
_SPECIAL = re.compile(r"[+-]?(?:inf|infinity)|nan", re.IGNORECASE)
_HEXDIGITS = re.compile(r"[0-9a-fA-F]+")

_UINT32_MAX = 0xFFFFFFFF

_BOOLEANS = {
    "1": True, "t": True, "T": True, "TRUE": True, "true": True, "True": True,
    "0": False, "f": False, "F": False, "FALSE": False, "false": False, "False": False,
}


def _separators(value):
    """
    tell whether every "_" in a numeric literal separates two digits.

    a "0x"/"0X" prefix counts as a digit, so "0x_1p0" is fine while "_1", "1_",
    "1__0" and "1_.5" are not. hex letters are digits only after the prefix.
    """
    if value[:1] in ("+", "-"):
        value = value[1:]

    digits = "0123456789"
    index = 0
    previous = "^"  # start of literal
    if value[:2] in ("0x", "0X"):
        digits += "abcdefABCDEF"
        index = 2
        previous = "0"

    for char in value[index:]:
        if char in digits:
            previous = "0"
        elif char == "_":
            if previous != "0":
                return False
            previous = "_"
        else:
            if previous == "_":
                return False
            previous = "!"
    return previous != "_"


def parse_float(value, /):
    """
    parse a 64-bit floating-point literal.

    digit separators ("1_000", "0x1_0p0") are accepted where they sit between
    digits. finite literals too large for a double are rejected (ValueError)
    rather than silently becoming infinity; only a spelled-out "inf"/"infinity"
    yields one.
    """
    literal = value
    if "_" in value:
        if not _separators(value):
            raise ValueError("misplaced digit separator in float literal: %r" % value)
        literal = value.replace("_", "")

    if _SPECIAL.fullmatch(literal):
        return float(literal)
    if _DECIMAL.fullmatch(literal):
        result = float(literal)
        if math.isinf(result):
            raise ValueError("float literal out of range: %r" % value)
        return result
    if _HEXFLOAT.fullmatch(literal):
        try:
            return float.fromhex(literal)
        except OverflowError:
            raise ValueError("float literal out of range: %r" % value) from None
    raise ValueError("invalid float literal: %r" % value)


def parse_hex(value, /):
    """
    parse a "0x"-prefixed unsigned 32-bit integer (lowercase prefix only).
    """
    if not value.startswith("0x"):
        raise ValueError("hex literal must start with '0x': %r" % value)
    digits = value.replace("0x", "", 1)
    if not _HEXDIGITS.fullmatch(digits):
        raise ValueError("invalid hex literal: %r" % value)
    result = int(digits, 16)
    if result > _UINT32_MAX:
        raise ValueError("hex literal out of range: %r" % value)
    return result


def parse_bool(value, /):
    try:
        return _BOOLEANS[value]
    except KeyError:
        raise ValueError("invalid boolean literal: %r" % value) from None


_PARSERS = (parse_float, parse_hex, parse_bool)


def coerce(value, /):
    """
    coerce a raw token into float, int (hex), bool or str, in that priority.

    examples
    - coerce("3.14")  -> 3.14
    - coerce("0x1A")  -> 26
    - coerce("true")  -> True
    - coerce("--c")   -> "--c"
    """
    if not isinstance(value, str):
        raise TypeError("coerce() argument must be a string, not %r" % type(value).__name__)
    for parser in _PARSERS:
        try:
            return parser(value)
        except ValueError:
            continue
    return value


__all__ = (
    "coerce",
    "parse_float",
    "parse_hex",
    "parse_bool",
)
