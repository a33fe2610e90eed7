"""
gargs parsing pipeline: argument vector → {flag: value, "_": [positionals]}.

Stages
- sanitize(): trims tokens, splits "--key=value" in two, resolves short option
  bundles ("-abc") straight into the mapping, and diverts everything after a bare
  "--" into an already-coerced escaped list.
- assemble(): walks the sanitized tokens, pairs each "--flag" with its value (or
  "true"), applies the "--no-flag" negation, merges repeated flags and collects
  positionals.
- parse(): runs both stages behind a single fault boundary.

Quick start
    >>> parse(["a", "--x", "1", "-yz", "--no-flag"])
    {'_': ['a'], 'y': True, 'z': True, 'x': 1.0, 'flag': False}
    >>> parse(["--x=1", "--x=2", "--x=3"])
    {'_': [], 'x': [[1.0, 2.0], 3.0]}
    >>> parse(["a", "--", "b", "--c"])
    {'_': ['a', 'b', '--c']}

Repeated flags
- a flag already holding a non-boolean value is wrapped together with the new one
  into a pair, so a third occurrence nests: [[first, second], third]. a stored
  boolean (a bare flag or an option bundle) is simply overwritten.
- assemble(..., flatten=True) grows a single flat list instead.
"""
import logging
import sys
from collections.abc import Iterable

from .coercion import coerce
from .faults import FaultCode, ParseFault
from .utils import Unset, coalesce

logger = logging.getLogger(__name__)

ESCAPE = "--"
FLAG_PREFIX = "--"
OPTION_PREFIX = "-"
NEGATION_PREFIX = "no-"
POSITIONALS = "_"


def sanitize(args, parsed, /):
    """
    normalize the raw argument vector.

    parameters
    - args: list[str], the raw tokens.
    - parsed: dict, the mapping under construction; option bundles are written into it.

    returns
    - (tokens, escaped): the flat token stream for assemble(), and the coerced
      values found after the escape marker.
    """
    escaping = False
    escaped = []
    tokens = []

    for index, token in enumerate(args):
        value = token.strip(" ")

        if value == ESCAPE:
            logger.debug("escape marker at position %d", index)
            escaping = True
            continue

        if escaping:
            escaped.append(coerce(value))
        elif value.startswith(FLAG_PREFIX):
            # --key=value → --key, value
            tokens.extend(value.split("=", 1))
        elif value.startswith(OPTION_PREFIX):
            # -abc → a, b, c (presence only, never a value)
            for option in value.replace(OPTION_PREFIX, "", 1):
                parsed[option] = True
        else:
            tokens.append(token)

    return tokens, escaped


def _merge(previous, value, flatten):
    if flatten and isinstance(previous, list):
        return previous + [value]
    return [previous, value]


def assemble(tokens, escaped, parsed, /, *, flatten=False):
    """
    pair flags with values and collect positionals into parsed["_"].

    rules
    - a token without the "--" prefix is a positional (coerced).
    - "--key" takes the next token as its value; with no next token, or when the
      next token is a flag itself (left unconsumed), the value is "true".
    - "--no-key" resolving to "true" becomes key = "false".
    - merge: new key or stored boolean → overwrite; otherwise → [previous, new].
    - parsed["_"] = positionals + escaped, in that order.
    """
    positionals = []
    index = 0

    while index < len(tokens):
        current = tokens[index]
        index += 1

        if not current.startswith(FLAG_PREFIX):
            positionals.append(coerce(current))
            continue

        key = current.replace(FLAG_PREFIX, "", 1)

        if index == len(tokens) or tokens[index].startswith(FLAG_PREFIX):
            value = "true"
        else:
            value = tokens[index]
            index += 1

        if key.startswith(NEGATION_PREFIX) and value == "true":
            key = key.replace(NEGATION_PREFIX, "", 1)
            value = "false"

        if key not in parsed or isinstance(parsed[key], bool):
            parsed[key] = coerce(value)
        else:
            parsed[key] = _merge(parsed[key], coerce(value), flatten)

    parsed[POSITIONALS] = positionals + escaped
    return parsed


def _prompt(args):
    # Default: parse the live process arguments
    args = coalesce(args, sys.argv[1:])
    if isinstance(args, str) or not isinstance(args, Iterable):
        raise ParseFault(
            "parse() argument must be an iterable of strings, not %r" % type(args).__name__,
            title="invalid prompt",
            code=FaultCode.INVALID_PROMPT,
            hint="pass a list of tokens, e.g. shlex.split(line), instead of a single string"
        )
    tokens = list(args)
    for position, token in enumerate(tokens):
        if not isinstance(token, str):
            raise ParseFault(
                "token at position %d must be a string, not %r" % (position, type(token).__name__),
                title="invalid prompt",
                code=FaultCode.INVALID_PROMPT,
                hint="convert every token with str() before parsing"
            )
    return tokens


def parse(args=Unset, /, *, flatten=False):
    """
    parse an argument vector into a mapping of flags plus the "_" positionals.

    parameters
    - args: Unset | Iterable[str]
      • Unset (default): sys.argv[1:].
      • any iterable of strings (a lone str is rejected).
    - flatten: bool (keyword-only)
      grow repeated flags into one flat list instead of nesting pairs.

    returns
    - dict[str, Arg]: always holds "_" (a list, possibly empty).

    raises
    - ParseFault: the only error surfaced. any failure inside the pipeline is
      converted into one, chained to its cause; no partial mapping is returned.
    """
    try:
        tokens = _prompt(args)
        logger.debug("parsing %d argument(s)", len(tokens))
        parsed = {POSITIONALS: []}
        sanitized, escaped = sanitize(tokens, parsed)
        result = assemble(sanitized, escaped, parsed, flatten=flatten)
    except ParseFault:
        raise
    except Exception as exception:
        logger.exception("unexpected fault while parsing")
        raise ParseFault(
            "unexpected fault while parsing: %s" % exception,
            title="parse fault",
            code=FaultCode.PARSE_FAULT,
            hint="this is a bug in gargs; please report it with the arguments used",
        ) from exception

    logger.debug("parsed keys: %s", sorted(result))
    return result


def parseargs(*, flatten=False):
    """
    parse the live process arguments (sys.argv[1:]); shorthand for parse().
    """
    return parse(Unset, flatten=flatten)


__all__ = (
    "parse",
    "parseargs",
    "sanitize",
    "assemble",
)
