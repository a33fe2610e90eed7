"""
gargs faults and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for the faults the parser can
  surface. Malformed user input is never a fault (coercion absorbs it); faults
  only come from an unusable prompt or an unexpected internal failure.
- ParseFault: the single fault category. Carries a message plus read-only options
  and knows how to render itself with rich.
- trigger(): central entry point to surface a fault (raise it, or print it and
  exit when running as a shell tool).

Host hooks (read from __main__ when present)
- __prog__: program name shown in the header.
- __styles__: mapping overriding the default rich styles below.
- __codes__: mapping from FaultCode to a custom label.
"""
import copy
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
    canonical fault codes (stable identifiers).

    grouping
    - parsing (112xx)
      • PARSE_FAULT: unexpected failure inside the parse pipeline.
      • INVALID_PROMPT: the argument vector is not an iterable of strings.
    """
    PARSE_FAULT    = 11201
    INVALID_PROMPT = 11202

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


_DEFAULTS = {
    "title": "parse fault",
    "code": FaultCode.PARSE_FAULT,
    "hint": "",
    "shell": False,
    "fancy": False,
    "colorful": True,
}


class ParseFault(Exception):
    """
    the parser's single fault category.

    options
    - title, code, hint: copy shown by the renderer.
    - shell, fancy, colorful: runtime rendering options (see trigger()).
    """

    def __init__(self, message, /, **options):
        assert isinstance(message, str)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(_DEFAULTS | options)

    @property
    def code(self):
        return self.options["code"]

    @property
    def hint(self):
        return self.options["hint"]

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

        def styler(style):
            return styles[style] if self.options["colorful"] else ""

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not self.options["colorful"]:
                return Text(str(fragment))
            return Text(str(fragment), style)

        prog = text(getattr(main, "__prog__", "gargs"), styler("prog-name"))

        header = Text.assemble(
            "[ ",
            prog,
            " — ",
            text(self.options["code"].normalize(), styler("code")),
            " | ",
            text(self.options["title"].title(), styler("error-title")),
            " ]"
        )
        message = text(self.message, styler("error-message"))
        renders = [message]
        if self.options["hint"]:
            renders.append(Text.assemble(text(" → ", styler("hint-arrow")), text(self.options["hint"], styler("hint"))))

        if self.options["fancy"]:
            return Panel(Group(*renders), title=header, title_align="left")

        return Group(header, *renders)

    def __trigger__(self) -> None:
        if not self.options["shell"]:
            raise self
        console.print(self)
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        fault = type(self)(self.message, **{**self.options, **overrides})
        fault.__cause__ = self.__cause__
        return fault


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see ParseFault).
    - options are merged into the fault via copy.replace(fault, **options) before triggering.
    - in shell mode, the fault is printed to stderr and the process exits with 1;
      otherwise, the fault is raised.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    copy.replace(fault, **options).__trigger__()


__all__ = (
    "FaultCode",
    "ParseFault",
    "trigger",
)
