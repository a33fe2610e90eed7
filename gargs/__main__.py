"""
gargs console entry point.

Parses its own arguments and pretty-prints the resulting mapping:

    $ python -m gargs a b --x 1 -yz --no-flag -- --raw
    {'_': ['a', 'b', '--raw'], 'y': True, 'z': True, 'x': 1.0, 'flag': False}

Faults are rendered to stderr and exit with status 1.
"""
import logging
import sys

from rich.logging import RichHandler
from rich.pretty import pprint

from .faults import ParseFault, console, trigger
from .parsing import parseargs


def main():
    logging.basicConfig(
        level=logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)]
    )
    try:
        parsed = parseargs()
    except ParseFault as fault:
        trigger(fault, shell=True, fancy=True, colorful=console.is_terminal)
    else:
        pprint(parsed, expand_all=False)


if __name__ == '__main__':
    sys.exit(main())
