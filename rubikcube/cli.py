"""Command line entry point: apply a move sequence to a solved cube."""

import sys

from .cube import Cube
from .parser import ParseError, Parser


def main(argv: list[str] | None = None) -> int:
    """Parse the single sequence argument and show the cube around every move."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("You must provide a sequence.")
        return 1

    try:
        parser = Parser(args[0])
    except ParseError as error:
        print(error, file=sys.stderr)
        return 1

    cube = Cube(3)
    for move in parser.moves:
        print(">---------1--------<")
        print(cube.format(), end="")
        cube.apply_move(move)
        print(">---------2--------<")
        print(cube.format(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())