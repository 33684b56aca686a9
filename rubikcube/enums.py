"""Enumerations describing cube faces, turn directions, local axes and colours."""

from enum import IntEnum


class Face(IntEnum):
    """A face of the cube; ``ERROR`` marks an unrecognised face letter."""

    U = 0
    D = 1
    F = 2
    B = 3
    L = 4
    R = 5
    ERROR = 6


class Direction(IntEnum):
    """Direction of a quarter turn, seen from outside the face."""

    ANTI_CLOCK_WISE = -1
    CLOCK_WISE = 1


class LocalCoordinate(IntEnum):
    """Edges of a face in its own frame of reference."""

    TOP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3


class Color(IntEnum):
    """Sticker colours; a solved cube has colour ``n`` on face ``n``."""

    WHITE = 0
    YELLOW = 1
    GREEN = 2
    BLUE = 3
    ORANGE = 4
    RED = 5