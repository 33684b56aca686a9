"""Text representations of faces, colours, local axes and vectors."""

from collections.abc import Mapping, Sequence

from .enums import Color, Face, LocalCoordinate

_FACE_NAMES = {
    Face.U: "U",
    Face.D: "D",
    Face.L: "L",
    Face.R: "R",
    Face.F: "F",
    Face.B: "B",
}

_COLOR_NAMES = {
    Color.WHITE: "W",
    Color.YELLOW: "Y",
    Color.GREEN: "G",
    Color.BLUE: "B",
    Color.RED: "R",
    Color.ORANGE: "O",
}

_LOCAL_NAMES = {
    LocalCoordinate.TOP: "TOP",
    LocalCoordinate.DOWN: "DOWN",
    LocalCoordinate.LEFT: "LEFT",
    LocalCoordinate.RIGHT: "RIGHT",
}


def face_to_str(face: Face) -> str:
    """Return the face letter, or ``"error"`` for an unknown face."""
    return _FACE_NAMES.get(face, "error")


def color_to_str(color: Color) -> str:
    """Return the colour initial, or ``"error"`` for an unknown colour."""
    return _COLOR_NAMES.get(color, "error")


def local_to_str(local: LocalCoordinate) -> str:
    """Return the name of a local axis, or ``"error"`` if unknown."""
    return _LOCAL_NAMES.get(local, "error")


def format_vector(vector: Sequence[int]) -> str:
    """Render a vector as ``[ a, b, c,  ]``."""
    return "[ " + "".join(f"{component}, " for component in vector) + " ]"


def format_local_faces(
    local_coordinates: Mapping[Face, Mapping[LocalCoordinate, Sequence[int]]],
) -> str:
    """Render each face's local axes, faces and axes in enumeration order."""
    lines = []
    for face in sorted(local_coordinates):
        lines.append(f"{face_to_str(face)} : ")
        locals_ = local_coordinates[face]
        for coordinate in sorted(locals_):
            lines.append(f"{local_to_str(coordinate)} : {format_vector(locals_[coordinate])}")
    return "".join(line + "\n" for line in lines)