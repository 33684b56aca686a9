"""Moves and the index permutations that a face turn applies."""

from dataclasses import dataclass, field

from .enums import Direction, Face


@dataclass(frozen=True)
class Move:
    """One move in standard notation: a face, a direction and a repeat count."""

    face: Face
    direction: Direction
    times: int


def _face_rotation_index(direction: Direction, cube_order: int, i: int) -> int:
    row, col = divmod(i, cube_order)
    if direction == Direction.CLOCK_WISE:
        new_row, new_col = col, cube_order - 1 - row
    else:
        new_row, new_col = cube_order - 1 - col, row
    return new_row * cube_order + new_col


@dataclass
class Rotation:
    """Sticker indices of a face and of the four edge strips around it."""

    face_indices: list[int] = field(default_factory=list)
    edges_indices: list[list[int]] = field(default_factory=list)

    def rotate(self, direction: Direction, cube_order: int) -> "Rotation":
        """Return the arrangement of indices after a quarter turn."""
        if not self.face_indices or len(self.edges_indices) < 4:
            raise ValueError(
                "Invalid states in either rotation.face_indices or rotation.edges_indices"
            )
        if len(self.face_indices) != cube_order * cube_order:
            raise ValueError("The face indices do not match the cube order")

        faces: list[int] = [0] * len(self.face_indices)
        for i, index in enumerate(self.face_indices):
            faces[_face_rotation_index(direction, cube_order, i)] = index

        edges: list[list[int]] = [[] for _ in range(4)]
        for i, edge in enumerate(self.edges_indices):
            edges[(i + int(direction)) % 4] = list(edge)

        return Rotation(faces, edges)