"""A cube of stickers that can be turned face by face."""

from collections.abc import Iterable

from .enums import Color, Face, LocalCoordinate
from .printing import color_to_str, face_to_str
from .rotation import Move, Rotation
from .vectors import add_to_vector, cross_product3, dot_product, multiply_vector

NORMALS: dict[Face, tuple[int, int, int]] = {
    Face.U: (0, 1, 0),
    Face.D: (0, -1, 0),
    Face.R: (1, 0, 0),
    Face.L: (-1, 0, 0),
    Face.F: (0, 0, 1),
    Face.B: (0, 0, -1),
}

_RELATED_FACES: dict[Face, tuple[Face, ...]] = {
    Face.F: (Face.U, Face.R, Face.D, Face.L),
    Face.B: (Face.U, Face.L, Face.D, Face.R),
    Face.U: (Face.B, Face.R, Face.F, Face.L),
    Face.D: (Face.F, Face.R, Face.B, Face.L),
    Face.R: (Face.U, Face.B, Face.D, Face.F),
    Face.L: (Face.U, Face.F, Face.D, Face.B),
}

FACES: tuple[Face, ...] = tuple(face for face in Face if face is not Face.ERROR)

_VERTICAL = ((0, 1, 0), (0, -1, 0))


def find_local_coordinates(face: Face) -> dict[LocalCoordinate, tuple[int, ...]]:
    """Return the outward directions of the four edges of ``face`` in world space."""
    try:
        normal = NORMALS[face]
    except KeyError:
        raise ValueError(f"No normal is defined for face {face!r}") from None
    reference = (1, 0, 0) if normal in _VERTICAL else (0, 1, 0)
    right = cross_product3(normal, reference)
    top = cross_product3(normal, right)
    return {
        LocalCoordinate.TOP: top,
        LocalCoordinate.RIGHT: right,
        LocalCoordinate.DOWN: multiply_vector(top, -1),
        LocalCoordinate.LEFT: multiply_vector(right, -1),
    }


def _local_indices(order: int) -> dict[LocalCoordinate, tuple[int, ...]]:
    """Sticker offsets, within one face, of the strip along each edge."""
    if order == 0:
        return {coordinate: () for coordinate in LocalCoordinate}
    last = order * order
    return {
        LocalCoordinate.TOP: tuple(range(order)),
        LocalCoordinate.RIGHT: tuple(range(order - 1, last, order)),
        LocalCoordinate.DOWN: tuple(range(last - order, last)),
        LocalCoordinate.LEFT: tuple(range(0, last, order)),
    }


class Cube:
    """Six faces of ``order`` by ``order`` stickers, stored face after face."""

    def __init__(self, order: int) -> None:
        if order < 0:
            raise ValueError("The cube order cannot be negative.")
        self._order = order
        self._data: list[Color] = [
            Color(int(face)) for face in FACES for _ in range(order * order)
        ]
        self._local_coordinates = {face: find_local_coordinates(face) for face in FACES}
        self._local_indices = _local_indices(order)

    @property
    def order(self) -> int:
        """Number of stickers along one edge of a face."""
        return self._order

    @property
    def data(self) -> tuple[Color, ...]:
        """All sticker colours, face after face in ``Face`` order."""
        return tuple(self._data)

    def face_start(self, face: Face) -> int:
        """Index of the first sticker of ``face``."""
        return int(face) * self._order * self._order

    def face_end(self, face: Face) -> int:
        """Index of the last sticker of ``face``."""
        return self.face_start(face) + self._order * self._order - 1

    def face_edges(self, face: Face) -> list[list[int]]:
        """Sticker indices of the strips on the neighbouring faces that touch ``face``."""
        normal = NORMALS.get(face)
        if normal is None:
            return []
        edges = []
        for related in _RELATED_FACES[face]:
            for key, direction in self._local_coordinates[related].items():
                if dot_product(normal, direction) == 1:
                    edges.append(
                        list(add_to_vector(self._local_indices[key], self.face_start(related)))
                    )
                    break
        return edges

    def encode_rotation(self, move: Move) -> Rotation:
        """Describe the stickers that a turn of ``move.face`` moves."""
        face_indices = list(range(self.face_start(move.face), self.face_end(move.face) + 1))
        return Rotation(face_indices, self.face_edges(move.face))

    def apply_move(self, move: Move) -> None:
        """Turn one face as many times as the move says."""
        for _ in range(move.times):
            original = self.encode_rotation(move)
            turned = original.rotate(move.direction, self._order)
            snapshot = list(self._data)
            for old, new in zip(original.face_indices, turned.face_indices):
                self._data[old] = snapshot[new]
            for old_edge, new_edge in zip(original.edges_indices, turned.edges_indices):
                for old, new in zip(old_edge, new_edge):
                    self._data[old] = snapshot[new]

    def apply_moves(self, moves: Iterable[Move]) -> None:
        """Apply the moves in order."""
        for move in moves:
            self.apply_move(move)

    def is_solved(self) -> bool:
        """True when every face shows a single colour."""
        return all(
            len(set(self._data[self.face_start(face) : self.face_end(face) + 1])) <= 1
            for face in FACES
        )

    def format_face(self, face: Face) -> str:
        """Render one face as its letter followed by rows of colour initials."""
        stickers = self._data[self.face_start(face) : self.face_end(face) + 1]
        width = max(self._order, 1)
        rows = [stickers[start : start + width] for start in range(0, len(stickers), width)]
        body = "".join(
            "\n" + "".join(f"{color_to_str(color)} " for color in row) for row in rows
        )
        return f"{face_to_str(face)} :\n{body}\n"

    def format(self) -> str:
        """Render all six faces."""
        return "".join(self.format_face(face) for face in FACES)

    def copy(self) -> "Cube":
        """Return an independent cube with the same stickers."""
        duplicate = Cube(self._order)
        duplicate._data = list(self._data)
        return duplicate

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cube):
            return NotImplemented
        return self._order == other._order and self._data == other._data

    def __repr__(self) -> str:
        return f"Cube(order={self._order})"

    def __str__(self) -> str:
        return self.format()