from collections import Counter

import pytest

from rubikcube.cube import FACES, NORMALS, Cube, find_local_coordinates
from rubikcube.enums import Color, Direction, Face, LocalCoordinate
from rubikcube.rotation import Move
from rubikcube.vectors import dot_product, multiply_vector

ALL_MOVES = [
    Move(face, direction, times)
    for face in FACES
    for direction in Direction
    for times in (1, 2)
]


def test_new_cube_is_solved():
    cube = Cube(3)
    assert cube.is_solved()
    assert len(cube.data) == 6 * 9


def test_new_cube_has_face_colour_on_each_face():
    cube = Cube(3)
    for face in FACES:
        stickers = cube.data[cube.face_start(face) : cube.face_end(face) + 1]
        assert set(stickers) == {Color(int(face))}


def test_face_bounds_cover_data_contiguously():
    cube = Cube(3)
    assert cube.face_start(Face.U) == 0
    for first, second in zip(FACES, FACES[1:]):
        assert cube.face_end(first) + 1 == cube.face_start(second)
    assert cube.face_end(FACES[-1]) == len(cube.data) - 1


def test_find_local_coordinates_is_orthogonal_frame():
    for face in FACES:
        local = find_local_coordinates(face)
        normal = NORMALS[face]
        assert local[LocalCoordinate.LEFT] == multiply_vector(local[LocalCoordinate.RIGHT], -1)
        assert local[LocalCoordinate.DOWN] == multiply_vector(local[LocalCoordinate.TOP], -1)
        assert dot_product(normal, local[LocalCoordinate.RIGHT]) == 0
        assert dot_product(normal, local[LocalCoordinate.TOP]) == 0
        assert dot_product(local[LocalCoordinate.TOP], local[LocalCoordinate.RIGHT]) == 0


def test_find_local_coordinates_rejects_error_face():
    with pytest.raises(ValueError):
        find_local_coordinates(Face.ERROR)


@pytest.mark.parametrize("face", FACES)
def test_face_edges_lie_on_other_faces(face):
    cube = Cube(3)
    edges = cube.face_edges(face)
    assert len(edges) == 4
    own = range(cube.face_start(face), cube.face_end(face) + 1)
    for edge in edges:
        assert len(edge) == 3
        assert not set(edge) & set(own)
    flattened = [index for edge in edges for index in edge]
    assert len(set(flattened)) == 12


def test_encode_rotation_lists_face_stickers():
    cube = Cube(3)
    move = Move(Face.R, Direction.CLOCK_WISE, 1)
    rotation = cube.encode_rotation(move)
    assert rotation.face_indices == list(range(cube.face_start(Face.R), cube.face_end(Face.R) + 1))
    assert rotation.edges_indices == cube.face_edges(Face.R)


@pytest.mark.parametrize("move", ALL_MOVES)
def test_single_move_scrambles_and_keeps_colour_counts(move):
    cube = Cube(3)
    cube.apply_move(move)
    assert not cube.is_solved()
    assert Counter(cube.data) == Counter(Cube(3).data)


@pytest.mark.parametrize("face", FACES)
def test_four_quarter_turns_restore(face):
    cube = Cube(3)
    cube.apply_moves([Move(face, Direction.CLOCK_WISE, 1)] * 4)
    assert cube == Cube(3)


@pytest.mark.parametrize("face", FACES)
def test_move_then_inverse_restores(face):
    cube = Cube(3)
    cube.apply_moves(
        [
            Move(Face.U, Direction.CLOCK_WISE, 1),
            Move(face, Direction.CLOCK_WISE, 1),
            Move(face, Direction.ANTI_CLOCK_WISE, 1),
            Move(Face.U, Direction.ANTI_CLOCK_WISE, 1),
        ]
    )
    assert cube.is_solved()


def test_double_move_equals_two_single_moves():
    twice = Cube(3)
    twice.apply_move(Move(Face.F, Direction.CLOCK_WISE, 2))
    singles = Cube(3)
    singles.apply_moves([Move(Face.F, Direction.CLOCK_WISE, 1)] * 2)
    assert twice == singles


def test_apply_moves_matches_sequential_apply_move():
    moves = [Move(Face.R, Direction.CLOCK_WISE, 1), Move(Face.U, Direction.ANTI_CLOCK_WISE, 2)]
    batch = Cube(3)
    batch.apply_moves(moves)
    step = Cube(3)
    for move in moves:
        step.apply_move(move)
    assert batch == step


def test_move_on_error_face_raises():
    cube = Cube(3)
    with pytest.raises(ValueError):
        cube.apply_move(Move(Face.ERROR, Direction.CLOCK_WISE, 1))


def test_negative_order_rejected():
    with pytest.raises(ValueError):
        Cube(-1)


def test_copy_is_independent():
    cube = Cube(3)
    duplicate = cube.copy()
    assert duplicate == cube
    cube.apply_move(Move(Face.L, Direction.CLOCK_WISE, 1))
    assert duplicate.is_solved()
    assert duplicate != cube


def test_format_face_of_solved_up_face():
    cube = Cube(3)
    assert cube.format_face(Face.U) == "U :\n\nW W W \nW W W \nW W W \n"


def test_format_joins_every_face():
    cube = Cube(3)
    cube.apply_move(Move(Face.B, Direction.CLOCK_WISE, 1))
    text = cube.format()
    assert text == "".join(cube.format_face(face) for face in FACES)
    assert str(cube) == text


def test_empty_cube_is_solved_and_has_no_data():
    cube = Cube(0)
    assert cube.data == ()
    assert cube.is_solved()
    assert cube.order == 0