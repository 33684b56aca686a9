import pytest

from rubikcube.enums import Color, Direction, Face, LocalCoordinate


def test_face_order_matches_layout():
    assert [Face(i).name for i in range(7)] == ["U", "D", "F", "B", "L", "R", "ERROR"]
    assert Face["ERROR"] is Face(6)


def test_direction_values_are_signed_steps():
    assert Direction(1) is Direction.CLOCK_WISE
    assert Direction(-1) is Direction.ANTI_CLOCK_WISE
    assert Direction(1) + Direction(-1) == 0


def test_local_coordinates_go_round_the_face():
    assert [LocalCoordinate(i).name for i in range(4)] == ["TOP", "RIGHT", "DOWN", "LEFT"]
    with pytest.raises(ValueError):
        LocalCoordinate(4)


@pytest.mark.parametrize("face", [f for f in Face if f is not Face.ERROR])
def test_each_real_face_has_a_colour(face):
    assert Color(int(face)).value == face.value


def test_error_face_has_no_colour():
    with pytest.raises(ValueError):
        Color(int(Face.ERROR))