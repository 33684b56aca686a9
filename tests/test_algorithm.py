import pytest

from rubikcube.algorithm import Algorithm
from rubikcube.cube import Cube
from rubikcube.enums import Direction, Face
from rubikcube.parser import parse_moves
from rubikcube.rotation import Move


class SexyMove(Algorithm):
    def __init__(self):
        super().__init__("sexy move")

    def sequence(self):
        return parse_moves("R U R' U'")


def test_algorithm_cannot_be_instantiated_directly():
    with pytest.raises(TypeError):
        Algorithm("abstract")


def test_name_is_kept():
    algorithm = SexyMove()
    assert algorithm.name == "sexy move"
    assert algorithm.sequence() == parse_moves("R U R' U'")


def test_name_is_read_only():
    algorithm = SexyMove()
    with pytest.raises(AttributeError):
        algorithm.name = "other"
    assert algorithm.name == "sexy move"
    cube = Cube(3)
    cube.apply_moves(algorithm.sequence())
    assert cube.is_solved() is False


def test_sequence_is_returned():
    moves = SexyMove().sequence()
    assert moves[0] == Move(Face.R, Direction.CLOCK_WISE, 1)
    assert len(moves) == 4