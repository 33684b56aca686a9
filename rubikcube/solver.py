"""Bookkeeping for solving a cube."""

import time

from .cube import Cube
from .rotation import Move

NO_ALGORITHM = "No Algorithm Selected"


class Solver:
    """Records the cube handed to it and the outcome of solving it."""

    def __init__(self) -> None:
        self.number_of_moves = 0
        self.algorithm_name = NO_ALGORITHM
        self.solve_sequence: list[Move] = []
        self.timestamp: float | None = None
        self.original_cube = Cube(0)

    def solve(self, cube: Cube) -> list[Move]:
        """Keep a copy of ``cube`` and the time; no algorithm is chosen, so no moves result."""
        self.original_cube = cube.copy()
        self.timestamp = time.time()
        self.number_of_moves = len(self.solve_sequence)
        return list(self.solve_sequence)

    def __repr__(self) -> str:
        return f"Solver(algorithm_name={self.algorithm_name!r}, number_of_moves={self.number_of_moves})"