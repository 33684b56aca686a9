# rubikcube

A small Rubik's cube model. It reads a scramble written in standard move
notation, checks it and applies it to a solved 3×3×3 cube. The command shows
every face before and after each move.

## Installing

```
pip install .
```

To run the test suite with pytest, install the `test` extra:
`pip install .[test]`.

## Command line

Pass the whole sequence as a single argument:

```
rubik "R U R' U' F2"
```

For each move, the command prints `>---------1--------<` and the six faces.
It then turns the face and prints `>---------2--------<` and the six faces
again. Each face is printed as its letter and then rows of colour initials
(`W`, `Y`, `G`, `B`, `O`, `R`).

Rules for a sequence:

- The face letters are `U`, `D`, `F`, `B`, `L` and `R`.
- A letter alone turns that face clockwise. A letter followed by `'` turns it
  anticlockwise. A letter followed by `2` turns it twice.
- Moves are separated by exactly one space. The command rejects an empty
  sequence, doubled or trailing spaces, and any token that is not one of the
  forms above.

If the sequence is invalid, the command prints the error to standard error
and exits with status 1. If you do not give exactly one argument, it prints
`You must provide a sequence.` and exits with status 1.

## Library use

```python
from rubikcube.parser import parse_moves
from rubikcube.cube import Cube

cube = Cube(3)
cube.apply_moves(parse_moves("R U R' U'"))
print(cube.format())
print(cube.is_solved())
```

- `rubikcube.parser`
  - `parse_moves(raw_moves)` returns a list of `Move` values. It raises
    `ParseError`, a subclass of `ValueError`, for a bad sequence.
  - `Parser(raw_moves)` keeps the text in `raw_moves` and the parsed list in
    `moves`. It can be iterated over, and it has a length.
  - `tokenize`, `token_is_valid` and `create_move` handle single tokens.
- `rubikcube.rotation`
  - `Move` is a frozen dataclass with the fields `face`, `direction` and
    `times`.
  - `Rotation` holds the sticker indices of one face and of the strips next
    to it. `Rotation.rotate(direction, cube_order)` returns those indices
    after a quarter turn.
- `rubikcube.cube`
  - `Cube(order)` builds a solved cube, with colour `n` on face `n`.
  - `apply_move` and `apply_moves` turn faces.
  - `is_solved()` is true when every face shows a single colour.
  - `format_face(face)` and `format()` return the stickers as text. `str()`
    of a cube gives the same text as `format()`.
  - `copy()` returns an independent cube. Two cubes compare equal when they
    have the same order and the same stickers.
  - The `data` and `order` properties expose the stickers and the size.
  - `find_local_coordinates(face)` gives the world-space direction of each
    edge of a face.
- `rubikcube.enums` defines `Face`, `Direction`, `LocalCoordinate` and `Color`.
- `rubikcube.vectors` holds the small integer vector helpers used to find
  which edges meet each face: `dot_product`, `cross_product3`,
  `multiply_vector` and `add_to_vector`.
- `rubikcube.printing` turns faces, colours, local axes and vectors into
  text.

## What it does not do

The package does not solve cubes. `rubikcube.algorithm.Algorithm` is an
abstract base class with a `name` and a `sequence()` method, and no
algorithm implements it. `rubikcube.solver.Solver.solve(cube)` stores a copy
of the cube and a timestamp. It returns an empty list of moves, and its
`algorithm_name` stays `"No Algorithm Selected"`.