"""Small integer vector helpers used to orient the faces of the cube."""

from collections.abc import Sequence


def dot_product(a: Sequence[int], b: Sequence[int]) -> int:
    """Return the dot product of two vectors of equal length."""
    if len(a) != len(b):
        raise ValueError("Both vectors must be of the same size.")
    return sum(x * y for x, y in zip(a, b))


def cross_product3(a: Sequence[int], b: Sequence[int]) -> tuple[int, int, int]:
    """Return the cross product of two three-component vectors."""
    if len(a) != 3 or len(b) != 3:
        raise ValueError("Both vectors must be of size 3")
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def multiply_vector(a: Sequence[int], multiplier: int) -> tuple[int, ...]:
    """Scale every component of ``a`` by ``multiplier``."""
    return tuple(x * multiplier for x in a)


def add_to_vector(a: Sequence[int], to_add: int) -> tuple[int, ...]:
    """Add ``to_add`` to every component of ``a``."""
    return tuple(x + to_add for x in a)