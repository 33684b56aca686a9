"""Base class for solving algorithms."""

from abc import ABC, abstractmethod

from .rotation import Move


class Algorithm(ABC):
    """A named strategy that yields a sequence of moves."""

    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        """The algorithm's name."""
        return self._name

    @abstractmethod
    def sequence(self) -> list[Move]:
        """Return the moves this algorithm performs."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"