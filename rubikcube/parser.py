"""Parsing of move sequences written in standard cube notation."""

from .enums import Direction, Face
from .rotation import Move

_FACE_LETTERS = "UDRLBF"
_MODIFIERS = "'2"


class ParseError(ValueError):
    """Raised when a move sequence is not valid notation."""


def _invalid_move(token: str) -> ParseError:
    return ParseError(
        f"The move > {token} < is not valid. please use the standard notation"
    )


def tokenize(text: str, splitter: str = " ") -> list[str]:
    """Split ``text`` on every ``splitter``, keeping empty pieces between separators."""
    if not text:
        return []
    return text.split(splitter)


def token_is_valid(token: str) -> bool:
    """Check a single move token; raise for empty or over-long tokens."""
    if not token:
        raise ParseError("Only one space is allowed between two moves in a sequence.")
    if len(token) > 2:
        raise _invalid_move(token)
    if token[0] not in _FACE_LETTERS:
        return False
    return len(token) == 1 or token[1] in _MODIFIERS


def create_move(token: str) -> Move:
    """Build a move from a token; an unknown face letter gives ``Face.ERROR``."""
    try:
        face = Face[token[0]] if token[0] in _FACE_LETTERS else Face.ERROR
    except IndexError:
        face = Face.ERROR
    modifier = token[1] if len(token) > 1 else ""
    direction = Direction.ANTI_CLOCK_WISE if modifier == "'" else Direction.CLOCK_WISE
    times = 2 if modifier == "2" else 1
    return Move(face, direction, times)


def parse_moves(raw_moves: str) -> list[Move]:
    """Parse a space separated move sequence into moves."""
    if not raw_moves:
        raise ParseError("The scrambling sequence cannot be empty.")
    moves = []
    for token in tokenize(raw_moves, " "):
        if not token_is_valid(token):
            raise _invalid_move(token)
        moves.append(create_move(token))
    return moves


class Parser:
    """A parsed move sequence together with the text it came from."""

    def __init__(self, raw_moves: str = "") -> None:
        self.raw_moves = raw_moves
        self.moves: list[Move] = parse_moves(raw_moves) if raw_moves else []

    def __iter__(self):
        return iter(self.moves)

    def __len__(self) -> int:
        return len(self.moves)

    def __repr__(self) -> str:
        return f"Parser({self.raw_moves!r})"