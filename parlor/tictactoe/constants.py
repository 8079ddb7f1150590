"""Tic-tac-toe marks, squares and winning lines."""

from enum import Enum


class Mark(Enum):
    """What occupies a square."""

    EMPTY = " "
    PLAYER = "X"
    COMPUTER = "O"

    def __str__(self) -> str:
        return self.value


class Difficulty(Enum):
    """Computer opponent policies, keyed by their menu number."""

    EASY = "1"
    MEDIUM = "2"
    HARD = "3"


SQUARES = tuple(range(1, 10))
CENTER = 5

WINNING_LINES = (
    (1, 2, 3),
    (4, 5, 6),
    (7, 8, 9),
    (1, 4, 7),
    (2, 5, 8),
    (3, 6, 9),
    (1, 5, 9),
    (3, 5, 7),
)
