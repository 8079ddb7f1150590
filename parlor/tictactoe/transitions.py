"""
State transition functions for tic-tac-toe.

This module provides pure functions for moving between board states and for
choosing the computer's move. Nothing here modifies a board; the game loop
applies the chosen move with `place_mark`.

The computer's policy is a ladder of rules. Each rule looks at the board and
either proposes a `ComputerMove` or passes; the first proposal wins.
"""

import logging
import random
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Callable, List, Optional, Sequence, Tuple

from parlor.tictactoe.constants import CENTER, WINNING_LINES, Difficulty, Mark
from parlor.tictactoe.state import Board

logger = logging.getLogger(__name__)

Line = Tuple[int, int, int]


class MoveIntent(Enum):
    """Why the computer picked a square."""

    COMPLETE = auto()
    BLOCK = auto()
    TAKE_CENTER = auto()
    EXTEND = auto()
    RANDOM = auto()


@dataclass(frozen=True)
class ComputerMove:
    intent: MoveIntent
    square: int


Rule = Callable[[Board, random.Random], Optional[ComputerMove]]


def place_mark(board: Board, square: int, mark: Mark) -> Board:
    """
    Return a new board with `mark` on `square`.

    Args:
        board: Current board
        square: Square number 1-9, must be empty
        mark: PLAYER or COMPUTER

    Returns:
        New board with the square marked

    Raises:
        ValueError: If the square is unknown or already taken, or mark is EMPTY
    """
    if mark == Mark.EMPTY:
        raise ValueError("Cannot place an empty mark")
    if board[square] != Mark.EMPTY:
        raise ValueError(f"Square {square} is already marked {board[square].name}")
    marks = list(board.marks)
    marks[square - 1] = mark
    return replace(board, marks=tuple(marks))


def lines_with(board: Board, mark: Mark, marked: int, empty: int) -> List[Line]:
    """Winning lines holding exactly `marked` of `mark` and `empty` open squares."""
    found = []
    for line in WINNING_LINES:
        values = [board[square] for square in line]
        if values.count(mark) == marked and values.count(Mark.EMPTY) == empty:
            found.append(line)
    return found


def first_empty(board: Board, line: Sequence[int]) -> int:
    return next(square for square in line if board[square] == Mark.EMPTY)


def _nearly_complete(
    board: Board, mark: Mark, intent: MoveIntent, rng: random.Random
) -> Optional[ComputerMove]:
    lines = lines_with(board, mark, marked=2, empty=1)
    if not lines:
        return None
    line = rng.choice(lines)
    return ComputerMove(intent, first_empty(board, line))


def complete_line(board: Board, rng: random.Random) -> Optional[ComputerMove]:
    return _nearly_complete(board, Mark.COMPUTER, MoveIntent.COMPLETE, rng)


def block_line(board: Board, rng: random.Random) -> Optional[ComputerMove]:
    return _nearly_complete(board, Mark.PLAYER, MoveIntent.BLOCK, rng)


def take_center(board: Board, rng: random.Random) -> Optional[ComputerMove]:
    if board[CENTER] == Mark.EMPTY:
        return ComputerMove(MoveIntent.TAKE_CENTER, CENTER)
    return None


def extend_line(board: Board, rng: random.Random) -> Optional[ComputerMove]:
    """Add a second computer mark to a line nobody else has touched."""
    lines = lines_with(board, Mark.COMPUTER, marked=1, empty=2)
    if not lines:
        return None
    line = rng.choice(lines)
    return ComputerMove(MoveIntent.EXTEND, first_empty(board, line))


def random_square(board: Board, rng: random.Random) -> Optional[ComputerMove]:
    squares = board.empty_squares()
    if not squares:
        return None
    return ComputerMove(MoveIntent.RANDOM, rng.choice(squares))


# Medium only blocks; it never completes its own lines.
POLICIES = {
    Difficulty.EASY: (random_square,),
    Difficulty.MEDIUM: (block_line, random_square),
    Difficulty.HARD: (
        complete_line,
        block_line,
        take_center,
        extend_line,
        random_square,
    ),
}


def choose_computer_move(
    board: Board, difficulty: Difficulty, rng: Optional[random.Random] = None
) -> ComputerMove:
    """
    Walk the difficulty's rule ladder and return the first proposed move.

    Raises:
        ValueError: If the board has no empty square
    """
    rng = rng or random
    rules: Sequence[Rule] = POLICIES[difficulty]
    for rule in rules:
        move = rule(board, rng)
        if move is not None:
            logger.debug(
                "Computer (%s) takes square %d: %s",
                difficulty.name.lower(),
                move.square,
                move.intent.name.lower(),
            )
            return move
    raise ValueError("No empty square left for the computer")


def select_computer_move(
    board: Board, difficulty: Difficulty, rng: Optional[random.Random] = None
) -> int:
    """The square the computer wants to mark."""
    return choose_computer_move(board, difficulty, rng).square


def apply_computer_move(
    board: Board, difficulty: Difficulty, rng: Optional[random.Random] = None
) -> Board:
    return place_mark(board, select_computer_move(board, difficulty, rng), Mark.COMPUTER)
