"""
Tic-tac-toe module.

This module provides the board state, the computer opponent's move selection,
and the console game built on them.
"""

from parlor.tictactoe.constants import (
    CENTER as CENTER,
    WINNING_LINES as WINNING_LINES,
    Difficulty as Difficulty,
    Mark as Mark,
)
from parlor.tictactoe.state import Board as Board
from parlor.tictactoe.transitions import (
    ComputerMove as ComputerMove,
    MoveIntent as MoveIntent,
    choose_computer_move as choose_computer_move,
    place_mark as place_mark,
    select_computer_move as select_computer_move,
)

__all__ = [
    "CENTER",
    "WINNING_LINES",
    "Difficulty",
    "Mark",
    "Board",
    "ComputerMove",
    "MoveIntent",
    "choose_computer_move",
    "place_mark",
    "select_computer_move",
]
