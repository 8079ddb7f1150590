"""
Immutable board state for tic-tac-toe.

The board is a frozen dataclass. Placing a mark never modifies a board; it
returns a new one, so the computer opponent can inspect positions freely.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from parlor.tictactoe.constants import SQUARES, WINNING_LINES, Mark


def _empty_squares() -> Tuple[Mark, ...]:
    return tuple(Mark.EMPTY for _ in SQUARES)


@dataclass(frozen=True)
class Board:
    """
    Immutable 3x3 board, squares numbered 1-9 left to right, top to bottom.

    Attributes:
        marks: The mark on each square, index 0 holding square 1
    """

    marks: Tuple[Mark, ...] = field(default_factory=_empty_squares)

    def __post_init__(self):
        if len(self.marks) != len(SQUARES):
            raise ValueError(
                f"A board has {len(SQUARES)} squares, got {len(self.marks)}"
            )

    @classmethod
    def from_dict(cls, squares: Dict[int, Mark]) -> "Board":
        """Build a board from a partial {square: mark} mapping."""
        for square in squares:
            if square not in SQUARES:
                raise ValueError(f"Unknown square: {square}")
        return cls(tuple(squares.get(square, Mark.EMPTY) for square in SQUARES))

    def __getitem__(self, square: int) -> Mark:
        if square not in SQUARES:
            raise ValueError(f"Unknown square: {square}")
        return self.marks[square - 1]

    def empty_squares(self) -> List[int]:
        """Numbers of the squares still open, in ascending order."""
        return [square for square in SQUARES if self[square] == Mark.EMPTY]

    def is_full(self) -> bool:
        return Mark.EMPTY not in self.marks

    def winner(self) -> Optional[Mark]:
        """The mark that owns a complete line, if any."""
        for line in WINNING_LINES:
            first = self[line[0]]
            if first != Mark.EMPTY and all(self[square] == first for square in line):
                return first
        return None

    def has_winner(self) -> bool:
        return self.winner() is not None

    def render(self) -> str:
        """Draw the grid the way the console shell prints it."""
        rows = []
        for start in (1, 4, 7):
            a, b, c = (self[start + offset] for offset in range(3))
            rows.append(f"     |     |\n  {a}  |  {b}  |  {c}\n     |     |")
        return "\n" + "\n-----+-----+-----\n".join(rows) + "\n"
