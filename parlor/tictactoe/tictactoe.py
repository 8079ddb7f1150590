"""
Console tic-tac-toe against a computer opponent.

The player always marks first with X. A session is either a single game or a
best-of-five match; in a match, three or more ties in a row give the player
the chance to walk away.
"""

import logging
import random
import sys
from typing import List, Optional, Tuple

from parlor.common.cli import run_program
from parlor.common.io_interface import IOInterface
from parlor.common.match import (
    GOODBYE,
    GameType,
    MatchTally,
    Outcome,
    choose_game_type,
    say_goodbye,
    show_game_winner,
    show_match_result,
    show_single_game_result,
)
from parlor.tictactoe.constants import Difficulty, Mark
from parlor.tictactoe.state import Board
from parlor.tictactoe.transitions import apply_computer_move, place_mark

logger = logging.getLogger(__name__)

WELCOME = "tic tac toe"
OPPONENT = "Computer"

DIFFICULTY_MENU = (
    "Please select one of the following difficulty levels:\n"
    "1) easy\n"
    "2) medium\n"
    "3) difficult\n"
)
MARK_LEGEND = "(Player marks with 'X'. Computer marks with 'O'.)\n"
CONTINUE_AFTER_TIES = (
    "That's a lot of ties. Enter 'y' or 'yes' if you want to continue "
    "playing or anything else to quit. "
)
TIES_BEFORE_ASKING = 3


def square_prompt(squares: List[int]) -> str:
    """
    Build the "Please select ..." prompt listing the open squares.

    >>> square_prompt([3, 7])
    "Please select 3 or 7.\\n(Player marks with 'X'. Computer marks with 'O'.)\\n"
    """
    names = [str(square) for square in squares]
    if len(names) == 1:
        listing = f"{names[0]}.\n"
    elif len(names) == 2:
        listing = f"{names[0]} or {names[1]}.\n"
    else:
        listing = f"{', '.join(names[:-1])}, or {names[-1]}. \n"
    return f"Please select {listing}{MARK_LEGEND}"


class TicTacToeGame:
    """
    One tic-tac-toe session bound to an IO interface.

    :param io_interface: Where prompts and output go
    :param rng: Random source for the computer opponent
    """

    def __init__(self, io_interface: IOInterface, rng: Optional[random.Random] = None):
        self.io_interface = io_interface
        self.rng = rng or random.Random()
        self.difficulty = Difficulty.HARD
        self.game_type = GameType.SINGLE

    def set_up(self) -> None:
        self.io_interface.clear()
        self.io_interface.banner(WELCOME)
        self.game_type = choose_game_type(self.io_interface)
        self.difficulty = Difficulty(
            self.io_interface.choose(DIFFICULTY_MENU, [d.value for d in Difficulty])
        )
        logger.debug("New %s session on %s", self.game_type.name, self.difficulty.name)

    def display_board(self, board: Board) -> None:
        self.io_interface.clear()
        self.io_interface.output(board.render())

    def player_move(self, board: Board) -> Board:
        squares = board.empty_squares()
        choice = self.io_interface.choose(
            square_prompt(squares), [str(square) for square in squares]
        )
        return place_mark(board, int(choice), Mark.PLAYER)

    def play_single_game(self) -> Tuple[Outcome, Board]:
        """Play one game from an empty board and return who won and the final board."""
        board = Board()
        while True:
            self.display_board(board)
            board = self.player_move(board)
            if board.has_winner():
                return Outcome.PLAYER, board
            if board.is_full():
                return Outcome.TIE, board
            board = apply_computer_move(board, self.difficulty, self.rng)
            if board.has_winner():
                return Outcome.OPPONENT, board

    def play_best_of_five(self) -> Optional[Outcome]:
        """
        Play until five games have been decided.

        Returns the match winner, or None when the player quits after a run
        of ties.
        """
        tally = MatchTally()
        while True:
            outcome, board = self.play_single_game()
            self.display_board(board)
            show_game_winner(self.io_interface, outcome, OPPONENT)
            tally = tally.record(outcome)
            if tally.consecutive_ties >= TIES_BEFORE_ASKING and not (
                self.io_interface.ask_play_again(CONTINUE_AFTER_TIES)
            ):
                return None
            self.io_interface.output(tally.describe(OPPONENT))
            if tally.is_decided:
                return tally.leader
            self.io_interface.pause()

    def play(self) -> None:
        """Set up and play one session, single game or match."""
        self.set_up()
        if self.game_type == GameType.SINGLE:
            outcome, board = self.play_single_game()
            self.display_board(board)
            show_single_game_result(self.io_interface, outcome)
            return

        winner = self.play_best_of_five()
        if winner is None:
            self.io_interface.clear()
            self.io_interface.banner(GOODBYE)
        else:
            show_match_result(self.io_interface, winner)


def play_tic_tac_toe(
    io_interface: IOInterface, rng: Optional[random.Random] = None
) -> None:
    game = TicTacToeGame(io_interface, rng)
    while True:
        game.play()
        if not io_interface.ask_play_again():
            break
    say_goodbye(io_interface)


def main(argv: Optional[List[str]] = None) -> int:
    return run_program("Play tic-tac-toe against the computer.", play_tic_tac_toe, argv)


if __name__ == "__main__":
    sys.exit(main())
