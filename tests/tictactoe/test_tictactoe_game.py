import random

import pytest

from parlor.common.io_interface import TestIOInterface
from parlor.common.match import DEFEAT, GOODBYE, TIE, VICTORY, Outcome
from parlor.tictactoe.constants import Difficulty, Mark
from parlor.tictactoe.state import Board
from parlor.tictactoe.tictactoe import (
    CONTINUE_AFTER_TIES,
    WELCOME,
    TicTacToeGame,
    main,
    play_tic_tac_toe,
    square_prompt,
)


@pytest.fixture
def first_empty_rng(mocker):
    """Random source that always takes the first candidate."""
    rng = mocker.Mock()
    rng.choice.side_effect = lambda seq: seq[0]
    return rng


def test_square_prompt_single():
    assert square_prompt([5]).startswith("Please select 5.\n")


def test_square_prompt_pair():
    assert square_prompt([3, 7]).startswith("Please select 3 or 7.\n")


def test_square_prompt_list():
    prompt = square_prompt([1, 2, 3])
    assert prompt.startswith("Please select 1, 2, or 3. \n")
    assert prompt.endswith("(Player marks with 'X'. Computer marks with 'O'.)\n")


def test_player_move_rejects_taken_square():
    io = TestIOInterface(["5", "10", "4"])
    game = TicTacToeGame(io)
    board = game.player_move(Board.from_dict({5: Mark.COMPUTER}))
    assert board[4] == Mark.PLAYER


def test_player_wins_single_game(first_empty_rng):
    io = TestIOInterface(["1", "1", "1", "5", "9", "n"])
    play_tic_tac_toe(io, first_empty_rng)
    assert io.banners == [WELCOME, VICTORY, GOODBYE]


def test_computer_wins_single_game_on_hard(first_empty_rng):
    # Computer takes the center, extends to 4, then completes 4-5-6.
    io = TestIOInterface(["1", "3", "1", "9", "2", "n"])
    play_tic_tac_toe(io, first_empty_rng)
    assert io.banners == [WELCOME, DEFEAT, GOODBYE]


def test_hard_game_can_end_in_tie():
    io = TestIOInterface(["1", "3", "1", "2", "7", "6", "8", "9", "n"])
    play_tic_tac_toe(io, random.Random(42))
    assert io.banners == [WELCOME, TIE, GOODBYE]


def test_best_of_five(first_empty_rng):
    inputs = ["2", "1"]
    for _ in range(4):
        inputs += ["1", "5", "9", ""]
    inputs += ["1", "5", "9", "n"]
    io = TestIOInterface(inputs)
    play_tic_tac_toe(io, first_empty_rng)
    assert io.banners == [WELCOME, VICTORY, GOODBYE]
    assert "Current tally is player: 5, computer: 0.\n" in io.sent_messages
    assert io.sent_messages.count("Player won.\n") == 5


def test_best_of_five_quit_after_ties(mocker):
    io = TestIOInterface(["", "", "n"])
    game = TicTacToeGame(io)
    mocker.patch.object(game, "play_single_game", return_value=(Outcome.TIE, Board()))
    assert game.play_best_of_five() is None
    assert io.prompts[-1] == CONTINUE_AFTER_TIES
    assert io.sent_messages.count("Tie.\n") == 3


def test_best_of_five_continue_after_ties(mocker):
    io = TestIOInterface(["", "", "y", ""] + [""] * 4)
    game = TicTacToeGame(io)
    results = [(Outcome.TIE, Board())] * 3 + [(Outcome.OPPONENT, Board())] * 5
    mocker.patch.object(game, "play_single_game", side_effect=results)
    assert game.play_best_of_five() == Outcome.OPPONENT


def test_quitting_match_shows_goodbye(mocker):
    io = TestIOInterface(["2", "3", "", "", "n"])
    game = TicTacToeGame(io)
    mocker.patch.object(game, "play_single_game", return_value=(Outcome.TIE, Board()))
    game.play()
    assert io.banners == [WELCOME, GOODBYE]
    assert io.clears == 5
    assert not io.input_responses


def test_set_up_reads_difficulty():
    io = TestIOInterface(["2", "4", "2"])
    game = TicTacToeGame(io)
    game.set_up()
    assert game.difficulty == Difficulty.MEDIUM
    assert io.banners == [WELCOME]


def test_play_again_restarts(first_empty_rng):
    io = TestIOInterface(
        ["1", "1", "1", "5", "9", "yes", "1", "1", "1", "5", "9", "no"]
    )
    play_tic_tac_toe(io, first_empty_rng)
    assert io.banners == [WELCOME, VICTORY, WELCOME, VICTORY, GOODBYE]


def test_main_with_console(mocker):
    mocker.patch("builtins.input", side_effect=EOFError)
    mocker.patch("parlor.common.io_interface.os.system")
    assert main([]) == 0
