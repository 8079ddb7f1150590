import random

import pytest

from parlor.tictactoe.constants import CENTER, Difficulty, Mark
from parlor.tictactoe.state import Board
from parlor.tictactoe.transitions import (
    ComputerMove,
    MoveIntent,
    apply_computer_move,
    choose_computer_move,
    lines_with,
    place_mark,
    select_computer_move,
)

X, O = Mark.PLAYER, Mark.COMPUTER


@pytest.fixture
def rng():
    return random.Random(1234)


def random_boards(count=200, seed=99):
    """Boards reached by random play that still have an open square."""
    generator = random.Random(seed)
    boards = []
    while len(boards) < count:
        board = Board()
        mark = X
        for _ in range(generator.randrange(9)):
            board = place_mark(board, generator.choice(board.empty_squares()), mark)
            if board.has_winner():
                break
            mark = O if mark == X else X
        if board.empty_squares():
            boards.append(board)
    return boards


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_always_picks_an_empty_square(difficulty, rng):
    for board in random_boards():
        assert select_computer_move(board, difficulty, rng) in board.empty_squares()


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_does_not_modify_board(difficulty, rng):
    board = Board.from_dict({1: X, 2: X, 4: O})
    select_computer_move(board, difficulty, rng)
    assert board == Board.from_dict({1: X, 2: X, 4: O})


def test_full_board_raises(rng):
    board = Board((X, O, X, X, O, O, O, X, X))
    with pytest.raises(ValueError):
        choose_computer_move(board, Difficulty.HARD, rng)


def test_lines_with():
    board = Board.from_dict({1: X, 2: X, 5: O})
    assert lines_with(board, X, marked=2, empty=1) == [(1, 2, 3)]
    assert (2, 5, 8) not in lines_with(board, O, marked=1, empty=2)
    assert (4, 5, 6) in lines_with(board, O, marked=1, empty=2)


def test_easy_is_random(mocker):
    rng = mocker.Mock()
    rng.choice.side_effect = lambda seq: seq[-1]
    board = Board.from_dict({1: O, 2: O, 9: X})
    # Easy ignores the open win on square 3.
    move = choose_computer_move(board, Difficulty.EASY, rng)
    assert move == ComputerMove(MoveIntent.RANDOM, 8)


def test_easy_covers_every_open_square():
    rng = random.Random(5)
    board = Board.from_dict({1: X, 5: O})
    picks = {select_computer_move(board, Difficulty.EASY, rng) for _ in range(500)}
    assert picks == set(board.empty_squares())


def test_hard_completes_own_line(rng):
    board = Board.from_dict({1: O, 2: O, 4: X, 5: X})
    for _ in range(50):
        move = choose_computer_move(board, Difficulty.HARD, rng)
        assert move == ComputerMove(MoveIntent.COMPLETE, 3)


def test_hard_prefers_win_over_block(rng):
    # Computer wins on 6 (3-6-9); player threatens 6 and 7.
    board = Board.from_dict({1: X, 4: X, 5: X, 3: O, 9: O})
    for _ in range(50):
        assert select_computer_move(board, Difficulty.HARD, rng) == 6


def test_hard_blocks(rng):
    board = Board.from_dict({1: X, 2: X, 5: O})
    for _ in range(50):
        assert choose_computer_move(board, Difficulty.HARD, rng) == ComputerMove(
            MoveIntent.BLOCK, 3
        )


def test_hard_takes_center(rng):
    board = Board.from_dict({1: X})
    assert choose_computer_move(board, Difficulty.HARD, rng) == ComputerMove(
        MoveIntent.TAKE_CENTER, CENTER
    )


def test_hard_extends_line_with_first_empty_square():
    # Computer on 3 with lines (1,2,3) and (3,6,9) still open.
    board = Board.from_dict({5: X, 3: O, 7: X})
    for seed in range(20):
        move = choose_computer_move(board, Difficulty.HARD, random.Random(seed))
        assert move.intent == MoveIntent.EXTEND
        assert move.square in (1, 6)


def test_hard_extend_tie_break_is_random():
    board = Board.from_dict({5: X, 3: O, 7: X})
    squares = {
        select_computer_move(board, Difficulty.HARD, random.Random(seed))
        for seed in range(100)
    }
    assert squares == {1, 6}


def test_hard_falls_back_to_random(mocker):
    # X O X / _ X _ / O X O: nothing to complete, block or extend.
    board = Board.from_dict({1: X, 2: O, 3: X, 5: X, 7: O, 8: X, 9: O})
    rng = mocker.Mock()
    rng.choice.side_effect = lambda seq: seq[0]
    move = choose_computer_move(board, Difficulty.HARD, rng)
    assert move == ComputerMove(MoveIntent.RANDOM, 4)


def test_hard_block_tie_break_is_random():
    # Player threatens both 3 (1-2-3) and 7 (1-4-7).
    board = Board.from_dict({1: X, 2: X, 4: X, 5: O, 9: O})
    picks = {
        select_computer_move(board, Difficulty.HARD, random.Random(seed))
        for seed in range(100)
    }
    assert picks == {3, 7}


def test_hard_complete_tie_break_is_random():
    # Computer can finish 1-2-3 or 1-4-7. Square 3 would also block 3-6-9.
    board = Board.from_dict({1: O, 2: O, 4: O, 5: X, 6: X, 9: X})
    moves = {
        choose_computer_move(board, Difficulty.HARD, random.Random(seed))
        for seed in range(100)
    }
    assert moves == {
        ComputerMove(MoveIntent.COMPLETE, 3),
        ComputerMove(MoveIntent.COMPLETE, 7),
    }


def test_medium_blocks(rng):
    board = Board.from_dict({1: X, 5: X, 2: O})
    for _ in range(50):
        assert choose_computer_move(board, Difficulty.MEDIUM, rng) == ComputerMove(
            MoveIntent.BLOCK, 9
        )


def test_medium_never_completes_own_line(mocker):
    rng = mocker.Mock()
    rng.choice.side_effect = lambda seq: seq[0]
    board = Board.from_dict({4: O, 5: O, 9: X})
    move = choose_computer_move(board, Difficulty.MEDIUM, rng)
    assert move == ComputerMove(MoveIntent.RANDOM, 1)


def test_medium_block_tie_break_picks_among_threats():
    board = Board.from_dict({1: X, 2: X, 4: X, 5: O, 9: O})
    picks = {
        select_computer_move(board, Difficulty.MEDIUM, random.Random(seed))
        for seed in range(100)
    }
    assert picks == {3, 7}


def test_apply_computer_move_marks_computer(rng):
    board = apply_computer_move(Board.from_dict({1: X}), Difficulty.HARD, rng)
    assert board[CENTER] == O
    assert len(board.empty_squares()) == 7
