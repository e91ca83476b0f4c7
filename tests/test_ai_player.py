import random

import pytest

from engine.ai_player import AIPlayer, Difficulty, NO_MOVE
from engine.board import GameBoard
from engine.game_state import Player
from engine.win_checker import empty_cells

from conftest import FixedRandom


FULL_BOARD = ["X", "O", "X",
              "X", "O", "O",
              "O", "X", "X"]


@pytest.fixture
def ai(rng):
    return AIPlayer(rng=rng)


def test_difficulty_lookup():
    assert Difficulty.from_value("hard") == Difficulty.HARD
    assert Difficulty.from_value("MEDIUM") == Difficulty.MEDIUM
    assert Difficulty.from_value(Difficulty.HARD) == Difficulty.HARD
    assert Difficulty.from_value("impossible") == Difficulty.EASY
    assert Difficulty.from_value(None) == Difficulty.EASY


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_full_board_has_no_move(ai, difficulty):
    assert ai.select_move(FULL_BOARD, "X", difficulty) == NO_MOVE


def test_easy_picks_an_empty_cell(ai):
    board = ["X", "", "O", "", "X", "O", "", "", ""]
    seen = set()
    for _ in range(200):
        move = ai.select_move(board, "X", Difficulty.EASY)
        assert board[move] == ""
        seen.add(move)
    assert seen == set(empty_cells(board))


def test_unknown_difficulty_plays_easy(ai):
    board = ["X", "O", "X", "O", "", "O", "X", "X", "O"]
    assert ai.select_move(board, "X", "nonsense") == 4


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_board_is_not_modified(ai, difficulty):
    board = ["X", "", "", "", "O", "", "", "", ""]
    before = list(board)
    ai.select_move(board, "X", difficulty)
    assert board == before


def test_hard_blocks_immediate_threat(ai):
    board = ["X", "X", "", "", "", "", "", "", ""]
    assert ai.select_move(board, "O", Difficulty.HARD) == 2


def test_hard_takes_win_over_block(ai):
    board = ["X", "X", "", "O", "O", "", "", "", ""]
    assert ai.select_move(board, "X", Difficulty.HARD) == 2
    assert ai.select_move(board, "O", Difficulty.HARD) == 5


def test_hard_ties_keep_lowest_index(ai):
    # Two immediate wins: 2 (top row) and 6 (left column)
    board = ["O", "O", "",
             "O", "X", "X",
             "", "X", ""]
    assert ai.select_move(board, "O", Difficulty.HARD) == 2


def test_hard_prefers_faster_win(ai):
    # 8 wins at once; 1 forks (2, 7 and 8) and wins a move later
    board = ["O", "", "",
             "X", "O", "X",
             "", "", ""]
    assert ai.select_move(board, "O", Difficulty.HARD) == 8


def test_hard_counts_positions(ai):
    ai.select_move(["X", "", "", "", "", "", "", "", ""], "O", Difficulty.HARD)
    assert ai.positions_evaluated > 0


def test_hard_never_loses_as_second_player(ai):
    losses = []

    def explore(game):
        # X tries every move; O answers with the hard AI
        state = game.get_state()
        for index in empty_cells(state.board):
            child = GameBoard()
            child.set_state(state)
            result = child.apply_move(index)
            if result.game_over:
                if result.winner == "X":
                    losses.append(result.board)
                continue

            reply = ai.select_move(result.board, "O", Difficulty.HARD)
            result = child.apply_move(reply)
            assert result.valid
            if not result.game_over:
                explore(child)

    explore(GameBoard())
    assert losses == []


def test_hard_against_itself_is_a_draw():
    game = GameBoard()
    ai = AIPlayer(rng=random.Random(0))
    result = None
    while not game.game_over:
        state = game.get_state()
        move = ai.select_move(state.board, state.current_player, Difficulty.HARD)
        result = game.apply_move(move)
    assert result.is_draw


def test_medium_heuristic_takes_the_win():
    ai = AIPlayer(rng=FixedRandom(0.0))
    board = ["X", "X", "", "", "O", "", "", "", ""]
    for _ in range(20):
        assert ai.select_move(board, "X", Difficulty.MEDIUM) == 2


def test_medium_heuristic_blocks():
    ai = AIPlayer(rng=FixedRandom(0.59))
    board = ["O", "O", "", "", "X", "", "", "", ""]
    assert ai.select_move(board, "X", Difficulty.MEDIUM) == 2


def test_medium_heuristic_prefers_win_over_block():
    ai = AIPlayer(rng=FixedRandom(0.0))
    board = ["X", "X", "", "O", "O", "", "", "", ""]
    assert ai.select_move(board, "O", Difficulty.MEDIUM) == 5


def test_medium_heuristic_takes_center():
    ai = AIPlayer(rng=FixedRandom(0.0))
    board = ["X", "", "", "", "", "", "", "", ""]
    assert ai.select_move(board, "O", Difficulty.MEDIUM) == 4


def test_medium_heuristic_falls_back_to_random_cell():
    ai = AIPlayer(rng=FixedRandom(0.0))
    board = ["", "", "", "", "X", "", "", "", ""]
    move = ai.select_move(board, "O", Difficulty.MEDIUM)
    assert move != 4
    assert board[move] == ""


def test_medium_random_branch_ignores_heuristic():
    ai = AIPlayer(rng=FixedRandom(0.6))
    board = ["X", "X", "", "", "O", "", "", "", ""]
    moves = {ai.select_move(board, "X", Difficulty.MEDIUM) for _ in range(200)}
    assert moves == set(empty_cells(board))


def test_medium_uses_heuristic_about_sixty_percent():
    ai = AIPlayer(rng=random.Random(42))
    board = ["X", "X", "", "", "O", "", "", "", ""]
    trials = 2000
    wins = sum(ai.select_move(board, "X", Difficulty.MEDIUM) == 2 for _ in range(trials))
    # 60% heuristic plus 1/6 of the random 40%
    expected = trials * (0.6 + 0.4 / 6)
    assert abs(wins - expected) < trials * 0.05


def test_find_winning_move(ai):
    assert ai.find_winning_move(["", "", "", "O", "", "O", "", "", ""], "O") == 4
    assert ai.find_winning_move(["X", "", "", "", "", "", "", "", ""], "X") == NO_MOVE


def test_accepts_player_enum(ai):
    board = ["X", "X", "", "", "", "", "", "", ""]
    assert ai.select_move(board, Player.O, "hard") == 2
