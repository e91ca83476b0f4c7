import itertools

import pytest

from engine.win_checker import WIN_PATTERNS, WinChecker, empty_cells


@pytest.fixture
def checker():
    return WinChecker()


def test_patterns_are_rows_columns_then_diagonals():
    assert WIN_PATTERNS == (
        (0, 1, 2), (3, 4, 5), (6, 7, 8),
        (0, 3, 6), (1, 4, 7), (2, 5, 8),
        (0, 4, 8), (2, 4, 6),
    )


@pytest.mark.parametrize("pattern", WIN_PATTERNS)
@pytest.mark.parametrize("mark", ["X", "O"])
def test_every_pattern_wins(checker, pattern, mark):
    board = [""] * 9
    for index in pattern:
        board[index] = mark
    assert checker.check_winner(board) == mark
    assert checker.get_winning_line(board) == pattern


def test_no_winner_on_empty_or_mixed_lines(checker):
    assert checker.check_winner([""] * 9) is None
    assert checker.check_winner(["X", "O", "X", "", "", "", "", "", ""]) is None


def test_first_pattern_in_scan_order_is_reported(checker):
    # Top row and left column both complete
    board = ["X", "X", "X",
             "X", "O", "O",
             "X", "O", "O"]
    assert checker.get_winning_line(board) == (0, 1, 2)


def test_draw_only_on_full_board_without_winner(checker):
    draw = ["X", "O", "X",
            "X", "O", "O",
            "O", "X", "X"]
    assert checker.check_draw(draw)

    won_full = ["X", "X", "X",
                "O", "O", "X",
                "X", "O", "O"]
    assert not checker.check_draw(won_full)
    assert not checker.check_draw(["X"] + [""] * 8)


def test_winner_iff_homogeneous_pattern(checker):
    # Every possible top row, rest of the board empty
    for cells in itertools.product(["", "X", "O"], repeat=3):
        board = list(cells) + ["", "", "", "", "", ""]
        expected = cells[0] if cells[0] and cells[0] == cells[1] == cells[2] else None
        assert checker.check_winner(board) == expected


def test_find_completing_cell_checks_each_gap(checker):
    assert checker.find_completing_cell(["X", "X", ""] + [""] * 6, "X") == 2
    assert checker.find_completing_cell(["X", "", "X"] + [""] * 6, "X") == 1
    assert checker.find_completing_cell(["", "X", "X"] + [""] * 6, "X") == 0
    assert checker.find_completing_cell(["X", "X", "O"] + [""] * 6, "X") is None


def test_find_completing_cell_uses_first_pattern(checker):
    # Both the middle row (gap 5) and the left column (gap 6) qualify
    board = ["O", "", "",
             "O", "O", "",
             "", "", ""]
    assert checker.find_completing_cell(board, "O") == 5


def test_empty_cells():
    assert empty_cells(["X", "", "O", "", "", "", "", "", "X"]) == [1, 3, 4, 5, 6, 7]
