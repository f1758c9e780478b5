import itertools
import random

import pytest

from dsalgo.tictactoe import COMPUTER, USER, Board, main, random_move

ALL_CELLS = [(r, c) for r in range(3) for c in range(3)]


def test_empty_board_render():
    expected = (
        "---------\n"
        "  |   |  \n"
        "---------\n"
        "  |   |  \n"
        "---------\n"
        "  |   |  \n"
        "---------\n"
    )
    assert Board().render() == expected


@pytest.mark.parametrize(
    "line",
    [
        [(0, 0), (0, 1), (0, 2)],
        [(2, 0), (2, 1), (2, 2)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ],
)
def test_winning_lines(line):
    board = Board()
    for row, col in line:
        board.place(row, col, USER)
    assert board.is_winner(USER)
    assert not board.is_winner(COMPUTER)


def test_two_in_a_row_is_not_a_win():
    board = Board()
    board.place(0, 0, USER)
    board.place(0, 1, USER)
    assert not board.is_winner(USER)


def test_place_on_occupied_cell_fails():
    board = Board()
    board.place(1, 1, USER)
    with pytest.raises(ValueError):
        board.place(1, 1, COMPUTER)
    assert board.cells[1][1] == USER


@pytest.mark.parametrize("row, col", [(-1, 0), (3, 0), (0, 3), (0, -1)])
def test_place_out_of_range_fails(row, col):
    with pytest.raises(ValueError):
        Board().place(row, col, USER)


def test_empty_cells_and_full():
    board = Board()
    assert board.empty_cells() == ALL_CELLS
    for i, (row, col) in enumerate(ALL_CELLS):
        assert not board.is_full()
        board.place(row, col, USER if i % 2 else COMPUTER)
        assert (row, col) not in board.empty_cells()
    assert board.is_full()
    assert board.empty_cells() == []


def test_random_move_uses_a_blank_cell():
    board = Board()
    board.place(0, 0, USER)
    rng = random.Random(7)
    for _ in range(8):
        before = board.empty_cells()
        cell = random_move(board, rng)
        assert cell in before
        assert board.cells[cell[0]][cell[1]] == COMPUTER
    assert board.is_full()


def test_random_move_takes_last_cell():
    board = Board()
    for row, col in ALL_CELLS[:-1]:
        board.place(row, col, USER)
    assert random_move(board, random.Random(1)) == ALL_CELLS[-1]


def test_random_move_on_full_board_fails():
    board = Board()
    for row, col in ALL_CELLS:
        board.place(row, col, USER)
    with pytest.raises(ValueError):
        random_move(board, random.Random(1))


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_main_plays_to_an_end(seed, monkeypatch, capsys):
    moves = itertools.cycle(f"{r} {c}" for r, c in ALL_CELLS)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(moves))
    assert main(["--seed", str(seed)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Let's begin Tic Tac Toe!")
    assert "Computer moved:" in out
    last = out.rstrip("\n").splitlines()[-1]
    assert last in {"You win!", "Computer wins!", "It's a tie!"}