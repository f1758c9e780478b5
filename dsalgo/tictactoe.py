"""Tic-tac-toe against an opponent that picks random free cells."""

from __future__ import annotations

import argparse
import random

EMPTY = " "
USER = "X"
COMPUTER = "O"
SIZE = 3

_LINES: tuple[tuple[tuple[int, int], ...], ...] = (
    *(tuple((r, c) for c in range(SIZE)) for r in range(SIZE)),
    *(tuple((r, c) for r in range(SIZE)) for c in range(SIZE)),
    tuple((i, i) for i in range(SIZE)),
    tuple((i, SIZE - 1 - i) for i in range(SIZE)),
)


class Board:
    """A 3x3 grid of marks; blank cells hold a space."""

    def __init__(self) -> None:
        self.cells: list[list[str]] = [[EMPTY] * SIZE for _ in range(SIZE)]

    def place(self, row: int, col: int, mark: str) -> None:
        """Put ``mark`` on an empty cell; raise ValueError if the move is not valid."""
        if mark == EMPTY:
            raise ValueError("a mark must not be blank")
        if not (0 <= row < SIZE and 0 <= col < SIZE) or self.cells[row][col] != EMPTY:
            raise ValueError("This move is not valid")
        self.cells[row][col] = mark

    def is_winner(self, mark: str) -> bool:
        """Tell whether ``mark`` fills a whole row, column or diagonal."""
        return any(all(self.cells[r][c] == mark for r, c in line) for line in _LINES)

    def is_full(self) -> bool:
        """Tell whether no blank cell is left."""
        return all(cell != EMPTY for row in self.cells for cell in row)

    def empty_cells(self) -> list[tuple[int, int]]:
        """Return the blank cells in row-major order."""
        return [
            (r, c)
            for r, row in enumerate(self.cells)
            for c, cell in enumerate(row)
            if cell == EMPTY
        ]

    def render(self) -> str:
        """Draw the board with rules between the rows."""
        rule = "-" * 9
        lines = [rule]
        for row in self.cells:
            lines.extend((" | ".join(row), rule))
        return "\n".join(lines) + "\n"


def random_move(board: Board, rng: random.Random) -> tuple[int, int]:
    """Place the computer's mark on a random blank cell and return that cell."""
    cells = board.empty_cells()
    if not cells:
        raise ValueError("the board is full")
    row, col = rng.choice(cells)
    board.place(row, col, COMPUTER)
    return row, col


def _parse_move(text: str) -> tuple[int, int] | None:
    parts = text.split()
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def _user_turn(board: Board) -> None:
    while True:
        move = _parse_move(input("Enter your move (row & column): "))
        if move is not None:
            try:
                board.place(*move, USER)
                break
            except ValueError:
                pass
        print("This move is not valid")
    print(board.render(), end="")


def _computer_turn(board: Board, rng: random.Random) -> None:
    random_move(board, rng)
    print("Computer moved:")
    print(board.render(), end="")


def _finish(board: Board, message: str) -> None:
    print(board.render(), end="")
    print(message)


def main(argv: list[str] | None = None) -> int:
    """Play one interactive game on standard input and output."""
    parser = argparse.ArgumentParser(description="Play tic-tac-toe against a random opponent.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the computer's moves")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    board = Board()
    print("Let's begin Tic Tac Toe!")
    print(board.render(), end="")
    try:
        _computer_turn(board, rng)
        while True:
            _user_turn(board)
            if board.is_winner(USER):
                _finish(board, "You win!")
                break
            if board.is_full():
                _finish(board, "It's a tie!")
                break
            _computer_turn(board, rng)
            if board.is_winner(COMPUTER):
                _finish(board, "Computer wins!")
                break
            if board.is_full():
                _finish(board, "It's a tie!")
                break
    except EOFError:
        return 1
    return 0