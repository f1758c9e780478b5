"""Tic-tac-toe against a computer player that searches the game tree with minimax."""

from __future__ import annotations

import argparse

from dsalgo.tictactoe import EMPTY, Board

AI = "O"
HUMAN = "X"
WIN_SCORE = 10


def evaluate(board: Board) -> int:
    """Score a position: ``WIN_SCORE`` if the computer has won, its negative if the human has."""
    if board.is_winner(AI):
        return WIN_SCORE
    if board.is_winner(HUMAN):
        return -WIN_SCORE
    return 0


def minimax(board: Board, depth: int, maximizing: bool) -> int:
    """Return the minimax value of ``board``; quicker wins and slower losses score higher."""
    score = evaluate(board)
    if score == WIN_SCORE:
        return score - depth
    if score == -WIN_SCORE:
        return score + depth
    if board.is_full():
        return 0

    mark = AI if maximizing else HUMAN
    scores = []
    for row, col in board.empty_cells():
        board.cells[row][col] = mark
        try:
            scores.append(minimax(board, depth + 1, not maximizing))
        finally:
            board.cells[row][col] = EMPTY
    return max(scores) if maximizing else min(scores)


def best_move(board: Board) -> tuple[int, int] | None:
    """Return the computer's best cell, the first in row-major order on ties; None if full.

    The board is left as it was.
    """
    best: tuple[int, int] | None = None
    best_value: int | None = None
    for row, col in board.empty_cells():
        board.cells[row][col] = AI
        try:
            value = minimax(board, 0, False)
        finally:
            board.cells[row][col] = EMPTY
        if best_value is None or value > best_value:
            best, best_value = (row, col), value
    return best


def render(board: Board) -> str:
    """Draw the board compactly, followed by a blank line."""
    return "\n-----\n".join("|".join(row) for row in board.cells) + "\n\n"


def _player_turn(board: Board) -> None:
    while True:
        parts = input("Enter your move (row and column, 0-2): ").split()
        if len(parts) == 2:
            try:
                board.place(int(parts[0]), int(parts[1]), HUMAN)
                return
            except ValueError:
                pass
        print("Invalid move. Please enter valid row and column (0-2) for an empty cell.")


def main(argv: list[str] | None = None) -> int:
    """Play one interactive game; the human moves first."""
    parser = argparse.ArgumentParser(description="Play tic-tac-toe against a minimax opponent.")
    parser.parse_args(argv)

    board = Board()
    player_turn = True
    try:
        while True:
            print(render(board), end="")
            if player_turn:
                _player_turn(board)
                if board.is_winner(HUMAN):
                    print(render(board), end="")
                    print("Player O wins!")
                    break
            else:
                move = best_move(board)
                if move is not None:
                    board.place(*move, AI)
                if board.is_winner(AI):
                    print(render(board), end="")
                    print("Player X wins!")
                    break
            if board.is_full():
                print(render(board), end="")
                print("It's a draw!")
                break
            player_turn = not player_turn
    except EOFError:
        return 1
    return 0