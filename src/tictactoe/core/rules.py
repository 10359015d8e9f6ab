from __future__ import annotations
from typing import Iterator, List, Optional

from tictactoe.core.board import Board
from tictactoe.types import Coord, GameStatus, Mark


def _lines(n: int) -> Iterator[List[Coord]]:
    # Rows, columns, main diagonal, anti-diagonal
    for r in range(n):
        yield [(r, c) for c in range(n)]
    for c in range(n):
        yield [(r, c) for r in range(n)]
    yield [(i, i) for i in range(n)]
    yield [(i, n - 1 - i) for i in range(n)]


def winning_line(board: Board, mark: Mark) -> Optional[List[Coord]]:
    if mark is Mark.EMPTY:
        raise ValueError("EMPTY cannot win.")

    g = board.grid
    for line in _lines(board.size):
        if all(g[r][c] is mark for r, c in line):
            return line
    return None


def player_wins(board: Board, mark: Mark) -> bool:
    return winning_line(board, mark) is not None


def min_moves_to_finish(n: int) -> int:
    """Fewest moves (both sides) before any full line can exist."""
    return 2 * n - 1


def classify(board: Board) -> GameStatus:
    if board.played < min_moves_to_finish(board.size):
        return GameStatus.IN_PROGRESS

    if player_wins(board, Mark.PLAYER_A):
        return GameStatus.PLAYER_A_WINS
    if player_wins(board, Mark.PLAYER_B):
        return GameStatus.PLAYER_B_WINS

    if board.played == board.size * board.size:
        return GameStatus.DRAW

    return GameStatus.IN_PROGRESS


def winner_with_line(board: Board) -> Optional[tuple[Mark, List[Coord]]]:
    status = classify(board)
    if status is GameStatus.PLAYER_A_WINS:
        mark = Mark.PLAYER_A
    elif status is GameStatus.PLAYER_B_WINS:
        mark = Mark.PLAYER_B
    else:
        return None

    line = winning_line(board, mark)
    if line is None:
        raise RuntimeError(f"{status.value} reported without a full line.")
    return mark, line
