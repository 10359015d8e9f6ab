from __future__ import annotations

from typing import Dict, List

from tictactoe.core.board import Board
from tictactoe.core.rules import classify
from tictactoe.types import GameStatus, Mark

KEY_CHARS = {Mark.EMPTY: ".", Mark.PLAYER_A: "x", Mark.PLAYER_B: "o"}
Grid = List[List[Mark]]


def position_key(board: Board) -> str:
    """Compact text form, rows separated by '/', e.g. 'x../.o./...'."""
    return "/".join("".join(KEY_CHARS[m] for m in row) for row in board.rows())


def side_to_move(board: Board) -> Mark:
    return Mark.PLAYER_A if board.played % 2 == 0 else Mark.PLAYER_B


def reachable_positions(size: int, min_plies: int, max_plies: int) -> Dict[str, Grid]:
    """
    Every distinct unfinished position reachable in play with between
    min_plies and max_plies moves made, crosses moving first.
    """
    found: Dict[str, Grid] = {}
    visited = set()
    board = Board(size)

    def walk() -> None:
        key = position_key(board)
        if key in visited:
            return
        visited.add(key)

        if classify(board) is not GameStatus.IN_PROGRESS:
            return
        if board.played >= min_plies:
            found[key] = [list(row) for row in board.rows()]
        if board.played >= max_plies:
            return

        mark = side_to_move(board)
        for m in board.remaining_moves():
            board.apply_move(m, mark)
            walk()
            board.undo_move(m)

    walk()
    return found
