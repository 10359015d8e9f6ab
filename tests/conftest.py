from __future__ import annotations

from typing import Iterable, Tuple

import pytest

from tictactoe import config
from tictactoe.core.board import Board
from tictactoe.types import Mark, Move


def play_moves(board: Board, moves: Iterable[Tuple[int, int]], first: Mark = Mark.PLAYER_A) -> Board:
    """Apply moves alternately, starting with `first`."""
    mark = first
    for r, c in moves:
        assert board.apply_move(Move(r, c), mark), f"illegal test move {(r, c)}"
        mark = mark.other()
    return board


@pytest.fixture
def plain_console(monkeypatch):
    monkeypatch.setattr(config, "USE_COLOR", False)
    monkeypatch.setattr(config, "CLEAR_SCREEN", False)
    monkeypatch.setattr(config, "AI_THINK_DELAY_SEC", 0)
