from __future__ import annotations
from dataclasses import dataclass

from tictactoe.core.board import Board
from tictactoe.types import Mark


@dataclass(slots=True)
class GameState:
    board: Board
    current: Mark
    last_status: str = "Crosses start."
