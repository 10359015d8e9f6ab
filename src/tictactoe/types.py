# src/tictactoe/types.py

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Mark(Enum):
    EMPTY = 0
    PLAYER_A = 1  # maximizing side, moves first
    PLAYER_B = 2

    def other(self) -> "Mark":
        if self is Mark.PLAYER_A:
            return Mark.PLAYER_B
        if self is Mark.PLAYER_B:
            return Mark.PLAYER_A
        raise ValueError("EMPTY has no opponent.")


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    DRAW = "draw"
    PLAYER_A_WINS = "player_a_wins"
    PLAYER_B_WINS = "player_b_wins"


@dataclass(frozen=True, order=True, slots=True)
class Move:
    row: int
    col: int


Coord = Tuple[int, int]  # (row, col)
