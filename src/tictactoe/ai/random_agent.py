from __future__ import annotations
from dataclasses import dataclass, field
import random

from tictactoe.game.state import GameState
from tictactoe.types import Move


@dataclass(slots=True)
class RandomAgent:
    name: str = "Random AI"
    rng: random.Random = field(default_factory=random.Random)

    def choose_move(self, state: GameState) -> Move:
        moves = state.board.remaining_moves()
        if not moves:
            raise ValueError("No valid moves.")
        return self.rng.choice(moves)
