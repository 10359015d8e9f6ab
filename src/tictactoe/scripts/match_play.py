from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from tictactoe.core.board import Board
from tictactoe.core.rules import classify
from tictactoe.game.state import GameState
from tictactoe.types import GameStatus, Mark

SideStats = Dict[str, int]


@dataclass(frozen=True)
class Entrant:
    name: str
    make: Callable[[], object]


@dataclass
class Standing:
    """Running record of one entrant across a round-robin."""

    wins: int = 0
    draws: int = 0
    losses: int = 0
    moves: int = 0
    nodes: int = 0
    time_ms: int = 0

    @property
    def games(self) -> int:
        return self.wins + self.draws + self.losses

    @property
    def points(self) -> float:
        return self.wins + 0.5 * self.draws

    @property
    def score_rate(self) -> float:
        return self.points / self.games if self.games else 0.0

    @property
    def nodes_per_move(self) -> float:
        return self.nodes / self.moves if self.moves else 0.0

    def record(self, status: GameStatus, side: Mark, stats: SideStats) -> None:
        if status is GameStatus.DRAW:
            self.draws += 1
        elif (status is GameStatus.PLAYER_A_WINS) == (side is Mark.PLAYER_A):
            self.wins += 1
        else:
            self.losses += 1

        self.moves += stats["moves"]
        self.nodes += stats["nodes"]
        self.time_ms += stats["time_ms"]


def play_headless(
    agent_a,
    agent_b,
    size: int | None = None,
    seed: int = 0,
    opening_plies: int = 0,
) -> Tuple[GameStatus, Dict[Mark, SideStats]]:
    """
    Play one game without rendering and return the final status plus
    per-side move counts and search effort.
    """
    board = Board() if size is None else Board(size)
    state = GameState(board=board, current=Mark.PLAYER_A, last_status="")
    stats = {m: {"moves": 0, "nodes": 0, "time_ms": 0} for m in (Mark.PLAYER_A, Mark.PLAYER_B)}

    rng = random.Random(seed)
    for agent in (agent_a, agent_b):
        if isinstance(getattr(agent, "rng", None), random.Random):
            agent.rng.seed(rng.getrandbits(32))

    # A few random plies so deterministic engines do not replay one game
    for _ in range(opening_plies):
        if classify(board) is not GameStatus.IN_PROGRESS:
            break
        board.apply_move(rng.choice(board.remaining_moves()), state.current)
        state.current = state.current.other()

    status = classify(board)
    while status is GameStatus.IN_PROGRESS:
        agent = agent_a if state.current is Mark.PLAYER_A else agent_b
        move = agent.choose_move(state)
        if not board.apply_move(move, state.current):
            raise ValueError(f"{getattr(agent, 'name', 'agent')} played illegal move {move}.")

        info = getattr(agent, "last_info", None) or {}
        side = stats[state.current]
        side["moves"] += 1
        side["nodes"] += int(info.get("nodes", 0))
        side["time_ms"] += int(info.get("time_ms", 0))

        state.current = state.current.other()
        status = classify(board)

    return status, stats
