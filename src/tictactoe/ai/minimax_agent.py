from __future__ import annotations

from dataclasses import dataclass, field
from math import inf
import logging
import time
from typing import List, Optional, Tuple

from tictactoe.config import DRAW_SCORE, WIN_SCORE
from tictactoe.core.board import Board
from tictactoe.core.rules import classify
from tictactoe.game.state import GameState
from tictactoe.types import GameStatus, Mark, Move

logger = logging.getLogger(__name__)

SearchResult = Tuple[float, Optional[Move]]


def terminal_score(status: GameStatus, depth: int) -> Optional[int]:
    """
    Score a finished position from PLAYER_A's point of view.
    Depth is subtracted so that quicker wins outrank slower ones.
    """
    if status is GameStatus.DRAW:
        return DRAW_SCORE - depth
    if status is GameStatus.PLAYER_A_WINS:
        return WIN_SCORE - depth
    if status is GameStatus.PLAYER_B_WINS:
        return -WIN_SCORE - depth
    return None


@dataclass(slots=True)
class MinimaxAgent:
    """
    Exhaustive minimax with alpha-beta pruning.

    The agent owns no board: it plays candidate moves on the caller's board
    and takes each one back before trying the next, so the board is left
    exactly as it was found once a search returns.
    """

    name: str = "Minimax AI"
    prune: bool = True

    # Stats
    last_info: dict = field(default_factory=dict)

    _nodes: int = 0
    _cutoffs: int = 0

    def choose_move(self, state: GameState) -> Move:
        return self.best_move(state.board, maximizing=state.current is Mark.PLAYER_A)

    def best_move(self, board: Board, maximizing: bool) -> Move:
        _, move = self.evaluate(board, maximizing)
        if move is None:
            raise RuntimeError("Search of a live position returned no move.")
        return move

    def evaluate(self, board: Board, maximizing: bool) -> SearchResult:
        """Full-window search from the current position, recording stats in last_info."""
        status = classify(board)
        if status is not GameStatus.IN_PROGRESS:
            raise ValueError(f"Game is already over ({status.value}).")

        moves = board.remaining_moves()
        if not moves:
            raise ValueError("No valid moves.")

        self._nodes = 0
        self._cutoffs = 0
        start = time.perf_counter()

        score, move = self.search(board, moves, 0, -inf, inf, maximizing)

        elapsed = time.perf_counter() - start
        self.last_info = {
            "nodes": self._nodes,
            "cutoffs": self._cutoffs,
            "eval": int(score),
            "move": (move.row, move.col) if move is not None else None,
            "time_ms": max(1, int(elapsed * 1000)),
        }
        logger.debug("%s searched %s: %s", self.name, move, self.last_info)
        return score, move

    def search(
        self,
        board: Board,
        remaining: List[Move],
        depth: int,
        alpha: float,
        beta: float,
        maximizing: bool,
    ) -> SearchResult:
        self._nodes += 1

        term = terminal_score(classify(board), depth)
        if term is not None:
            return term, None

        mark = Mark.PLAYER_A if maximizing else Mark.PLAYER_B
        best_eval = -inf if maximizing else inf
        best: Optional[Move] = None

        for m in remaining:
            subset = [x for x in remaining if x != m]

            if not board.apply_move(m, mark):
                raise RuntimeError(f"Search tried to play occupied cell {m}.")
            value, _ = self.search(board, subset, depth + 1, alpha, beta, not maximizing)
            board.undo_move(m)

            # Strict comparison keeps the first move on ties
            if maximizing:
                if value > best_eval:
                    best_eval = value
                    best = m
                alpha = max(alpha, value)
            else:
                if value < best_eval:
                    best_eval = value
                    best = m
                beta = min(beta, value)

            if self.prune and alpha >= beta:
                self._cutoffs += 1
                break

        return best_eval, best


def best_move(board: Board, maximizing: bool) -> Move:
    return MinimaxAgent().best_move(board, maximizing)
