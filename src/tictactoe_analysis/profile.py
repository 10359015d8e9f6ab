from __future__ import annotations

import logging
from typing import Optional

import pandas as pd

from tictactoe.ai.minimax_agent import MinimaxAgent
from tictactoe.core.board import Board
from tictactoe.types import Mark, Move

from .positions import reachable_positions, side_to_move

logger = logging.getLogger(__name__)

PROFILE_COLUMNS = [
    "key", "plies", "to_move",
    "value", "value_full",
    "best_move", "best_move_full",
    "nodes", "nodes_full", "cutoffs",
    "savings",
]


def _fmt(move: Optional[Move]) -> str:
    return "" if move is None else f"{move.row} {move.col}"


def profile_position(board: Board, key: str = "") -> dict:
    """Search one position with and without pruning and compare the effort."""
    maximizing = side_to_move(board) is Mark.PLAYER_A

    pruned = MinimaxAgent(name="pruned")
    full = MinimaxAgent(name="full", prune=False)
    value, move = pruned.evaluate(board, maximizing)
    value_full, move_full = full.evaluate(board, maximizing)

    nodes, nodes_full = pruned.last_info["nodes"], full.last_info["nodes"]
    return {
        "key": key,
        "plies": board.played,
        "to_move": "x" if maximizing else "o",
        "value": int(value),
        "value_full": int(value_full),
        "best_move": _fmt(move),
        "best_move_full": _fmt(move_full),
        "nodes": nodes,
        "nodes_full": nodes_full,
        "cutoffs": pruned.last_info["cutoffs"],
        "savings": 1.0 - nodes / nodes_full,
    }


def profile_positions(size: int, min_plies: int, max_plies: int, limit: Optional[int] = None) -> pd.DataFrame:
    positions = reachable_positions(size, min_plies, max_plies)
    logger.info("Profiling %d positions (size %d, plies %d-%d)", len(positions), size, min_plies, max_plies)

    rows = []
    for i, (key, grid) in enumerate(sorted(positions.items())):
        if limit is not None and i >= limit:
            break
        rows.append(profile_position(Board(size, grid=grid), key))

    return pd.DataFrame(rows, columns=PROFILE_COLUMNS)
