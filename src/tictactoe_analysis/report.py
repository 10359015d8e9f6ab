from __future__ import annotations

import pandas as pd

from tictactoe import config


def effort_by_ply(df: pd.DataFrame) -> pd.DataFrame:
    """Mean search effort per number of moves already played."""
    return df.groupby("plies").agg(
        positions=("key", "size"),
        nodes=("nodes", "mean"),
        nodes_full=("nodes_full", "mean"),
        cutoffs=("cutoffs", "mean"),
        savings=("savings", "mean"),
    )


def disagreements(df: pd.DataFrame) -> pd.DataFrame:
    """Rows where pruning changed the value or the chosen move. Expected empty."""
    mask = (df["value"] != df["value_full"]) | (df["best_move"] != df["best_move_full"])
    return df[mask]


def outcome(value: int) -> str:
    if value >= config.WIN_SCORE // 2:
        return "crosses win"
    if value <= -config.WIN_SCORE // 2:
        return "circles win"
    return "draw"


def outcomes_by_ply(df: pd.DataFrame) -> pd.DataFrame:
    """Result of each position under best play, counted per ply."""
    return pd.crosstab(df["plies"], df["value"].map(outcome).rename("result"))
