from __future__ import annotations

from pathlib import Path
from typing import Dict

import matplotlib.pyplot as plt
import pandas as pd


def _style() -> None:
    plt.rcParams.update(
        {
            "figure.figsize": (8, 5),
            "axes.grid": True,
            "grid.alpha": 0.25,
            "axes.spines.top": False,
            "axes.spines.right": False,
            "legend.frameon": False,
        }
    )


def plot_nodes_by_ply(summary: pd.DataFrame, outpath: Path) -> None:
    _style()
    fig, ax = plt.subplots()

    ax.plot(summary.index, summary["nodes_full"], marker="o", label="plain minimax")
    ax.plot(summary.index, summary["nodes"], marker="o", label="alpha-beta")
    ax.set_yscale("log")

    ax.set_title("Nodes Searched per Position")
    ax.set_xlabel("moves already played")
    ax.set_ylabel("mean nodes (log scale)")
    ax.legend()

    fig.tight_layout()
    fig.savefig(outpath, dpi=160, bbox_inches="tight")
    plt.close(fig)


def plot_savings(df: pd.DataFrame, outpath: Path) -> None:
    _style()
    fig, ax = plt.subplots()

    ax.hist(df["savings"], bins=20, range=(0.0, 1.0))

    ax.set_title("Share of Nodes Skipped by Pruning")
    ax.set_xlabel("1 - pruned / unpruned")
    ax.set_ylabel("positions")

    fig.tight_layout()
    fig.savefig(outpath, dpi=160, bbox_inches="tight")
    plt.close(fig)


def make_figures(df: pd.DataFrame, summary: pd.DataFrame, figures_dir: Path) -> Dict[str, Path]:
    figures_dir.mkdir(parents=True, exist_ok=True)

    out = {
        "nodes_by_ply": figures_dir / "nodes_by_ply.png",
        "savings": figures_dir / "pruning_savings.png",
    }
    plot_nodes_by_ply(summary, out["nodes_by_ply"])
    plot_savings(df, out["savings"])
    return out
