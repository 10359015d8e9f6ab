# src/tictactoe_analysis/__main__.py
from __future__ import annotations

import argparse
import logging
from pathlib import Path

import matplotlib.pyplot as plt

from tictactoe import config

from .charts import make_figures
from .profile import profile_positions
from .report import disagreements, effort_by_ply, outcomes_by_ply


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="tictactoe_analysis",
        description="Compare alpha-beta and plain minimax over every reachable position.",
    )
    ap.add_argument("--size", type=int, default=config.BOARD_SIZE, help="Board size N")
    ap.add_argument("--min-plies", type=int, default=2, help="Skip positions with fewer moves played")
    ap.add_argument("--max-plies", type=int, default=None, help="Skip positions with more moves played (default: N*N)")
    ap.add_argument("--limit", type=int, default=None, help="Profile at most this many positions")
    ap.add_argument("--csv", type=str, default=None, help="Write the per-position table here")
    ap.add_argument("--figures", type=str, default=None, help="Directory for PNG charts")
    ap.add_argument("--show", action="store_true", help="Open the charts in a window")
    ap.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    max_plies = args.size * args.size if args.max_plies is None else args.max_plies
    df = profile_positions(args.size, args.min_plies, max_plies, limit=args.limit)
    if df.empty:
        print("No unfinished positions in that range.")
        return 0

    summary = effort_by_ply(df)
    bad = disagreements(df)

    print("\n=== SEARCH EFFORT BY PLY ===")
    print(summary.round(2).to_string())
    print("\n=== OUTCOMES UNDER BEST PLAY ===")
    print(outcomes_by_ply(df).to_string())
    print(f"\nPositions: {len(df)}  pruning changed the result in: {len(bad)}")

    if args.csv:
        out = Path(args.csv)
        out.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(out, index=False)
        print(f"Wrote CSV: {out}")

    if args.figures:
        for name, path in make_figures(df, summary, Path(args.figures)).items():
            print(f"- {name}: {path}")
        if args.show:
            plt.show()

    return 1 if len(bad) else 0


if __name__ == "__main__":
    raise SystemExit(main())
