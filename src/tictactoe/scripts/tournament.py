from __future__ import annotations

import argparse
import csv
import logging
import time
from functools import partial
from itertools import combinations
from pathlib import Path
from typing import Dict, List

from tictactoe import config
from tictactoe.ai.minimax_agent import MinimaxAgent
from tictactoe.ai.random_agent import RandomAgent
from tictactoe.types import Mark

from .match_play import Entrant, Standing, play_headless

logger = logging.getLogger(__name__)

CSV_COLUMNS = ["name", "games", "wins", "draws", "losses", "points", "score_rate", "moves", "nodes", "nodes_per_move", "time_ms"]


def default_entrants() -> List[Entrant]:
    return [
        Entrant("Minimax", partial(MinimaxAgent, name="Minimax")),
        Entrant("Minimax (no pruning)", partial(MinimaxAgent, name="Minimax (no pruning)", prune=False)),
        Entrant("Random", partial(RandomAgent, name="Random")),
    ]


def round_robin(
    entrants: List[Entrant],
    games_per_pair: int = 2,
    size: int = config.BOARD_SIZE,
    seed: int = 1234,
    opening_plies: int = 2,
) -> Dict[str, Standing]:
    """Each pair meets games_per_pair times; the first mover alternates."""
    table = {e.name: Standing() for e in entrants}

    for pair_no, pair in enumerate(combinations(entrants, 2)):
        for g in range(games_per_pair):
            crosses, circles = pair if g % 2 == 0 else pair[::-1]
            status, stats = play_headless(
                crosses.make(),
                circles.make(),
                size=size,
                seed=seed + 1000 * pair_no + g,
                opening_plies=opening_plies,
            )
            table[crosses.name].record(status, Mark.PLAYER_A, stats[Mark.PLAYER_A])
            table[circles.name].record(status, Mark.PLAYER_B, stats[Mark.PLAYER_B])
            logger.debug("%s (X) vs %s (O): %s", crosses.name, circles.name, status.value)

        logger.info("Finished %s vs %s", pair[0].name, pair[1].name)

    return table


def export_csv(table: Dict[str, Standing], out_path: Path) -> Path:
    out_path.parent.mkdir(parents=True, exist_ok=True)

    with open(out_path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(CSV_COLUMNS)
        for name, s in table.items():
            w.writerow([
                name, s.games, s.wins, s.draws, s.losses, s.points,
                round(s.score_rate, 4), s.moves, s.nodes, round(s.nodes_per_move, 1), s.time_ms,
            ])

    return out_path


def print_standings(table: Dict[str, Standing]) -> None:
    ranked = sorted(table.items(), key=lambda kv: kv[1].score_rate, reverse=True)
    width = max(len(name) for name in table)

    print(f"{'agent':<{width}}  {'W-D-L':>8}  {'score':>6}  {'nodes/move':>10}")
    for name, s in ranked:
        wdl = f"{s.wins}-{s.draws}-{s.losses}"
        print(f"{name:<{width}}  {wdl:>8}  {s.score_rate:>6.2f}  {s.nodes_per_move:>10.1f}")


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Round-robin between the minimax engine and baseline agents.")
    ap.add_argument("--games", type=int, default=4, help="Games per pairing (sides alternate)")
    ap.add_argument("--size", type=int, default=config.BOARD_SIZE, help="Board size N")
    ap.add_argument("--seed", type=int, default=1234, help="Base seed for openings and random agents")
    ap.add_argument("--opening-plies", type=int, default=2, help="Random moves played before agents take over")
    ap.add_argument("--out", type=str, default=None, help="CSV path (default: RESULTS_DIR/tournament_<timestamp>.csv)")
    ap.add_argument("--no-export", action="store_true", help="Only print the standings")
    ap.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    table = round_robin(
        default_entrants(),
        games_per_pair=args.games,
        size=args.size,
        seed=args.seed,
        opening_plies=args.opening_plies,
    )

    print("\n=== TOURNAMENT RESULTS ===")
    print_standings(table)

    if not args.no_export:
        out = Path(args.out) if args.out else Path(config.RESULTS_DIR) / f"tournament_{time.strftime('%Y%m%d_%H%M%S')}.csv"
        export_csv(table, out)
        print(f"\nWrote CSV: {out}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
