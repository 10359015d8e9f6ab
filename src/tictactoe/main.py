from __future__ import annotations

import argparse
import logging

from tictactoe import config
from tictactoe.ai.minimax_agent import MinimaxAgent
from tictactoe.game.controller import run_game
from tictactoe.ui.human import HumanAgent
from tictactoe.ui.prompts import ask_yes_no


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play full-line tic-tac-toe against a minimax engine.")
    ap.add_argument("--size", type=int, default=config.BOARD_SIZE, help="Board size N (the engine searches exhaustively, keep it small)")
    ap.add_argument("--first", choices=["y", "n"], default=None, help="Whether you move first. Asked interactively if omitted.")
    ap.add_argument("--no-color", action="store_true", help="Disable ANSI colours")
    ap.add_argument("--no-clear", action="store_true", help="Do not clear the screen between moves")
    ap.add_argument("--no-thinking", action="store_true", help="Skip the AI thinking delay")
    ap.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.size < 1:
        ap.error("--size must be at least 1")

    if args.no_color:
        config.USE_COLOR = False
    if args.no_clear:
        config.CLEAR_SCREEN = False

    if args.first is None:
        human_first = ask_yes_no("Are you first?")
    else:
        human_first = args.first == "y"

    human = HumanAgent()
    engine = MinimaxAgent()
    if human_first:
        run_game(human, engine, size=args.size, show_thinking=not args.no_thinking)
    else:
        run_game(engine, human, size=args.size, show_thinking=not args.no_thinking)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
