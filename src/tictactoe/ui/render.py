from __future__ import annotations
from typing import Dict, Iterable, Optional, Set

from tictactoe import config
from tictactoe.core.board import Board
from tictactoe.types import Coord, Mark
from tictactoe.ui.colors import MARK_COLORS, c, BOLD, DIM, FG_CYAN, REVERSE

GLYPHS: Dict[Mark, str] = {
    Mark.EMPTY: " ",
    Mark.PLAYER_A: "X",
    Mark.PLAYER_B: "O",
}

MARK_NAMES: Dict[Mark, str] = {
    Mark.PLAYER_A: "Crosses",
    Mark.PLAYER_B: "Circles",
}


def glyph(mark: Mark) -> str:
    return GLYPHS[mark]


def _piece(mark: Mark) -> str:
    code = MARK_COLORS.get(mark)
    return c(glyph(mark), code) if code else glyph(mark)


def board_to_text(board: Board, highlight: Optional[Iterable[Coord]] = None) -> str:
    hl: Set[Coord] = set(highlight) if highlight else set()
    n = board.size

    lines = [c("   " + " ".join(str(i) for i in range(n)), DIM)]
    sep = c("  " + "-" * (2 * n + 1), DIM)
    for r, row in enumerate(board.rows()):
        lines.append(sep)
        parts = []
        for col, mark in enumerate(row):
            if (r, col) in hl:
                p = c(glyph(mark), REVERSE, MARK_COLORS.get(mark, ""))
            else:
                p = _piece(mark)
            parts.append(p)
        lines.append(f"{c(str(r), DIM)} |" + "|".join(parts) + "|")
    lines.append(sep)
    return "\n".join(lines)


def clear_screen() -> None:
    if config.CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def render(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    print(c(f"TIC-TAC-TOE {board.size}x{board.size}", BOLD))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    print(board_to_text(board, highlight))
    print(c("   Enter: row column. Enter q to quit.", DIM))
