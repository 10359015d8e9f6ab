from __future__ import annotations
from typing import Dict

from tictactoe import config
from tictactoe.types import Mark

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"  # winning line

FG_RED = "\033[31m"
FG_BLUE = "\033[34m"
FG_CYAN = "\033[36m"

MARK_COLORS: Dict[Mark, str] = {
    Mark.PLAYER_A: FG_RED,
    Mark.PLAYER_B: FG_BLUE,
}


def c(s: str, *codes: str) -> str:
    if not config.USE_COLOR or not codes:
        return s
    return "".join(codes) + s + RESET
