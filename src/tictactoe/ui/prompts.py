from __future__ import annotations
from typing import Optional

from tictactoe.types import Move


def parse_move(raw: str, size: int) -> Optional[Move]:
    """Parse "row column" (0-based). Returns None when the player quits."""
    s = raw.strip().lower()
    if s in {"q", "quit", "exit"}:
        return None

    parts = s.replace(",", " ").split()
    if len(parts) != 2 or not all(p.lstrip("-").isdigit() for p in parts):
        raise ValueError("Invalid input. Enter two numbers: row column (or q).")

    row, col = (int(p) for p in parts)
    if not (0 <= row < size and 0 <= col < size):
        raise ValueError(f"Row and column must be between 0 and {size - 1}.")
    return Move(row, col)


def ask_yes_no(question: str) -> bool:
    answer = input(f"{question}(y/n) ").strip().lower()
    return answer in {"y", "yes"}
