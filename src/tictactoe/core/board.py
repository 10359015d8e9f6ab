# src/tictactoe/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Set, Tuple

from tictactoe.config import BOARD_SIZE
from tictactoe.types import Mark, Move


@dataclass(slots=True)
class Board:
    size: int = BOARD_SIZE
    grid: List[List[Mark]] = field(default_factory=list)
    remaining: Set[Move] = field(default_factory=set)
    played: int = 0

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError("Board size must be at least 1.")
        if not self.grid:
            self.grid = [[Mark.EMPTY for _ in range(self.size)] for _ in range(self.size)]
        else:
            if len(self.grid) != self.size or any(len(row) != self.size for row in self.grid):
                raise ValueError(f"Grid must be {self.size}x{self.size}.")
            self.grid = [row[:] for row in self.grid]
        # Derive the bookkeeping from the grid so both always agree.
        self.remaining = {
            Move(r, c)
            for r in range(self.size)
            for c in range(self.size)
            if self.grid[r][c] is Mark.EMPTY
        }
        self.played = self.size * self.size - len(self.remaining)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def cell(self, row: int, col: int) -> Mark:
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) is outside the board.")
        return self.grid[row][col]

    def rows(self) -> Tuple[Tuple[Mark, ...], ...]:
        """Read-only snapshot of the grid, for rendering."""
        return tuple(tuple(row) for row in self.grid)

    def remaining_moves(self) -> List[Move]:
        # Row-major order decides which of several equal moves the search picks.
        return sorted(self.remaining)

    def apply_move(self, move: Move, mark: Mark) -> bool:
        if mark is Mark.EMPTY:
            raise ValueError("Cannot play an EMPTY mark.")
        if move not in self.remaining:
            return False

        self.remaining.remove(move)
        self.grid[move.row][move.col] = mark
        self.played += 1
        return True

    def undo_move(self, move: Move) -> None:
        """
        Take back a move previously applied with apply_move.
        Only the search calls this, always on the move it just played.
        """
        if not self.in_bounds(move.row, move.col):
            raise RuntimeError(f"Cannot undo {move}: outside the board.")
        if self.grid[move.row][move.col] is Mark.EMPTY:
            raise RuntimeError(f"Cannot undo {move}: cell is empty.")

        self.grid[move.row][move.col] = Mark.EMPTY
        self.remaining.add(move)
        self.played -= 1
