# src/tictactoe/config.py

from __future__ import annotations

BOARD_SIZE = 3

# Terminal scores; depth is subtracted so faster wins score higher
WIN_SCORE = 1000
DRAW_SCORE = 0

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# “AI thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = 0.6

# Match runner output
RESULTS_DIR = "data/results"
