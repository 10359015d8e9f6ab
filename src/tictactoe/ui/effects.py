from __future__ import annotations
import sys
import time
from typing import Optional, TextIO

from tictactoe import config

FRAMES = "|/-\\"


def ai_thinking(label: str = "AI is thinking", stream: Optional[TextIO] = None) -> None:
    """Pause briefly before an engine move, with a spinner on a terminal."""
    delay = config.AI_THINK_DELAY_SEC
    if delay <= 0:
        return

    out = stream or sys.stdout
    if not (config.AI_THINKING_SPINNER and out.isatty()):
        time.sleep(delay)
        return

    deadline = time.monotonic() + delay
    i = 0
    while time.monotonic() < deadline:
        out.write(f"\r{label}... {FRAMES[i % len(FRAMES)]}")
        out.flush()
        time.sleep(0.08)
        i += 1
    out.write("\r" + " " * (len(label) + 10) + "\r")
    out.flush()
