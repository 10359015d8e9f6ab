from __future__ import annotations

import logging
from typing import Optional

from tictactoe.ai.base import Agent
from tictactoe.core.board import Board
from tictactoe.core.rules import classify, winner_with_line
from tictactoe.game.state import GameState
from tictactoe.ui.effects import ai_thinking
from tictactoe.ui.human import HumanAgent
from tictactoe.ui.prompts import parse_move
from tictactoe.ui.render import MARK_NAMES, glyph, render
from tictactoe.types import GameStatus, Mark

logger = logging.getLogger(__name__)

RESULT_MESSAGES = {
    GameStatus.DRAW: "Result is draw",
    GameStatus.PLAYER_A_WINS: "Crosses win",
    GameStatus.PLAYER_B_WINS: "Circles win",
}


def _header(status: str, agent_a: Agent, agent_b: Agent, current: Mark) -> str:
    # Line 1: who plays which mark and whose turn it is; line 2: last event
    names = " vs ".join(
        f"{glyph(mark)}={getattr(agent, 'name', None) or MARK_NAMES[mark]}"
        for mark, agent in ((Mark.PLAYER_A, agent_a), (Mark.PLAYER_B, agent_b))
    )
    lines = [f"{names} | to move: {glyph(current)}"]
    if status:
        lines.append(status)
    return "\n".join(lines)


def run_game(
    agent_a: Agent,
    agent_b: Agent,
    size: Optional[int] = None,
    show_thinking: bool = True,
) -> Optional[GameStatus]:
    """
    Alternate turns until the game ends. Crosses (agent_a) move first.
    Returns the final status, or None if a human quit.
    """
    board = Board() if size is None else Board(size)
    state = GameState(board=board, current=Mark.PLAYER_A)

    while True:
        render(
            state.board,
            _header(state.last_status, agent_a, agent_b, state.current),
        )

        current_agent = agent_a if state.current is Mark.PLAYER_A else agent_b
        player = MARK_NAMES[state.current]

        try:
            if isinstance(current_agent, HumanAgent):
                raw = input(f"{player} move: ")
                move = parse_move(raw, state.board.size)
                if move is None:
                    render(
                        state.board,
                        _header("Game quit.", agent_a, agent_b, state.current),
                    )
                    return None
                state.last_status = f"{player} chose {move.row} {move.col}"

            else:
                if show_thinking:
                    ai_thinking(f"{current_agent.name}")

                move = current_agent.choose_move(state)

                info = getattr(current_agent, "last_info", None)
                if info:
                    state.last_status = (
                        f"{current_agent.name} chose {move.row} {move.col} | "
                        f"nodes={info.get('nodes')} | "
                        f"cut={info.get('cutoffs')} | "
                        f"eval={info.get('eval')} | "
                        f"{info.get('time_ms')}ms"
                    )
                else:
                    state.last_status = f"{current_agent.name} chose {move.row} {move.col}"

            if not state.board.apply_move(move, state.current):
                raise ValueError(f"Cell {move.row} {move.col} is already taken.")

        except ValueError as e:
            state.last_status = str(e)
            continue

        logger.debug("%s played %s", player, move)

        status = classify(state.board)
        if status is not GameStatus.IN_PROGRESS:
            won = winner_with_line(state.board)
            render(
                state.board,
                _header(state.last_status, agent_a, agent_b, state.current),
                highlight=won[1] if won else None,
            )
            print(RESULT_MESSAGES[status])
            return status

        state.current = state.current.other()
