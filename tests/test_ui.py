from __future__ import annotations

import pytest

from conftest import play_moves
from tictactoe.core.board import Board
from tictactoe.types import Mark, Move
from tictactoe.ui.prompts import parse_move
from tictactoe.ui.render import board_to_text, glyph


@pytest.mark.parametrize(
    "raw, expected",
    [("1 2", Move(1, 2)), (" 0   0 ", Move(0, 0)), ("2,1", Move(2, 1)), ("Q", None), ("exit", None)],
)
def test_parse_move(raw, expected):
    assert parse_move(raw, 3) == expected


@pytest.mark.parametrize("raw", ["3 0", "0 3", "-1 1", "1", "1 2 3", "a b", ""])
def test_parse_move_rejects(raw):
    with pytest.raises(ValueError):
        parse_move(raw, 3)


def test_glyphs():
    assert glyph(Mark.EMPTY) == " "
    assert glyph(Mark.PLAYER_A) == "X"
    assert glyph(Mark.PLAYER_B) == "O"


def test_board_text(plain_console):
    b = play_moves(Board(3), [(0, 0), (1, 1)])
    text = board_to_text(b)
    lines = text.splitlines()

    assert lines[0].split() == ["0", "1", "2"]
    assert "|X| | |" in lines[2]
    assert "| |O| |" in lines[4]
    assert "\033[" not in text


def test_winning_line_is_highlighted(monkeypatch):
    from tictactoe import config
    from tictactoe.ui.colors import REVERSE

    monkeypatch.setattr(config, "USE_COLOR", True)
    b = play_moves(Board(3), [(0, 0), (1, 1), (0, 1), (2, 1), (0, 2)])
    text = board_to_text(b, highlight=[(0, 0), (0, 1), (0, 2)])
    assert text.splitlines()[2].count(REVERSE) == 3
    assert REVERSE not in text.splitlines()[4]
