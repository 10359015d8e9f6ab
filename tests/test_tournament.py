from __future__ import annotations

import csv
from functools import partial

import pytest

from tictactoe.ai.minimax_agent import MinimaxAgent
from tictactoe.ai.random_agent import RandomAgent
from tictactoe.scripts.match_play import Entrant, Standing, play_headless
from tictactoe.scripts.tournament import CSV_COLUMNS, default_entrants, export_csv, main, round_robin
from tictactoe.types import GameStatus, Mark


def _entrants():
    return [
        Entrant("Minimax", partial(MinimaxAgent, name="Minimax")),
        Entrant("Random", partial(RandomAgent, name="Random")),
    ]


def test_standing_records_from_each_side():
    s = Standing()
    no_search = {"moves": 3, "nodes": 0, "time_ms": 0}
    s.record(GameStatus.PLAYER_A_WINS, Mark.PLAYER_A, no_search)
    s.record(GameStatus.PLAYER_A_WINS, Mark.PLAYER_B, no_search)
    s.record(GameStatus.PLAYER_B_WINS, Mark.PLAYER_B, no_search)
    s.record(GameStatus.DRAW, Mark.PLAYER_A, {"moves": 5, "nodes": 40, "time_ms": 2})

    assert (s.wins, s.draws, s.losses) == (2, 1, 1)
    assert s.games == 4
    assert s.points == 2.5
    assert s.score_rate == pytest.approx(0.625)
    assert s.moves == 14
    assert s.nodes_per_move == pytest.approx(40 / 14)


def test_empty_standing_rates_are_zero():
    s = Standing()
    assert s.score_rate == 0.0
    assert s.nodes_per_move == 0.0


def test_headless_game_counts_moves():
    status, stats = play_headless(MinimaxAgent(), MinimaxAgent())
    assert status is GameStatus.DRAW
    assert stats[Mark.PLAYER_A]["moves"] == 5
    assert stats[Mark.PLAYER_B]["moves"] == 4
    assert stats[Mark.PLAYER_A]["nodes"] > stats[Mark.PLAYER_B]["nodes"] > 0


def test_headless_opening_is_seeded():
    first = play_headless(RandomAgent(), RandomAgent(), seed=3, opening_plies=2)
    again = play_headless(RandomAgent(), RandomAgent(), seed=3, opening_plies=2)
    assert first == again


def test_headless_opening_moves_are_not_counted():
    _, stats = play_headless(MinimaxAgent(), MinimaxAgent(), seed=5, opening_plies=2)
    assert stats[Mark.PLAYER_A]["moves"] + stats[Mark.PLAYER_B]["moves"] <= 7


def test_round_robin_minimax_is_unbeaten():
    table = round_robin(_entrants(), games_per_pair=4, opening_plies=0, seed=7)
    mm, rnd = table["Minimax"], table["Random"]
    assert mm.games == rnd.games == 4
    assert mm.losses == 0
    assert mm.wins == rnd.losses
    assert mm.moves > 0 and mm.nodes > 0
    assert rnd.nodes == 0


def test_default_entrants_include_unpruned_search():
    names = [e.name for e in default_entrants()]
    assert names == ["Minimax", "Minimax (no pruning)", "Random"]
    assert default_entrants()[1].make().prune is False


def test_export_csv(tmp_path):
    table = round_robin(_entrants(), games_per_pair=2, opening_plies=0)
    out = export_csv(table, tmp_path / "nested" / "results.csv")

    with open(out, newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0] == CSV_COLUMNS
    assert [r[0] for r in rows[1:]] == ["Minimax", "Random"]


def test_main_writes_csv(tmp_path, capsys):
    out = tmp_path / "t.csv"
    assert main(["--games", "2", "--out", str(out)]) == 0
    assert out.exists()
    text = capsys.readouterr().out
    assert "TOURNAMENT RESULTS" in text
    assert "Minimax (no pruning)" in text
