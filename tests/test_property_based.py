from __future__ import annotations

from math import inf
from typing import List

from hypothesis import assume, given, settings, strategies as st

from tictactoe.ai.minimax_agent import MinimaxAgent
from tictactoe.core.board import Board
from tictactoe.core.rules import classify
from tictactoe.types import GameStatus, Mark, Move

ALL_MOVES_3 = [Move(r, c) for r in range(3) for c in range(3)]


def _play(board: Board, moves: List[Move]) -> Mark:
    mark = Mark.PLAYER_A
    for m in moves:
        assert board.apply_move(m, mark)
        mark = mark.other()
    return mark


@given(st.integers(min_value=1, max_value=5).flatmap(
    lambda n: st.tuples(st.just(n), st.permutations([Move(r, c) for r in range(n) for c in range(n)]))
), st.data())
def test_played_count_matches_remaining(sized, data):
    n, order = sized
    k = data.draw(st.integers(min_value=0, max_value=n * n))
    b = Board(n)
    mark = Mark.PLAYER_A
    for m in order[:k]:
        assert b.apply_move(m, mark)
        mark = mark.other()
        assert b.played == n * n - len(b.remaining)

    for r in range(n):
        for c in range(n):
            assert (Move(r, c) in b.remaining) == (b.cell(r, c) is Mark.EMPTY)


@given(st.permutations(ALL_MOVES_3), st.integers(min_value=0, max_value=8))
def test_apply_then_undo_restores(order, k):
    b = Board(3)
    _play(b, order[:k])
    before = (b.rows(), set(b.remaining), b.played)

    m = order[k]
    assert b.apply_move(m, Mark.PLAYER_B)
    b.undo_move(m)
    assert (b.rows(), set(b.remaining), b.played) == before


@given(st.permutations(ALL_MOVES_3), st.integers(min_value=0, max_value=4))
def test_few_moves_are_always_in_progress(order, k):
    b = Board(3)
    for i, m in enumerate(order[:k]):
        # Any contents at all, even one side only
        b.apply_move(m, Mark.PLAYER_A if i % 3 else Mark.PLAYER_B)
    assert classify(b) is GameStatus.IN_PROGRESS


@settings(max_examples=25, deadline=None)
@given(st.permutations(ALL_MOVES_3), st.integers(min_value=2, max_value=6))
def test_pruned_and_unpruned_search_agree(order, k):
    b = Board(3)
    to_move = _play(b, order[:k])
    assume(classify(b) is GameStatus.IN_PROGRESS)
    before = (b.rows(), set(b.remaining), b.played)

    maximizing = to_move is Mark.PLAYER_A
    v_pruned, _ = MinimaxAgent(prune=True).search(b, b.remaining_moves(), 0, -inf, inf, maximizing)
    v_full, _ = MinimaxAgent(prune=False).search(b, b.remaining_moves(), 0, -inf, inf, maximizing)

    assert v_pruned == v_full
    assert (b.rows(), set(b.remaining), b.played) == before
