# tests/test_ranker.py
from mancala_search.engine.core import Bin, new_board, replay
from mancala_search.search.ranker import (
    RankedPath, find_max_paths, format_path, format_result, rank_key, search,
)
from mancala_search.search.tree import Branching, Terminal, build_tree

def _leaf(make_board, store):
    return Terminal(make_board([0] * 6, [0] * 6, my_store=store))

def test_sorted_by_score_then_length(make_board):
    inner = Branching((_leaf(make_board, 5), None, None, None, None, _leaf(make_board, 3)))
    tree = Branching((_leaf(make_board, 3), None, inner, _leaf(make_board, 5), None, None))
    assert find_max_paths(tree) == [
        RankedPath(5, (Bin.D,)),
        RankedPath(5, (Bin.C, Bin.A)),
        RankedPath(3, (Bin.A,)),
        RankedPath(3, (Bin.C, Bin.F)),
    ]

def test_ties_keep_traversal_order(make_board):
    tree = Branching((None, _leaf(make_board, 2), None, None, _leaf(make_board, 2), _leaf(make_board, 2)))
    assert [r.path for r in find_max_paths(tree)] == [(Bin.B,), (Bin.E,), (Bin.F,)]

def test_degenerate_board():
    assert search(0) == [RankedPath(0, ())]

def test_scenario_four_stones(ranked4):
    assert ranked4
    best = ranked4[0]
    assert len(best.path) >= 1
    board, _ = replay(new_board(4), best.path)
    assert board.sides[0].store == best.score
    assert best.score + (board.total_stones() - board.sides[0].store) == 48

def test_ranking_is_ordered(ranked4):
    for a, b in zip(ranked4, ranked4[1:]):
        assert a.score >= b.score
        if a.score == b.score:
            assert len(a.path) <= len(b.path)

def test_resort_is_idempotent(ranked4):
    assert sorted(ranked4, key=rank_key) == ranked4

def test_formatting():
    entry = RankedPath(12, (Bin.C, Bin.F, Bin.A))
    assert format_path(entry.path) == "CFA"
    assert format_result(entry) == "12 via CFA"

def test_bonus_that_empties_my_side_is_not_ranked(make_board):
    board = make_board([0, 0, 0, 0, 0, 1], [1] * 6)
    assert find_max_paths(build_tree(board)) == []

def test_four_stone_path_count(ranked4):
    assert len(ranked4) == 26278
    assert all(len(r.path) >= 1 for r in ranked4)
