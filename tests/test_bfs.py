from npuzzle.domains.board import Board, Move
from npuzzle.search.bfs import bfs, successors


def test_component_sizes(dist2, dist3):
    assert len(dist2) == 12
    assert max(dist3.values()) == 31


def test_bfs_one_move():
    r = bfs(Board.from_rows([[1, 2, 3], [4, 5, 0], [7, 8, 6]]))
    assert r["termination"] == "ok"
    assert r["moves"] == [Move.UP]
    assert r["g"] == 1


def test_bfs_unsolvable_exhausts():
    r = bfs(Board.from_rows([[2, 1], [3, 0]]))
    assert r["termination"] == "exhausted"
    assert r["g"] is None


def test_successors_follow_move_offsets():
    succ = dict((m, s) for s, m in successors(Board.new(3).flatten(), 3))
    assert set(succ) == {Move.DOWN, Move.RIGHT}
    assert succ[Move.DOWN] == (1, 2, 3, 4, 5, 0, 7, 8, 6)
