import random

import pytest
from npuzzle.domains.board import Board, Move, MOVES, replay
from npuzzle.domains.solvability import is_board_solvable


def test_new_is_goal():
    b = Board.new(3)
    assert b.tiles == [[1, 2, 3], [4, 5, 6], [7, 8, 0]]
    assert (b.blank_row, b.blank_col) == (2, 2)
    assert b.is_solved()
    assert Board.goal(4).flatten() == tuple(range(1, 16)) + (0,)


def test_size_must_be_at_least_two():
    with pytest.raises(ValueError):
        Board.new(1)


def test_from_rows_validates():
    with pytest.raises(ValueError):
        Board.from_rows([[1, 2], [3, 3]])
    with pytest.raises(ValueError):
        Board.from_rows([[1, 2, 3], [0, 4]])
    b = Board.from_rows([[1, 2, 3], [4, 5, 0], [7, 8, 6]])
    assert (b.blank_row, b.blank_col) == (1, 2)
    assert not b.is_solved()


def test_opposites():
    assert Move.UP.opposite() is Move.DOWN
    assert Move.LEFT.opposite() is Move.RIGHT
    for m in MOVES:
        assert m.opposite().opposite() is m
    assert str(Move.LEFT) == "Left"


def test_apply_move_out_of_bounds_is_noop():
    b = Board.new(3)
    before = b.copy()
    # blank is bottom-right: it cannot go further down or right
    assert b.apply_move(Move.UP) is False
    assert b.apply_move(Move.LEFT) is False
    assert b == before
    assert (b.blank_row, b.blank_col) == (2, 2)


def test_apply_move_swaps_blank():
    b = Board.new(3)
    assert b.apply_move(Move.DOWN) is True
    assert b.tiles == [[1, 2, 3], [4, 5, 0], [7, 8, 6]]
    assert (b.blank_row, b.blank_col) == (1, 2)
    assert b.apply_move(Move.RIGHT) is True
    assert b.tiles == [[1, 2, 3], [4, 0, 5], [7, 8, 6]]


def test_move_then_opposite_restores():
    rng = random.Random(7)
    for size in (2, 3, 4):
        for _ in range(20):
            b = Board.new(size)
            b.shuffle(rng)
            for m in MOVES:
                c = b.copy()
                if c.apply_move(m):
                    assert c.apply_move(m.opposite())
                    assert c == b
                    assert (c.blank_row, c.blank_col) == (b.blank_row, b.blank_col)


def test_try_move_does_not_touch_parent():
    b = Board.new(3)
    child = b.try_move(Move.DOWN)
    assert child is not None and child != b
    assert b.is_solved()
    assert b.try_move(Move.UP) is None


def test_scramble_is_reproducible_and_solvable():
    a = Board.scramble(4, 30, seed=3)
    b = Board.scramble(4, 30, seed=3)
    assert a == b
    assert is_board_solvable(a)


def test_shuffle_keeps_blank_consistent():
    for seed in range(20):
        b = Board.new(4)
        b.shuffle(random.Random(seed))
        assert sorted(b.flatten()) == list(range(16))
        assert b.tiles[b.blank_row][b.blank_col] == 0
        assert is_board_solvable(b)


def test_render():
    assert str(Board.new(2)) == " 1  2 \n 3  0 \n"


def test_replay_rejects_illegal_move():
    with pytest.raises(ValueError):
        replay(Board.new(3), [Move.UP])
    states = replay(Board.new(3), [Move.DOWN, Move.UP])
    assert len(states) == 3
    assert states[0] == states[2]
