import itertools
import random

from npuzzle.domains.board import Board
from npuzzle.domains.solvability import (
    count_inversions, count_inversions_merge, is_solvable, is_board_solvable,
)


def test_inversions_ignore_blank():
    assert count_inversions((1, 2, 3, 4, 5, 6, 7, 8, 0)) == 0
    assert count_inversions((0, 2, 1, 3)) == 1
    assert count_inversions((8, 7, 6, 5, 4, 3, 2, 1, 0)) == 28


def test_merge_count_matches_pairwise():
    rng = random.Random(0)
    for n in (2, 3, 4, 5):
        for _ in range(200):
            flat = list(range(n * n))
            rng.shuffle(flat)
            assert count_inversions_merge(flat) == count_inversions(flat)


def test_goal_is_solvable_for_every_size():
    for n in range(2, 7):
        assert is_board_solvable(Board.new(n))


def test_adjacent_swap_is_unsolvable():
    b = Board.from_rows([[2, 1, 3], [4, 5, 6], [7, 8, 0]])
    assert not is_board_solvable(b)
    b4 = Board.new(4)
    b4.tiles[0][0], b4.tiles[0][1] = b4.tiles[0][1], b4.tiles[0][0]
    assert not is_board_solvable(b4)


def test_agrees_with_reachability_2x2(dist2):
    for perm in itertools.permutations(range(4)):
        z = perm.index(0)
        assert is_solvable(perm, 2, z // 2) == (perm in dist2)


def test_agrees_with_reachability_3x3(dist3):
    assert len(dist3) == 181440
    for perm in itertools.permutations(range(9)):
        z = perm.index(0)
        assert is_solvable(perm, 3, z // 3) == (perm in dist3)


def test_vertical_blank_move_keeps_parity_4x4():
    for seed in range(30):
        assert is_board_solvable(Board.scramble(4, 40, seed))
