from npuzzle.domains.board import Board
from npuzzle.heuristics.manhattan import manhattan_distance


def linear_conflicts(b: Board) -> int:
    """Tiles sitting in their goal row (col) behind a larger tile of the same line."""
    n = b.size
    tiles = b.tiles
    conflicts = 0
    # Row conflicts
    for r in range(n):
        max_seen = 0
        for c in range(n):
            t = tiles[r][c]
            if t != 0 and (t - 1) // n == r:
                if t > max_seen:
                    max_seen = t
                else:
                    conflicts += 1
    # Column conflicts
    for c in range(n):
        max_seen = 0
        for r in range(n):
            t = tiles[r][c]
            if t != 0 and (t - 1) % n == c:
                if t > max_seen:
                    max_seen = t
                else:
                    conflicts += 1
    return conflicts


def heuristic(b: Board) -> int:
    """Manhattan + 2 per linear conflict (rows & columns)."""
    return manhattan_distance(b) + 2 * linear_conflicts(b)
