from npuzzle.domains.board import Board


def manhattan_distance(b: Board) -> int:
    """Sum of Manhattan distances to goal positions (blank ignored)."""
    n = b.size
    dist = 0
    for r, row in enumerate(b.tiles):
        for c, tile in enumerate(row):
            if tile == 0:
                continue
            gr, gc = divmod(tile - 1, n)
            dist += abs(r - gr) + abs(c - gc)
    return dist
