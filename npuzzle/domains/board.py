from __future__ import annotations
from enum import Enum
from typing import Tuple, List, Optional, Sequence, Iterable
import random

from npuzzle.domains.solvability import is_solvable

State = Tuple[int, ...]


class Move(Enum):
    """Direction the tile next to the blank slides; the blank goes the other way."""
    UP = "Up"
    DOWN = "Down"
    LEFT = "Left"
    RIGHT = "Right"

    @property
    def offset(self) -> Tuple[int, int]:
        """(d_row, d_col) applied to the blank."""
        return _OFFSETS[self]

    def opposite(self) -> "Move":
        return _OPPOSITE[self]

    def __str__(self) -> str:
        return self.value


_OFFSETS = {
    Move.UP: (1, 0),
    Move.DOWN: (-1, 0),
    Move.LEFT: (0, 1),
    Move.RIGHT: (0, -1),
}
_OPPOSITE = {
    Move.UP: Move.DOWN,
    Move.DOWN: Move.UP,
    Move.LEFT: Move.RIGHT,
    Move.RIGHT: Move.LEFT,
}

# Fixed expansion order used by the search
MOVES: Tuple[Move, ...] = (Move.UP, Move.DOWN, Move.LEFT, Move.RIGHT)


class Board:
    """N×N sliding-tile board (0 is the blank)."""

    def __init__(self, size: int, tiles: List[List[int]], blank_row: int, blank_col: int):
        self.size = size
        self.tiles = tiles
        self.blank_row = blank_row
        self.blank_col = blank_col

    # ---------- Construction ----------
    @classmethod
    def new(cls, size: int) -> "Board":
        """Goal arrangement: row-major ascending, blank bottom-right."""
        if size < 2:
            raise ValueError(f"board size must be >= 2, got {size}")
        flat = list(range(1, size * size)) + [0]
        tiles = [flat[r * size:(r + 1) * size] for r in range(size)]
        return cls(size, tiles, size - 1, size - 1)

    goal = new

    @classmethod
    def from_flat(cls, flat: Sequence[int], size: int) -> "Board":
        if size < 2:
            raise ValueError(f"board size must be >= 2, got {size}")
        if len(flat) != size * size:
            raise ValueError(f"expected {size * size} tiles, got {len(flat)}")
        if sorted(flat) != list(range(size * size)):
            raise ValueError("tiles must contain each of 0..N*N-1 exactly once")
        z = list(flat).index(0)
        tiles = [list(flat[r * size:(r + 1) * size]) for r in range(size)]
        return cls(size, tiles, z // size, z % size)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Board":
        n = len(rows)
        if any(len(r) != n for r in rows):
            raise ValueError("board must be square")
        return cls.from_flat([t for r in rows for t in r], n)

    @classmethod
    def scramble(cls, size: int, depth: int, seed: int) -> "Board":
        """Depth-limited random walk from goal with no immediate backtrack."""
        rng = random.Random(seed)
        b = cls.new(size)
        last: Optional[Move] = None
        for _ in range(depth):
            cand = [m for m in MOVES if b._in_bounds(m) and (last is None or m != last.opposite())]
            m = rng.choice(cand)
            b.apply_move(m)
            last = m
        return b

    def shuffle(self, rng: Optional[random.Random] = None) -> None:
        """Random permutation, retried until it is solvable."""
        rng = rng or random.Random()
        flat = list(self.flatten())
        while True:
            rng.shuffle(flat)
            z = flat.index(0)
            if is_solvable(flat, self.size, z // self.size):
                break
        n = self.size
        self.tiles = [flat[r * n:(r + 1) * n] for r in range(n)]
        self.blank_row, self.blank_col = divmod(z, n)

    # ---------- Core dynamics ----------
    def _in_bounds(self, move: Move) -> bool:
        dr, dc = move.offset
        r, c = self.blank_row + dr, self.blank_col + dc
        return 0 <= r < self.size and 0 <= c < self.size

    def apply_move(self, move: Move) -> bool:
        dr, dc = move.offset
        r, c = self.blank_row + dr, self.blank_col + dc
        if not (0 <= r < self.size and 0 <= c < self.size):
            return False
        self.tiles[self.blank_row][self.blank_col] = self.tiles[r][c]
        self.tiles[r][c] = 0
        self.blank_row, self.blank_col = r, c
        return True

    def try_move(self, move: Move) -> Optional["Board"]:
        """Child board after `move`, or None when the move leaves the grid."""
        child = self.copy()
        if child.apply_move(move):
            return child
        return None

    def is_solved(self) -> bool:
        n = self.size
        expected = 1
        for r in range(n):
            for c in range(n):
                if r == n - 1 and c == n - 1:
                    return self.tiles[r][c] == 0
                if self.tiles[r][c] != expected:
                    return False
                expected += 1
        return True

    # ---------- Helpers ----------
    def copy(self) -> "Board":
        return Board(self.size, [row[:] for row in self.tiles], self.blank_row, self.blank_col)

    def flatten(self) -> State:
        return tuple(t for row in self.tiles for t in row)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self.tiles == other.tiles

    def __hash__(self) -> int:
        return hash(self.flatten())

    def __repr__(self) -> str:
        return f"Board({self.tiles!r})"

    def __str__(self) -> str:
        return "".join("".join(f"{t:2} " for t in row) + "\n" for row in self.tiles)


def replay(board: Board, moves: Iterable[Move]) -> List[Board]:
    """States visited when applying `moves` to a copy of `board` (start included)."""
    cur = board.copy()
    out = [cur.copy()]
    for i, m in enumerate(moves):
        if not cur.apply_move(m):
            raise ValueError(f"illegal move #{i} ({m}) on\n{cur}")
        out.append(cur.copy())
    return out
