from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Sequence
from time import perf_counter
import sys

from npuzzle.domains.board import Board, Move, MOVES
from npuzzle.domains.solvability import is_board_solvable
from npuzzle.heuristics.linear_conflict import heuristic

MAX_ITERATIONS = 1_000_000
# Depth cap is DEPTH_FACTOR * N*N moves
DEPTH_FACTOR = 4


class Failure(Enum):
    NOT_SOLVABLE = "not_solvable"
    NO_SOLUTION_FOUND = "no_solution_found"
    NO_PROGRESS_POSSIBLE = "no_progress_possible"
    ITERATION_LIMIT_EXCEEDED = "iteration_limit_exceeded"


class UnsolvedError(RuntimeError):
    def __init__(self, failure: Failure):
        super().__init__(f"search failed: {failure.value}")
        self.failure = failure


@dataclass
class SolveResult:
    """Either `moves` (possibly empty) or `failure` is set, never both."""
    moves: Optional[List[Move]]
    failure: Optional[Failure] = None
    expanded: int = 0
    generated: int = 0
    iterations: int = 0
    bound_final: Optional[int] = None
    peak_recursion: int = 0
    time: float = 0.0
    algorithm: str = field(default="IDA*")

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def g(self) -> Optional[int]:
        return len(self.moves) if self.moves is not None else None

    @property
    def termination(self) -> str:
        return "ok" if self.failure is None else self.failure.value

    def unwrap(self) -> List[Move]:
        if self.failure is not None:
            raise UnsolvedError(self.failure)
        return self.moves


def closes_cycle(path: Sequence[Move], move: Move) -> bool:
    """True if some consecutive pair in `path` is (opposite(move), move)."""
    back = move.opposite()
    return any(prev == back and nxt == move for prev, nxt in zip(path, path[1:]))


def solve(
    start: Board,
    hfun: Callable[[Board], int] = heuristic,
    max_iterations: int = MAX_ITERATIONS,
) -> SolveResult:
    """
    IDA* from `start` to the goal arrangement.

    Each outer iteration runs one depth-first pass bounded by f = g + h <= bound;
    the next bound is the smallest f that exceeded the current one. The shared
    `path` list always holds the moves from the root to the node being visited.
    """
    t0 = perf_counter()
    FOUND = object()

    expanded = 0
    generated = 0
    max_depth = 0
    solution: Optional[List[Move]] = None
    depth_cap = DEPTH_FACTOR * start.size * start.size
    path: List[Move] = []

    def result(failure: Optional[Failure], iterations: int, bound: Optional[int]) -> SolveResult:
        return SolveResult(
            moves=solution if failure is None else None,
            failure=failure,
            expanded=expanded,
            generated=generated,
            iterations=iterations,
            bound_final=bound,
            peak_recursion=max_depth,
            time=perf_counter() - t0,
        )

    if not is_board_solvable(start):
        return result(Failure.NOT_SOLVABLE, 0, None)

    def dfs(node: Board, g: int, bound: int, last: Optional[Move]):
        """
        Returns:
            * FOUND        if the goal was reached (solution holds a copy of path)
            * next bound   the minimal f above 'bound' seen in this subtree
            * None         if no branch produced a candidate
        """
        nonlocal expanded, generated, max_depth, solution
        max_depth = max(max_depth, g)
        f = g + hfun(node)
        if f > bound:
            return f
        if node.is_solved():
            solution = list(path)
            return FOUND

        expanded += 1
        min_next: Optional[int] = None
        for move in MOVES:
            if last is not None and move == last.opposite():
                continue
            child = node.try_move(move)
            if child is None:
                continue
            if closes_cycle(path, move):
                continue

            path.append(move)
            if len(path) > depth_cap:
                path.pop()
                continue
            generated += 1
            t = dfs(child, g + 1, bound, move)
            path.pop()

            if t is FOUND:
                return FOUND
            if t is not None and (min_next is None or t < min_next):
                min_next = t
        return min_next

    old_limit = sys.getrecursionlimit()
    if depth_cap + 100 > old_limit:
        sys.setrecursionlimit(depth_cap + 100)
    try:
        bound = hfun(start)
        iterations = 0
        while True:
            iterations += 1
            if iterations > max_iterations:
                return result(Failure.ITERATION_LIMIT_EXCEEDED, iterations - 1, bound)
            t = dfs(start.copy(), 0, bound, None)
            if t is FOUND:
                return result(None, iterations, bound)
            if t is None:
                return result(Failure.NO_SOLUTION_FOUND, iterations, bound)
            if t <= bound:
                return result(Failure.NO_PROGRESS_POSSIBLE, iterations, bound)
            bound = t
    finally:
        sys.setrecursionlimit(old_limit)
