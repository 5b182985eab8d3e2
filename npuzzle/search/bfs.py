from collections import deque
from time import perf_counter
from typing import Tuple, List, Optional, Dict

from npuzzle.domains.board import Board, Move, MOVES

State = Tuple[int, ...]


def successors(s: State, n: int) -> List[Tuple[State, Move]]:
    """(next_state, move) pairs for a flattened n×n state, in MOVES order."""
    z = s.index(0)
    r, c = divmod(z, n)
    out: List[Tuple[State, Move]] = []
    for m in MOVES:
        dr, dc = m.offset
        r2, c2 = r + dr, c + dc
        if 0 <= r2 < n and 0 <= c2 < n:
            j = r2 * n + c2
            lst = list(s)
            lst[z], lst[j] = lst[j], lst[z]
            out.append((tuple(lst), m))
    return out


def bfs(start: Board, timeout_sec: float | None = None):
    """Uninformed shortest-path baseline; same result keys as the runner expects."""
    t0 = perf_counter()
    n = start.size
    s0 = start.flatten()
    goal = Board.new(n).flatten()
    q = deque([s0])
    parent: Dict[State, Optional[Tuple[State, Move]]] = {s0: None}
    expanded = generated = 0
    while q:
        if timeout_sec is not None and (perf_counter() - t0) > timeout_sec:
            return {"moves": None, "g": None, "expanded": expanded, "generated": generated,
                    "time": perf_counter()-t0, "algorithm": "BFS", "termination": "timeout"}
        s = q.popleft()
        if s == goal:
            # reconstruct
            moves: List[Move] = []
            while parent[s] is not None:
                s, m = parent[s]
                moves.append(m)
            moves.reverse()
            return {"moves": moves, "g": len(moves), "expanded": expanded, "generated": generated,
                    "time": perf_counter()-t0, "algorithm": "BFS", "termination": "ok"}
        expanded += 1
        for s2, m in successors(s, n):
            generated += 1
            if s2 in parent: continue
            parent[s2] = (s, m); q.append(s2)
    return {"moves": None, "g": None, "expanded": expanded, "generated": generated,
            "time": perf_counter()-t0, "algorithm": "BFS", "termination": "exhausted"}


def distances_from_goal(size: int) -> Dict[State, int]:
    """Exact move distance of every state reachable from the goal (moves are reversible)."""
    goal = Board.new(size).flatten()
    dist: Dict[State, int] = {goal: 0}
    q = deque([goal])
    while q:
        s = q.popleft()
        d = dist[s] + 1
        for s2, _ in successors(s, size):
            if s2 not in dist:
                dist[s2] = d
                q.append(s2)
    return dist
