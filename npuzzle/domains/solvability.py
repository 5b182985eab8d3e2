from __future__ import annotations
from typing import Sequence, List, Tuple


def count_inversions(flat: Sequence[int]) -> int:
    """Pairs of non-blank tiles (i < j) with flat[i] > flat[j]."""
    arr = [x for x in flat if x != 0]
    inv = 0
    for i in range(len(arr)):
        for j in range(i + 1, len(arr)):
            if arr[i] > arr[j]:
                inv += 1
    return inv


def _sort_count(arr: List[int]) -> Tuple[List[int], int]:
    if len(arr) <= 1:
        return arr, 0
    mid = len(arr) // 2
    left, inv_l = _sort_count(arr[:mid])
    right, inv_r = _sort_count(arr[mid:])
    merged: List[int] = []
    inv = inv_l + inv_r
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i]); i += 1
        else:
            # every remaining left element is larger than right[j]
            merged.append(right[j]); j += 1
            inv += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, inv


def count_inversions_merge(flat: Sequence[int]) -> int:
    """Same count as count_inversions, O(n log n) via merge sort."""
    _, inv = _sort_count([x for x in flat if x != 0])
    return inv


def is_solvable(flat: Sequence[int], size: int, blank_row: int) -> bool:
    """Solvability rules:
       - N odd: inversions must be even
       - N even: (inversions + blank_row) must be ODD
         (blank_row is 0-based from the top)
    """
    inv = count_inversions(flat)
    if size % 2 == 1:
        return (inv % 2) == 0
    # Goal has inv=0 and blank_row=N-1 (odd) -> solvable
    return ((inv + blank_row) % 2) == 1


def is_board_solvable(board) -> bool:
    return is_solvable(board.flatten(), board.size, board.blank_row)
