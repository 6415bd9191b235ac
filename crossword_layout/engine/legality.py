"""Placement legality rules shared by the placer and the optimizer.

A candidate is legal when the full span lies inside the grid, every covered
cell is empty or already holds the matching letter of a perpendicular word,
the cells just before and after the span are free, and no newly written
letter touches a neighbouring word from the side.
"""

from __future__ import annotations

from typing import Optional

from ..core.constants import Direction
from .grid import LetterGrid


def placement_intersections(
    grid: LetterGrid,
    word: str,
    row: int,
    col: int,
    direction: Direction,
    require_intersection: bool = False,
) -> Optional[int]:
    """Return the number of crossings a legal placement makes, or ``None`` if illegal."""

    length = len(word)
    if not length:
        return None
    dr, dc = direction.step
    end_row = row + dr * (length - 1)
    end_col = col + dc * (length - 1)
    if not grid.contains(row, col) or not grid.contains(end_row, end_col):
        return None

    before_row, before_col = row - dr, col - dc
    if grid.contains(before_row, before_col) and not grid.is_empty(before_row, before_col):
        return None
    after_row, after_col = end_row + dr, end_col + dc
    if grid.contains(after_row, after_col) and not grid.is_empty(after_row, after_col):
        return None

    # Perpendicular neighbours of a fresh letter: (-dc, -dr) and (dc, dr).
    side_dr, side_dc = dc, dr
    intersections = 0
    for index in range(length):
        r = row + dr * index
        c = col + dc * index
        cell = grid.get(r, c)
        if cell.letter is not None:
            if cell.letter != word[index] or direction in cell.directions:
                return None
            intersections += 1
            continue
        for sign in (-1, 1):
            nr, nc = r + sign * side_dr, c + sign * side_dc
            if grid.contains(nr, nc) and not grid.is_empty(nr, nc):
                return None

    if intersections == length:
        return None
    if require_intersection and intersections == 0:
        return None
    return intersections


def can_place(
    grid: LetterGrid,
    word: str,
    row: int,
    col: int,
    direction: Direction,
    require_intersection: bool = False,
) -> bool:
    return (
        placement_intersections(grid, word, row, col, direction, require_intersection)
        is not None
    )
