"""Shared constants and enumerations for the crossword layout engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Tuple


class Direction(str, Enum):
    """Word directions supported by the grid."""

    ACROSS = "ACROSS"
    DOWN = "DOWN"

    @property
    def step(self) -> Tuple[int, int]:
        return (0, 1) if self is Direction.ACROSS else (1, 0)

    @property
    def crossing(self) -> "Direction":
        return Direction.DOWN if self is Direction.ACROSS else Direction.ACROSS


class SolutionStrategy(str, Enum):
    """How solution-word letters are distributed over the placed words."""

    GREEDY = "greedy"
    CPSAT = "cpsat"


ORTHOGONAL_STEPS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))

# Letters that most often give a crossing in English word lists.
COMMON_LETTERS: FrozenSet[str] = frozenset("EARIOTNSLC")

MIN_GRID_SIZE = 5
MAX_GRID_SIZE = 30
DEFAULT_GRID_SIZE = 15

UNASSIGNED_WORD_INDEX = -1


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
