"""Local repair pass run once after greedy placement."""

from __future__ import annotations

from typing import List, Optional, Tuple

from ..core.models import PlacedWord
from ..utils.logger import get_logger
from .grid import LetterGrid
from .scoring import ScoringWeights, find_best_placement


LOGGER = get_logger(__name__)


class LayoutOptimizer:
    """Moves weakly connected words to positions with more crossings.

    Words are visited in placement order. A word is a candidate for moving
    when it crosses fewer than ``min(2, length / 2)`` other words. The search
    runs on a scratch grid holding every other word; the word moves only when
    the best scored position also makes strictly more crossings than it has
    now. Sequence numbers never change.
    """

    def __init__(self, weights: Optional[ScoringWeights] = None, target_intersections: int = 2) -> None:
        self.weights = weights or ScoringWeights()
        self.target_intersections = target_intersections

    def needs_repair(self, word: PlacedWord) -> bool:
        return word.intersection_count < min(self.target_intersections, word.length / 2)

    def optimize(self, grid: LetterGrid, placed_words: List[PlacedWord]) -> Tuple[LetterGrid, int]:
        """Return the resynchronized grid and the number of words moved."""

        moved = 0
        for word in placed_words:
            if not self.needs_repair(word):
                continue
            others = [other for other in placed_words if other is not word]
            scratch = LetterGrid.from_words(grid.rows, grid.cols, others)
            placement = find_best_placement(
                scratch,
                word.text,
                others,
                self.weights,
                min_intersections=word.intersection_count + 1,
            )
            if placement is None:
                continue

            LOGGER.debug(
                "Moving #%d %s from (%d,%d) %s to (%d,%d) %s (%d -> %d crossings)",
                word.sequence_number, word.text, word.row, word.col, word.direction.value,
                placement.row, placement.col, placement.direction.value,
                word.intersection_count, placement.intersections,
            )
            word.row = placement.row
            word.col = placement.col
            word.direction = placement.direction
            scratch.place_word(word)
            grid = scratch
            grid.recount_intersections(placed_words)
            moved += 1

        LOGGER.info("Optimizer moved %d of %d words", moved, len(placed_words))
        return grid, moved
