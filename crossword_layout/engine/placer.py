"""Greedy word placement.

Words are laid out one at a time in ordering-score order. The first word that
fits anchors the grid in the centre; every later word takes the best scored
crossing position, or failing that a free position next to the busiest part
of the grid, or failing that any free position. A word that fits nowhere is
dropped. Placement is final for this pass.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from ..core.constants import Direction
from ..core.models import Placement, PlacedWord, WordEntry
from ..utils.logger import get_logger
from .grid import LetterGrid
from .legality import placement_intersections
from .scoring import ScoringWeights, find_best_placement, order_words


LOGGER = get_logger(__name__)


@dataclass
class PlacementOutcome:
    grid: LetterGrid
    placed_words: List[PlacedWord] = field(default_factory=list)
    unplaced: List[WordEntry] = field(default_factory=list)


class GreedyPlacer:
    """Lays out a word list on a fresh grid."""

    def __init__(self, rows: int, cols: int, weights: Optional[ScoringWeights] = None) -> None:
        self.rows = rows
        self.cols = cols
        self.weights = weights or ScoringWeights()

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def place_all(self, entries: Sequence[WordEntry]) -> PlacementOutcome:
        grid = LetterGrid.create(self.rows, self.cols)
        outcome = PlacementOutcome(grid=grid)
        by_number: Dict[int, PlacedWord] = {}

        for entry in order_words(entries):
            if not outcome.placed_words:
                placement = self._anchor_placement(grid, entry.text)
            else:
                placement = find_best_placement(
                    grid, entry.text, outcome.placed_words, self.weights
                )
                if placement is None:
                    placement = self._fallback_placement(grid, entry.text)

            if placement is None:
                LOGGER.warning("No legal position for %s; word dropped", entry.text)
                outcome.unplaced.append(entry)
                continue

            word = PlacedWord(
                text=entry.text,
                clue=entry.clue,
                row=placement.row,
                col=placement.col,
                direction=placement.direction,
                intersection_count=placement.intersections,
                sequence_number=len(outcome.placed_words) + 1,
            )
            for number in grid.place_word(word):
                by_number[number].intersection_count += 1
            by_number[word.sequence_number] = word
            outcome.placed_words.append(word)

        LOGGER.info(
            "Greedy pass placed %d/%d words (%d shared cells)",
            len(outcome.placed_words),
            len(entries),
            grid.shared_cell_count(),
        )
        return outcome

    # ------------------------------------------------------------------
    # Anchor word
    # ------------------------------------------------------------------
    def _anchor_placement(self, grid: LetterGrid, text: str) -> Optional[Placement]:
        preferred = Direction.DOWN if self.rows >= self.cols else Direction.ACROSS
        for direction in (preferred, preferred.crossing):
            row, col = self._centered_origin(text, direction)
            intersections = placement_intersections(grid, text, row, col, direction)
            if intersections is not None:
                LOGGER.debug("Anchored %s at (%d,%d) %s", text, row, col, direction.value)
                return Placement(
                    row=row,
                    col=col,
                    direction=direction,
                    intersections=intersections,
                )
        return None

    def _centered_origin(self, text: str, direction: Direction) -> Tuple[int, int]:
        length = len(text)
        if direction == Direction.ACROSS:
            row = self.rows // 2
            col = min(max(0, (self.cols - length) // 2), max(0, self.cols - length))
        else:
            row = min(max(0, (self.rows - length) // 2), max(0, self.rows - length))
            col = self.cols // 2
        return row, col

    # ------------------------------------------------------------------
    # Fallback placement
    # ------------------------------------------------------------------
    def _fallback_placement(self, grid: LetterGrid, text: str) -> Optional[Placement]:
        for _, row, col in self._dense_anchors(grid):
            for direction in (Direction.ACROSS, Direction.DOWN):
                intersections = placement_intersections(grid, text, row, col, direction)
                if intersections is not None:
                    LOGGER.debug(
                        "Placed %s near dense region at (%d,%d) %s",
                        text, row, col, direction.value,
                    )
                    return Placement(
                        row=row,
                        col=col,
                        direction=direction,
                        intersections=intersections,
                    )
        return self._scan_placement(grid, text)

    @staticmethod
    def _dense_anchors(grid: LetterGrid) -> List[Tuple[int, int, int]]:
        """Empty cells one gap away from letters, most crowded neighbourhood first."""
        anchors: List[Tuple[int, int, int]] = []
        for row in range(grid.rows):
            for col in range(grid.cols):
                if not grid.is_empty(row, col):
                    continue
                if any(not grid.is_empty(nr, nc) for nr, nc in grid.neighbors(row, col)):
                    continue
                density = grid.density(row, col)
                if density:
                    anchors.append((density, row, col))
        anchors.sort(key=lambda item: -item[0])
        return anchors

    @staticmethod
    def _scan_placement(grid: LetterGrid, text: str) -> Optional[Placement]:
        for row in range(grid.rows):
            for col in range(grid.cols - len(text) + 1):
                intersections = placement_intersections(grid, text, row, col, Direction.ACROSS)
                if intersections is not None:
                    return Placement(
                        row=row,
                        col=col,
                        direction=Direction.ACROSS,
                        intersections=intersections,
                    )
        for col in range(grid.cols):
            for row in range(grid.rows - len(text) + 1):
                intersections = placement_intersections(grid, text, row, col, Direction.DOWN)
                if intersections is not None:
                    return Placement(
                        row=row,
                        col=col,
                        direction=Direction.DOWN,
                        intersections=intersections,
                    )
        return None
