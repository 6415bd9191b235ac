"""Heuristics ranking words before placement and candidate positions during it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Set, Tuple

from ..core.constants import COMMON_LETTERS, Direction
from ..core.models import Placement, PlacedWord, WordEntry
from ..utils.logger import get_logger
from .grid import LetterGrid
from .legality import placement_intersections


LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class ScoringWeights:
    """Weights of the placement score. Empirical, tune freely."""

    direct_intersection: float = 10.0
    covered_intersection: float = 5.0
    perpendicular_crossing: float = 15.0
    distinct_word: float = 8.0
    edge_distance: float = 0.5


# ----------------------------------------------------------------------
# Word ordering
# ----------------------------------------------------------------------
def word_order_score(text: str) -> float:
    """Intersection potential of a word: common letters, length and letter variety."""

    if not text:
        return 0.0
    letters = sum(2 if ch in COMMON_LETTERS else 1 for ch in text)
    diversity = len(set(text)) / len(text)
    return letters + 0.5 * len(text) + 3 * diversity


def order_words(entries: Sequence[WordEntry]) -> List[WordEntry]:
    """Sort entries by descending ordering score; equal scores keep input order."""

    return sorted(entries, key=lambda entry: word_order_score(entry.text), reverse=True)


# ----------------------------------------------------------------------
# Candidate generation
# ----------------------------------------------------------------------
def generate_candidates(
    text: str, placed_words: Sequence[PlacedWord]
) -> Iterator[Tuple[int, int, Direction]]:
    """Yield crossing origins for ``text`` against every placed word, in enumeration order.

    For each shared letter the orthogonal origin comes first, followed by the
    origins shifted one cell back and forward along the new word's axis.
    Positions are not checked for legality here.
    """

    seen: Set[Tuple[int, int, Direction]] = set()
    for existing in placed_words:
        direction = existing.direction.crossing
        dr, dc = direction.step
        for i, letter in enumerate(text):
            for j, other in enumerate(existing.text):
                if other != letter:
                    continue
                if existing.direction == Direction.ACROSS:
                    row, col = existing.row - i, existing.col + j
                else:
                    row, col = existing.row + j, existing.col - i
                for shift in (0, -1, 1):
                    key = (row + dr * shift, col + dc * shift, direction)
                    if key in seen:
                        continue
                    seen.add(key)
                    yield key


# ----------------------------------------------------------------------
# Placement scoring
# ----------------------------------------------------------------------
def score_placement(
    grid: LetterGrid,
    text: str,
    row: int,
    col: int,
    direction: Direction,
    weights: ScoringWeights = ScoringWeights(),
) -> float:
    """Score a placement already known to be legal."""

    dr, dc = direction.step
    direct = 0
    covered = 0
    perpendicular = False
    touched: Set[int] = set()
    for index in range(len(text)):
        cell = grid.get(row + dr * index, col + dc * index)
        if cell.letter is None:
            continue
        direct += 1
        covered += len(cell.word_ids)
        touched.update(cell.word_ids)
        if direction.crossing in cell.directions:
            perpendicular = True

    end_row = row + dr * (len(text) - 1)
    end_col = col + dc * (len(text) - 1)
    edge = min(row, col, grid.rows - 1 - end_row, grid.cols - 1 - end_col)

    score = weights.direct_intersection * direct
    score += weights.covered_intersection * covered
    if perpendicular:
        score += weights.perpendicular_crossing
    score += weights.distinct_word * len(touched)
    score += weights.edge_distance * edge
    return score


def find_best_placement(
    grid: LetterGrid,
    text: str,
    placed_words: Sequence[PlacedWord],
    weights: ScoringWeights = ScoringWeights(),
    min_intersections: int = 1,
) -> Optional[Placement]:
    """Return the highest-scoring legal crossing placement for ``text``.

    Candidates making fewer than ``min_intersections`` crossings are skipped.
    Ties keep the first candidate found.
    """

    best: Optional[Placement] = None
    considered = 0
    for row, col, direction in generate_candidates(text, placed_words):
        intersections = placement_intersections(
            grid, text, row, col, direction, require_intersection=True
        )
        if intersections is None or intersections < min_intersections:
            continue
        considered += 1
        score = score_placement(grid, text, row, col, direction, weights)
        if best is None or score > best.score:
            best = Placement(
                row=row,
                col=col,
                direction=direction,
                intersections=intersections,
                score=score,
            )
    if best is not None:
        LOGGER.debug(
            "Best of %d legal crossings for %s: (%d,%d) %s score=%.1f",
            considered, text, best.row, best.col, best.direction.value, best.score,
        )
    return best
