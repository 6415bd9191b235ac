"""Distribution of a solution word's letters over the placed words."""

from __future__ import annotations

import math
import random
from typing import Dict, List, Optional, Sequence, Set, Tuple

from ..core.models import LetterAssignment, PlacedWord, SolutionWordConfig
from ..data.normalization import normalize_solution_text
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def max_letters_per_word(solution_length: int, placed_count: int) -> int:
    """Soft cap spreading the solution letters over roughly half the placed words."""
    return math.ceil(solution_length / max(1, placed_count / 2))


class SolutionLetterAssigner:
    """Greedy letter-by-letter assignment with a per-word usage cap."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    def assign(
        self, solution: SolutionWordConfig, placed_words: Sequence[PlacedWord]
    ) -> SolutionWordConfig:
        text = normalize_solution_text(solution.text)
        cap = max_letters_per_word(len(text), len(placed_words))
        claimed: Set[Tuple[int, int]] = set()
        usage: Dict[int, int] = {index: 0 for index in range(len(placed_words))}
        assignments: List[LetterAssignment] = []

        for position, letter in enumerate(text, start=1):
            choice = self._pick(letter, placed_words, claimed, usage, cap)
            if choice is None:
                choice = self._pick(letter, placed_words, claimed, usage, None)
            if choice is None:
                LOGGER.info("Solution letter %s (#%d) has no free cell", letter, position)
                assignments.append(LetterAssignment.missing(letter, position))
                continue
            word_index, offset = choice
            row, col = placed_words[word_index].cells[offset]
            claimed.add((row, col))
            usage[word_index] += 1
            assignments.append(
                LetterAssignment(
                    letter=letter,
                    source_word_index=word_index,
                    letter_index_in_word=offset,
                    row=row,
                    col=col,
                    solution_position=position,
                )
            )

        missing = sum(1 for a in assignments if not a.is_assigned)
        LOGGER.info(
            "Solution word %s: %d/%d letters placed (cap %d per word)",
            text, len(text) - missing, len(text), cap,
        )
        return SolutionWordConfig(
            text=text,
            description=solution.description,
            letter_assignments=assignments,
        )

    def _pick(
        self,
        letter: str,
        placed_words: Sequence[PlacedWord],
        claimed: Set[Tuple[int, int]],
        usage: Dict[int, int],
        cap: Optional[int],
    ) -> Optional[Tuple[int, int]]:
        candidates: List[Tuple[int, int, float, int, int]] = []
        for word_index, word in enumerate(placed_words):
            if cap is not None and usage[word_index] >= cap:
                continue
            for offset, cell in enumerate(word.cells):
                if word.text[offset] != letter or cell in claimed:
                    continue
                candidates.append(
                    (usage[word_index], -word.length, self.rng.random(), word_index, offset)
                )
        if not candidates:
            return None
        candidates.sort()
        _, _, _, word_index, offset = candidates[0]
        return word_index, offset
