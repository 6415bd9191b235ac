"""Deterministic rule validation for generated layouts."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations
from typing import List, Optional, Sequence

from ..core.constants import ORTHOGONAL_STEPS
from ..core.exceptions import ValidationError
from ..core.models import PlacedWord, SolutionWordConfig
from ..utils.logger import get_logger
from .grid import LetterGrid


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class GridValidator:
    """Runs structural validation over the final grid and word list."""

    def validate(
        self,
        grid: LetterGrid,
        placed_words: Sequence[PlacedWord],
        solution: Optional[SolutionWordConfig] = None,
    ) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_spans(grid, placed_words)
            self._check_no_stray_letters(grid, placed_words)
            self._check_parallel_adjacency(placed_words)
            self._check_sequence_numbers(placed_words)
            if solution is not None:
                self._check_solution(solution)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_spans(self, grid: LetterGrid, placed_words: Sequence[PlacedWord]) -> None:
        for word in placed_words:
            for row, col in word.cells:
                if not grid.contains(row, col):
                    raise ValidationError(f"Word {word.text} leaves the grid at ({row},{col})")
            surface = grid.read(word.row, word.col, word.direction, word.length)
            if surface != word.text:
                raise ValidationError(
                    f"Word {word.text} reads back as '{surface}' at ({word.row},{word.col})"
                )

    def _check_no_stray_letters(self, grid: LetterGrid, placed_words: Sequence[PlacedWord]) -> None:
        covered = {cell for word in placed_words for cell in word.cells}
        for r in range(grid.rows):
            for c in range(grid.cols):
                if not grid.is_empty(r, c) and (r, c) not in covered:
                    raise ValidationError(f"Letter at ({r},{c}) belongs to no word")

    def _check_parallel_adjacency(self, placed_words: Sequence[PlacedWord]) -> None:
        for first, second in combinations(placed_words, 2):
            if first.direction != second.direction:
                continue
            # Side contact is fine when both cells are consecutive letters of one crossing word.
            crossing_spans = [
                set(word.cells) for word in placed_words if word.direction != first.direction
            ]
            second_cells = set(second.cells)
            for row, col in first.cells:
                if (row, col) in second_cells:
                    raise ValidationError(
                        f"Parallel words {first.text} and {second.text} overlap at ({row},{col})"
                    )
                for dr, dc in ORTHOGONAL_STEPS:
                    neighbour = (row + dr, col + dc)
                    if neighbour not in second_cells:
                        continue
                    if any((row, col) in span and neighbour in span for span in crossing_spans):
                        continue
                    raise ValidationError(
                        f"Parallel words {first.text} and {second.text} touch at ({row},{col})"
                    )

    def _check_sequence_numbers(self, placed_words: Sequence[PlacedWord]) -> None:
        numbers = [word.sequence_number for word in placed_words]
        if len(set(numbers)) != len(numbers):
            raise ValidationError(f"Duplicate sequence numbers: {numbers}")
        if numbers != sorted(numbers):
            raise ValidationError(f"Sequence numbers out of placement order: {numbers}")

    def _check_solution(self, solution: SolutionWordConfig) -> None:
        positions = sorted(a.solution_position for a in solution.letter_assignments)
        if positions != list(range(1, len(solution.text) + 1)):
            raise ValidationError(f"Solution positions are not 1..{len(solution.text)}: {positions}")
        cells = [(a.row, a.col) for a in solution.letter_assignments if a.is_assigned]
        if len(set(cells)) != len(cells):
            raise ValidationError("Two solution letters share one cell")
