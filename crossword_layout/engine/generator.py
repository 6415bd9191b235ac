"""Main crossword layout orchestration.

One run goes through these stages:
  1. Intake: de-duplicate the word list and fill blank clues.
  2. Layout: greedy placement, then one optimizer pass.
  3. Solution word: hide its letters inside the placed words (optional).
  4. Validation: structural checks over the final layout.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from ..core.constants import DEFAULT_GRID_SIZE, MAX_GRID_SIZE, MIN_GRID_SIZE, Direction, SolutionStrategy
from ..core.exceptions import ConfigurationError, ValidationError
from ..core.models import PlacedWord, SolutionWordConfig, WordEntry
from ..data.normalization import normalize_solution_text, validate_grid_size
from ..data.word_list import WordList, parse_word_arg
from ..io.clues import ClueGenerator, TemplateClueGenerator, fill_missing_clues
from ..utils.logger import get_logger
from .grid import LetterGrid
from .optimizer import LayoutOptimizer
from .placer import GreedyPlacer
from .scoring import ScoringWeights
from .solution import SolutionLetterAssigner
from .solver import solve_letter_assignment
from .validator import GridValidator


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    rows: int = DEFAULT_GRID_SIZE
    cols: int = DEFAULT_GRID_SIZE
    seed: Optional[int] = None
    optimize: bool = True
    solution_strategy: SolutionStrategy = SolutionStrategy.GREEDY
    solver_timeout_seconds: float = 5.0
    weights: ScoringWeights = field(default_factory=ScoringWeights)

    def validate(self) -> None:
        if not validate_grid_size(self.rows, self.cols):
            raise ConfigurationError(
                f"Grid size {self.rows}x{self.cols} outside "
                f"{MIN_GRID_SIZE}..{MAX_GRID_SIZE} per axis"
            )
        if self.solver_timeout_seconds <= 0:
            raise ConfigurationError("Solver timeout must be positive")
        self.solution_strategy = SolutionStrategy(self.solution_strategy)


@dataclass
class GenerationStats:
    placed: int
    total: int
    intersections: int
    efficiency: float

    @classmethod
    def from_layout(cls, grid: LetterGrid, placed: int, total: int) -> "GenerationStats":
        intersections = grid.shared_cell_count()
        efficiency = round(intersections / placed, 2) if placed else 0.0
        return cls(placed=placed, total=total, intersections=intersections, efficiency=efficiency)

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "placed": self.placed,
            "total": self.total,
            "intersections": self.intersections,
            "efficiency": self.efficiency,
        }


@dataclass
class CrosswordResult:
    grid: LetterGrid
    placed_words: List[PlacedWord]
    unplaced_words: List[WordEntry]
    solution_word: Optional[SolutionWordConfig]
    stats: GenerationStats
    validation_messages: List[str] = field(default_factory=list)
    seed: Optional[int] = None

    def across(self) -> List[PlacedWord]:
        return self._clues(Direction.ACROSS)

    def down(self) -> List[PlacedWord]:
        return self._clues(Direction.DOWN)

    def _clues(self, direction: Direction) -> List[PlacedWord]:
        words = [word for word in self.placed_words if word.direction == direction]
        return sorted(words, key=lambda word: word.sequence_number)

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready document of the whole run."""
        return {
            "rows": self.grid.rows,
            "cols": self.grid.cols,
            "grid": self.grid.to_rows(),
            "placed_words": [word.to_jsonable() for word in self.placed_words],
            "unplaced_words": [
                {"word": entry.text, "clue": entry.clue} for entry in self.unplaced_words
            ],
            "solution_word": self.solution_word.to_jsonable() if self.solution_word else None,
            "stats": self.stats.to_jsonable(),
            "validation": self.validation_messages,
            "seed": self.seed,
        }


class CrosswordGenerator:
    """High-level orchestrator: placement, repair, solution letters, validation."""

    def __init__(
        self,
        config: GeneratorConfig,
        clue_generator: Optional[ClueGenerator] = None,
    ) -> None:
        config.validate()
        self.config = config
        self.rng = random.Random(config.seed)
        self.clue_generator = clue_generator or TemplateClueGenerator()
        self.placer = GreedyPlacer(config.rows, config.cols, config.weights)
        self.optimizer = LayoutOptimizer(config.weights)
        self.assigner = SolutionLetterAssigner(self.rng)
        self.validator = GridValidator()

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(
        self,
        words: Sequence[WordEntry],
        solution_word: Optional[SolutionWordConfig] = None,
    ) -> CrosswordResult:
        entries = WordList(words).entries
        if not entries:
            raise ConfigurationError("At least one valid word is required")
        LOGGER.info(
            "Generating %dx%d layout for %d words (seed=%s)",
            self.config.rows, self.config.cols, len(entries), self.config.seed,
        )

        entries = fill_missing_clues(entries, self.clue_generator)
        outcome = self.placer.place_all(entries)
        grid = outcome.grid
        if self.config.optimize and outcome.placed_words:
            grid, _ = self.optimizer.optimize(grid, outcome.placed_words)

        solution = None
        if solution_word is not None and normalize_solution_text(solution_word.text):
            solution = self._assign_solution(solution_word, outcome.placed_words)

        validation = self.validator.validate(grid, outcome.placed_words, solution)
        if not validation.ok:
            raise ValidationError(f"Grid validation failed: {validation.messages}")

        stats = GenerationStats.from_layout(grid, len(outcome.placed_words), len(entries))
        LOGGER.info(
            "Placed %d/%d words, %d intersections (efficiency %.2f)",
            stats.placed, stats.total, stats.intersections, stats.efficiency,
        )
        return CrosswordResult(
            grid=grid,
            placed_words=outcome.placed_words,
            unplaced_words=outcome.unplaced,
            solution_word=solution,
            stats=stats,
            validation_messages=validation.messages,
            seed=self.config.seed,
        )

    # ------------------------------------------------------------------
    # Solution word
    # ------------------------------------------------------------------
    def _assign_solution(
        self, solution_word: SolutionWordConfig, placed_words: List[PlacedWord]
    ) -> SolutionWordConfig:
        if self.config.solution_strategy == SolutionStrategy.CPSAT:
            assignments = solve_letter_assignment(
                solution_word.text,
                placed_words,
                timeout=self.config.solver_timeout_seconds,
            )
            if assignments is not None:
                return SolutionWordConfig(
                    text=normalize_solution_text(solution_word.text),
                    description=solution_word.description,
                    letter_assignments=assignments,
                )
            LOGGER.warning("CP-SAT assignment failed; falling back to greedy letters")
        return self.assigner.assign(solution_word, placed_words)


def _as_entry(word: Union[str, WordEntry]) -> WordEntry:
    return word if isinstance(word, WordEntry) else parse_word_arg(word)


def generate(
    words: Iterable[Union[str, WordEntry]],
    rows: int = DEFAULT_GRID_SIZE,
    cols: int = DEFAULT_GRID_SIZE,
    solution_word: Optional[str] = None,
    seed: Optional[int] = None,
) -> CrosswordResult:
    """Lay out ``words`` (entries or ``WORD:Clue`` strings) on a ``rows x cols`` grid."""

    config = GeneratorConfig(rows=rows, cols=cols, seed=seed)
    solution = SolutionWordConfig(text=solution_word) if solution_word else None
    return CrosswordGenerator(config).generate([_as_entry(word) for word in words], solution)
