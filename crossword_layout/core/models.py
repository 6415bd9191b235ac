"""Data models supporting the crossword layout engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set, Tuple

from .constants import UNASSIGNED_WORD_INDEX, Direction


@dataclass
class Cell:
    """A grid cell: empty, or one letter shared by the words covering it."""

    letter: Optional[str] = None
    word_ids: Set[int] = field(default_factory=set)
    directions: Set[Direction] = field(default_factory=set)

    def is_empty(self) -> bool:
        return self.letter is None


@dataclass(frozen=True)
class WordEntry:
    """A word and its clue as submitted for a generation run."""

    text: str
    clue: str = ""


@dataclass
class PlacedWord:
    """A word laid out on the grid."""

    text: str
    clue: str
    row: int
    col: int
    direction: Direction
    intersection_count: int = 0
    sequence_number: int = 0

    @property
    def origin(self) -> Tuple[int, int]:
        return self.row, self.col

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def cells(self) -> List[Tuple[int, int]]:
        dr, dc = self.direction.step
        return [(self.row + dr * i, self.col + dc * i) for i in range(self.length)]

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "number": self.sequence_number,
            "word": self.text,
            "clue": self.clue,
            "start": [self.row, self.col],
            "direction": self.direction.value,
            "intersections": self.intersection_count,
        }


@dataclass
class LetterAssignment:
    """Where one letter of the solution word is hidden in the grid."""

    letter: str
    source_word_index: int
    letter_index_in_word: int
    row: int
    col: int
    solution_position: int

    @property
    def is_assigned(self) -> bool:
        return self.source_word_index != UNASSIGNED_WORD_INDEX

    @classmethod
    def missing(cls, letter: str, solution_position: int) -> "LetterAssignment":
        return cls(
            letter=letter,
            source_word_index=UNASSIGNED_WORD_INDEX,
            letter_index_in_word=-1,
            row=-1,
            col=-1,
            solution_position=solution_position,
        )


@dataclass
class SolutionWordConfig:
    """Optional solution word whose letters are circled inside placed words."""

    text: str
    description: Optional[str] = None
    letter_assignments: List[LetterAssignment] = field(default_factory=list)

    @property
    def missing_positions(self) -> List[int]:
        return [a.solution_position for a in self.letter_assignments if not a.is_assigned]

    def cell_positions(self) -> Dict[Tuple[int, int], int]:
        """Map each circled cell to its 1-based position in the solution word."""
        return {
            (a.row, a.col): a.solution_position
            for a in self.letter_assignments
            if a.is_assigned
        }

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "word": self.text,
            "description": self.description,
            "letters": [
                {
                    "letter": a.letter,
                    "source_word_index": a.source_word_index,
                    "letter_index_in_word": a.letter_index_in_word,
                    "row": a.row,
                    "col": a.col,
                    "solution_position": a.solution_position,
                }
                for a in self.letter_assignments
            ],
        }


@dataclass
class Placement:
    """A legal candidate position for a word, with its heuristic score."""

    row: int
    col: int
    direction: Direction
    intersections: int = 0
    score: float = 0.0
