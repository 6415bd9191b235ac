"""Grid representation and helper utilities."""

from __future__ import annotations

from typing import Iterable, List, Optional, Set, Tuple

from ..core.constants import Bounds, Direction, ORTHOGONAL_STEPS
from ..core.exceptions import SlotPlacementError
from ..core.models import Cell, PlacedWord
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class LetterGrid:
    """Fixed-size lattice of letter cells, row-major with the origin top-left."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")
        self.bounds = Bounds(rows=rows, cols=cols)
        self.cells: List[List[Cell]] = [[Cell() for _ in range(cols)] for _ in range(rows)]
        self._occupied_count = 0

    @classmethod
    def create(cls, rows: int, cols: int) -> "LetterGrid":
        return cls(rows, cols)

    @classmethod
    def from_words(cls, rows: int, cols: int, words: Iterable[PlacedWord]) -> "LetterGrid":
        """Build a grid holding ``words`` in the given order."""
        grid = cls(rows, cols)
        for word in words:
            grid.place_word(word)
        return grid

    @property
    def rows(self) -> int:
        return self.bounds.rows

    @property
    def cols(self) -> int:
        return self.bounds.cols

    @property
    def occupied_count(self) -> int:
        return self._occupied_count

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def contains(self, row: int, col: int) -> bool:
        return self.bounds.contains(row, col)

    def get(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def letter(self, row: int, col: int) -> Optional[str]:
        return self.cells[row][col].letter

    def is_empty(self, row: int, col: int) -> bool:
        return self.cells[row][col].is_empty()

    def set(self, row: int, col: int, letter: Optional[str]) -> None:
        cell = self.cells[row][col]
        if cell.letter is None and letter is not None:
            self._occupied_count += 1
        elif cell.letter is not None and letter is None:
            self._occupied_count -= 1
            cell.word_ids.clear()
            cell.directions.clear()
        cell.letter = letter

    def neighbors(self, row: int, col: int) -> Iterable[Tuple[int, int]]:
        for dr, dc in ORTHOGONAL_STEPS:
            nr, nc = row + dr, col + dc
            if self.bounds.contains(nr, nc):
                yield nr, nc

    def density(self, row: int, col: int, radius: int = 2) -> int:
        """Count occupied cells in the square window centred on ``(row, col)``."""
        count = 0
        for r in range(max(0, row - radius), min(self.rows, row + radius + 1)):
            for c in range(max(0, col - radius), min(self.cols, col + radius + 1)):
                if self.cells[r][c].letter is not None:
                    count += 1
        return count

    def read(self, row: int, col: int, direction: Direction, length: int) -> str:
        dr, dc = direction.step
        return "".join(
            self.cells[row + dr * i][col + dc * i].letter or "" for i in range(length)
        )

    # ------------------------------------------------------------------
    # Word placement
    # ------------------------------------------------------------------
    def place_word(self, word: PlacedWord) -> Set[int]:
        """Write ``word`` onto the grid and return the ids of the words it crosses."""
        cells = word.cells
        for index, (row, col) in enumerate(cells):
            if not self.bounds.contains(row, col):
                raise SlotPlacementError(f"Word {word.text} extends outside grid at {(row, col)}")
            existing = self.cells[row][col].letter
            if existing is not None and existing != word.text[index]:
                raise SlotPlacementError(
                    f"Letter conflict for {word.text} at {(row, col)}: {existing}"
                )

        crossed: Set[int] = set()
        for index, (row, col) in enumerate(cells):
            cell = self.cells[row][col]
            crossed.update(cell.word_ids)
            self.set(row, col, word.text[index])
            cell.word_ids.add(word.sequence_number)
            cell.directions.add(word.direction)
        crossed.discard(word.sequence_number)
        LOGGER.debug(
            "Wrote #%s %s at (%s,%s) %s crossing %s",
            word.sequence_number, word.text, word.row, word.col,
            word.direction.value, sorted(crossed),
        )
        return crossed

    def copy(self) -> "LetterGrid":
        clone = LetterGrid(self.rows, self.cols)
        clone.cells = [
            [Cell(cell.letter, set(cell.word_ids), set(cell.directions)) for cell in row]
            for row in self.cells
        ]
        clone._occupied_count = self._occupied_count
        return clone

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def shared_cell_count(self) -> int:
        return sum(1 for row in self.cells for cell in row if len(cell.word_ids) > 1)

    def intersections_of(self, word: PlacedWord) -> int:
        return sum(1 for row, col in word.cells if len(self.cells[row][col].word_ids) > 1)

    def recount_intersections(self, words: Iterable[PlacedWord]) -> None:
        for word in words:
            word.intersection_count = self.intersections_of(word)

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def to_rows(self) -> List[List[str]]:
        """Dense character grid; empty cells are ``""``."""
        return [[cell.letter or "" for cell in row] for row in self.cells]
