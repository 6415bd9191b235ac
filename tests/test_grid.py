import unittest

from crossword_layout.core.constants import Direction
from crossword_layout.core.exceptions import SlotPlacementError
from crossword_layout.core.models import PlacedWord
from crossword_layout.engine.grid import LetterGrid


def _word(text: str, row: int, col: int, direction: Direction, number: int) -> PlacedWord:
    return PlacedWord(text=text, clue="", row=row, col=col, direction=direction, sequence_number=number)


class LetterGridTests(unittest.TestCase):
    def test_create_is_empty(self) -> None:
        grid = LetterGrid.create(5, 7)
        self.assertEqual((grid.rows, grid.cols), (5, 7))
        self.assertEqual(grid.occupied_count, 0)
        self.assertTrue(all(grid.is_empty(r, c) for r in range(5) for c in range(7)))

    def test_rejects_non_positive_dimensions(self) -> None:
        with self.assertRaises(ValueError):
            LetterGrid(0, 5)

    def test_set_tracks_occupied_count(self) -> None:
        grid = LetterGrid.create(5, 5)
        grid.set(1, 1, "A")
        grid.set(1, 1, "B")
        self.assertEqual(grid.occupied_count, 1)
        grid.set(1, 1, None)
        self.assertEqual(grid.occupied_count, 0)
        self.assertTrue(grid.is_empty(1, 1))

    def test_place_word_records_ownership_and_crossings(self) -> None:
        grid = LetterGrid.create(6, 6)
        across = _word("CAT", 1, 0, Direction.ACROSS, 1)
        down = _word("TOP", 1, 2, Direction.DOWN, 2)
        self.assertEqual(grid.place_word(across), set())
        self.assertEqual(grid.place_word(down), {1})

        shared = grid.get(1, 2)
        self.assertEqual(shared.letter, "T")
        self.assertEqual(shared.word_ids, {1, 2})
        self.assertEqual(shared.directions, {Direction.ACROSS, Direction.DOWN})
        self.assertEqual(grid.occupied_count, 5)
        self.assertEqual(grid.shared_cell_count(), 1)
        self.assertEqual(grid.intersections_of(down), 1)

    def test_place_word_conflict_raises(self) -> None:
        grid = LetterGrid.create(6, 6)
        grid.place_word(_word("CAT", 1, 0, Direction.ACROSS, 1))
        with self.assertRaises(SlotPlacementError):
            grid.place_word(_word("DOG", 0, 1, Direction.DOWN, 2))

    def test_place_word_out_of_bounds_raises(self) -> None:
        grid = LetterGrid.create(5, 5)
        with self.assertRaises(SlotPlacementError):
            grid.place_word(_word("TIGERS", 0, 0, Direction.ACROSS, 1))
        self.assertEqual(grid.occupied_count, 0)

    def test_read_and_to_rows(self) -> None:
        grid = LetterGrid.from_words(5, 5, [_word("DOG", 0, 1, Direction.DOWN, 1)])
        self.assertEqual(grid.read(0, 1, Direction.DOWN, 3), "DOG")
        rows = grid.to_rows()
        self.assertEqual(len(rows), 5)
        self.assertEqual(rows[2], ["", "G", "", "", ""])

    def test_copy_is_independent(self) -> None:
        grid = LetterGrid.from_words(5, 5, [_word("CAT", 0, 0, Direction.ACROSS, 1)])
        clone = grid.copy()
        clone.set(4, 4, "Z")
        clone.get(0, 0).word_ids.add(9)
        self.assertTrue(grid.is_empty(4, 4))
        self.assertEqual(grid.get(0, 0).word_ids, {1})
        self.assertEqual(clone.occupied_count, 4)

    def test_density_counts_window(self) -> None:
        grid = LetterGrid.from_words(7, 7, [_word("TIGER", 1, 3, Direction.DOWN, 1)])
        self.assertEqual(grid.density(3, 1), 5)
        self.assertEqual(grid.density(3, 1, radius=1), 0)

    def test_placed_word_geometry(self) -> None:
        word = _word("TOP", 1, 2, Direction.DOWN, 1)
        self.assertEqual(word.origin, (1, 2))
        self.assertEqual(word.length, 3)
        self.assertEqual(word.cells, [(1, 2), (2, 2), (3, 2)])
        self.assertEqual(
            word.to_jsonable(),
            {"number": 1, "word": "TOP", "clue": "", "start": [1, 2], "direction": "DOWN", "intersections": 0},
        )

    def test_recount_intersections(self) -> None:
        first = _word("CAT", 1, 0, Direction.ACROSS, 1)
        second = _word("TOP", 1, 2, Direction.DOWN, 2)
        grid = LetterGrid.from_words(6, 6, [first, second])
        grid.recount_intersections([first, second])
        self.assertEqual((first.intersection_count, second.intersection_count), (1, 1))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
