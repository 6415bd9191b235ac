import unittest

from crossword_layout.core.constants import Direction
from crossword_layout.core.models import PlacedWord
from crossword_layout.engine.grid import LetterGrid
from crossword_layout.engine.legality import can_place, placement_intersections


class LegalityTests(unittest.TestCase):
    def setUp(self) -> None:
        # CAT across row 2 of a 5x5 grid.
        self.grid = LetterGrid.from_words(
            5,
            5,
            [PlacedWord("CAT", "", 2, 0, Direction.ACROSS, sequence_number=1)],
        )

    def test_empty_grid_needs_no_intersection_by_default(self) -> None:
        grid = LetterGrid.create(5, 5)
        self.assertTrue(can_place(grid, "CAT", 0, 0, Direction.ACROSS))
        self.assertFalse(can_place(grid, "CAT", 0, 0, Direction.ACROSS, require_intersection=True))

    def test_span_must_fit(self) -> None:
        grid = LetterGrid.create(5, 5)
        self.assertFalse(can_place(grid, "CAT", 0, 3, Direction.ACROSS))
        self.assertFalse(can_place(grid, "CAT", -1, 0, Direction.DOWN))

    def test_crossing_counts_intersections(self) -> None:
        self.assertEqual(placement_intersections(self.grid, "TOP", 2, 2, Direction.DOWN), 1)
        self.assertEqual(placement_intersections(self.grid, "STOP", 1, 2, Direction.DOWN), 1)

    def test_letter_mismatch_rejected(self) -> None:
        self.assertIsNone(placement_intersections(self.grid, "DOG", 2, 1, Direction.DOWN))

    def test_same_direction_overlap_rejected(self) -> None:
        self.assertIsNone(placement_intersections(self.grid, "CAT", 2, 0, Direction.ACROSS))
        self.assertIsNone(placement_intersections(self.grid, "CA", 2, 0, Direction.ACROSS))

    def test_end_cells_must_be_free(self) -> None:
        # Would run on from the end of CAT.
        self.assertFalse(can_place(self.grid, "SOL", 2, 3, Direction.ACROSS))
        # Would run into the C of CAT.
        self.assertFalse(can_place(self.grid, "AN", 0, 0, Direction.DOWN))

    def test_parallel_neighbour_rejected(self) -> None:
        self.assertFalse(can_place(self.grid, "DOG", 3, 0, Direction.ACROSS))
        self.assertFalse(can_place(self.grid, "DOG", 1, 1, Direction.ACROSS))
        self.assertTrue(can_place(self.grid, "DOG", 4, 0, Direction.ACROSS))

    def test_placement_adding_no_letter_rejected(self) -> None:
        grid = LetterGrid.from_words(
            5, 5, [PlacedWord("AT", "", 0, 0, Direction.ACROSS, sequence_number=1)]
        )
        self.assertIsNone(placement_intersections(grid, "A", 0, 0, Direction.DOWN))

    def test_check_is_idempotent_and_pure(self) -> None:
        before = self.grid.to_rows()
        first = placement_intersections(self.grid, "TOP", 2, 2, Direction.DOWN)
        second = placement_intersections(self.grid, "TOP", 2, 2, Direction.DOWN)
        self.assertEqual(first, second)
        self.assertEqual(self.grid.to_rows(), before)
        self.assertEqual(self.grid.occupied_count, 3)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
