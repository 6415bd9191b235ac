import io
import unittest

from crossword_layout import generate
from crossword_layout.utils.pretty import format_clue_list, format_grid, print_crossword_stats


class PrettyPrintTests(unittest.TestCase):
    def setUp(self) -> None:
        self.result = generate(["CAT", "DOG", "TIGER"], rows=10, cols=10, solution_word="GO", seed=4)

    def test_format_grid(self) -> None:
        lines = format_grid(self.result.grid).splitlines()
        self.assertEqual(len(lines), 12)
        self.assertTrue(lines[0].startswith("     0  1"))
        self.assertEqual(lines[4].split("|")[1].split(), [".", ".", ".", "C", "A", "T", ".", ".", ".", "."])

    def test_solution_cells_are_lowercase(self) -> None:
        rendered = format_grid(self.result.grid, self.result.solution_word)
        solution = self.result.solution_word
        assert solution is not None
        for assignment in solution.letter_assignments:
            row = rendered.splitlines()[assignment.row + 2].split("|")[1].split()
            self.assertEqual(row[assignment.col], assignment.letter.lower())

    def test_format_clue_list(self) -> None:
        text = format_clue_list(self.result)
        self.assertIn("ACROSS\n    2. Clue for CAT (3)\n    3. Clue for DOG (3)", text)
        self.assertIn("DOWN\n    1. Clue for TIGER (5)", text)

    def test_print_crossword_stats(self) -> None:
        stream = io.StringIO()
        print_crossword_stats(self.result, stream=stream)
        output = stream.getvalue()
        self.assertIn("--- Words ---", output)
        self.assertIn("Placed:        3/3", output)
        self.assertIn("Intersections: 2 (efficiency 0.67)", output)
        self.assertIn("Word:          GO", output)
        self.assertIn("Seed: 4", output)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
