import unittest

from crossword_layout.core.constants import Direction
from crossword_layout.core.models import WordEntry
from crossword_layout.engine.placer import GreedyPlacer
from crossword_layout.engine.validator import GridValidator


def _entries(*words: str):
    return [WordEntry(text=word, clue=f"clue {word}") for word in words]


class GreedyPlacerTests(unittest.TestCase):
    def test_cat_dog_tiger_layout(self) -> None:
        outcome = GreedyPlacer(10, 10).place_all(_entries("CAT", "DOG", "TIGER"))
        by_text = {word.text: word for word in outcome.placed_words}

        self.assertEqual([w.text for w in outcome.placed_words], ["TIGER", "CAT", "DOG"])
        self.assertEqual([w.sequence_number for w in outcome.placed_words], [1, 2, 3])
        self.assertEqual(outcome.unplaced, [])

        tiger, cat, dog = by_text["TIGER"], by_text["CAT"], by_text["DOG"]
        self.assertEqual((tiger.row, tiger.col, tiger.direction), (2, 5, Direction.DOWN))
        self.assertEqual((cat.row, cat.col, cat.direction), (2, 3, Direction.ACROSS))
        self.assertEqual((dog.row, dog.col, dog.direction), (4, 3, Direction.ACROSS))
        self.assertEqual(
            (tiger.intersection_count, cat.intersection_count, dog.intersection_count),
            (2, 1, 1),
        )
        self.assertEqual(outcome.grid.shared_cell_count(), 2)
        self.assertTrue(GridValidator().validate(outcome.grid, outcome.placed_words).ok)

    def test_clues_travel_with_words(self) -> None:
        outcome = GreedyPlacer(10, 10).place_all(_entries("CAT", "TIGER"))
        self.assertEqual({w.text: w.clue for w in outcome.placed_words}["CAT"], "clue CAT")

    def test_anchor_orientation_follows_grid_shape(self) -> None:
        wide = GreedyPlacer(5, 9).place_all(_entries("HOUSE")).placed_words[0]
        self.assertEqual((wide.row, wide.col, wide.direction), (2, 2, Direction.ACROSS))
        tall = GreedyPlacer(9, 5).place_all(_entries("HOUSE")).placed_words[0]
        self.assertEqual((tall.row, tall.col, tall.direction), (2, 2, Direction.DOWN))

    def test_over_long_word_is_dropped(self) -> None:
        outcome = GreedyPlacer(5, 5).place_all(_entries("ELEPHANT", "CAT"))
        self.assertEqual([w.text for w in outcome.placed_words], ["CAT"])
        self.assertEqual(outcome.placed_words[0].sequence_number, 1)
        self.assertEqual([e.text for e in outcome.unplaced], ["ELEPHANT"])

    def test_fallback_places_word_without_shared_letters(self) -> None:
        outcome = GreedyPlacer(10, 10).place_all(_entries("TIGER", "BUZZ"))
        buzz = outcome.placed_words[1]
        self.assertEqual(buzz.text, "BUZZ")
        self.assertEqual(buzz.intersection_count, 0)
        self.assertEqual((buzz.row, buzz.col, buzz.direction), (4, 3, Direction.DOWN))
        self.assertTrue(GridValidator().validate(outcome.grid, outcome.placed_words).ok)

    def test_empty_list_gives_empty_grid(self) -> None:
        outcome = GreedyPlacer(5, 5).place_all([])
        self.assertEqual(outcome.placed_words, [])
        self.assertEqual(outcome.grid.occupied_count, 0)

    def test_many_words_keep_layout_valid(self) -> None:
        words = ("PYTHON", "JAVA", "RUBY", "PERL", "SCALA", "HASKELL", "RUST", "KOTLIN", "SWIFT", "ELIXIR")
        outcome = GreedyPlacer(15, 15).place_all(_entries(*words))
        self.assertEqual(len(outcome.placed_words) + len(outcome.unplaced), len(words))
        numbers = [w.sequence_number for w in outcome.placed_words]
        self.assertEqual(numbers, list(range(1, len(numbers) + 1)))
        result = GridValidator().validate(outcome.grid, outcome.placed_words)
        self.assertTrue(result.ok, result.messages)
        for word in outcome.placed_words:
            self.assertEqual(word.intersection_count, outcome.grid.intersections_of(word))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
