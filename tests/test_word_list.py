import unittest

from crossword_layout.core.exceptions import WordValidationError
from crossword_layout.core.models import WordEntry
from crossword_layout.data.normalization import (
    is_valid_clue,
    is_valid_word,
    normalize_solution_text,
    normalize_word,
    validate_grid_size,
)
from crossword_layout.data.word_list import WordList, parse_word_arg


class NormalizationTests(unittest.TestCase):
    def test_normalize_word(self) -> None:
        self.assertEqual(normalize_word("  e-mail "), "E-MAIL")
        self.assertEqual(normalize_word(""), "")

    def test_is_valid_word(self) -> None:
        for word in ("CAT", "e-mail", "O'BRIEN", "RAIN-COAT"):
            self.assertTrue(is_valid_word(word), word)
        for word in ("", "C4T", "TWO WORDS", "CAFÉ", "A_B"):
            self.assertFalse(is_valid_word(word), word)

    def test_is_valid_clue(self) -> None:
        self.assertTrue(is_valid_clue("A pet"))
        self.assertFalse(is_valid_clue("   "))

    def test_validate_grid_size(self) -> None:
        self.assertTrue(validate_grid_size(5, 30))
        self.assertFalse(validate_grid_size(4, 10))
        self.assertFalse(validate_grid_size(10, 31))

    def test_normalize_solution_text(self) -> None:
        self.assertEqual(normalize_solution_text(" new  york "), "NEWYORK")


class ParseWordArgTests(unittest.TestCase):
    def test_word_only(self) -> None:
        self.assertEqual(parse_word_arg("cat"), WordEntry("CAT", ""))

    def test_word_and_clue(self) -> None:
        self.assertEqual(parse_word_arg("cat: Pet: purrs "), WordEntry("CAT", "Pet: purrs"))

    def test_invalid_word_raises(self) -> None:
        with self.assertRaises(WordValidationError):
            parse_word_arg("c4t:clue")


class WordListTests(unittest.TestCase):
    def test_add_rejects_invalid_and_duplicates(self) -> None:
        words = WordList()
        self.assertTrue(words.add("cat", " A pet "))
        self.assertFalse(words.add("CAT"))
        self.assertFalse(words.add("c4t"))
        self.assertEqual(words.entries, [WordEntry("CAT", "A pet")])
        self.assertIn("Cat", words)
        self.assertNotIn("dog", words)

    def test_extend_counts_added(self) -> None:
        words = WordList([WordEntry("CAT")])
        added = words.extend([WordEntry("dog"), WordEntry("cat"), WordEntry("bad word")])
        self.assertEqual(added, 1)
        self.assertEqual(len(words), 2)

    def test_remove_update_clear(self) -> None:
        words = WordList([WordEntry("CAT"), WordEntry("DOG")])
        self.assertEqual(words.remove(0), WordEntry("CAT"))
        words.update_clue(0, "  Barks ")
        self.assertEqual(words.entries, [WordEntry("DOG", "Barks")])
        words.clear()
        self.assertEqual(len(words), 0)

    def test_entries_is_a_copy(self) -> None:
        words = WordList([WordEntry("CAT")])
        words.entries.append(WordEntry("DOG"))
        self.assertEqual(len(words), 1)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
