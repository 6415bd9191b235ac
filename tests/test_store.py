import re
import tempfile
import unittest
from pathlib import Path

from crossword_layout import generate
from crossword_layout.core.exceptions import CrosswordError
from crossword_layout.core.models import WordEntry
from crossword_layout.engine.crossword_store import CrosswordStore
from crossword_layout.engine.generator import GeneratorConfig


class CrosswordStoreTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.store = CrosswordStore(Path(self._tmp.name) / "crosswords")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_save_success_and_load(self) -> None:
        result = generate(["CAT", "DOG", "TIGER"], rows=10, cols=10, solution_word="GO", seed=2)
        doc_id = self.store.save_success(result, GeneratorConfig(rows=10, cols=10, seed=2))

        self.assertRegex(doc_id, re.compile(r"^\d{8}T\d{6}_[0-9a-f]{8}$"))
        self.assertTrue((self.store.store_dir / f"{doc_id}.json").exists())
        doc = self.store.load(doc_id)
        self.assertEqual(doc["status"], "success")
        self.assertEqual(doc["config"]["solution_strategy"], "greedy")
        self.assertEqual(doc["stats"]["placed"], 3)
        self.assertEqual(len(doc["placed_words"]), 3)
        self.assertEqual(doc["solution_word"]["word"], "GO")
        self.assertEqual(doc["layout"]["letter_cells"], 9)
        self.assertEqual(doc["layout"]["across"], 2)
        self.assertEqual(doc["layout"]["length_distribution"], {"3": 2, "5": 1})

    def test_save_failure(self) -> None:
        doc_id = self.store.save_failure(
            GeneratorConfig(rows=4, cols=4), "Grid size 4x4 outside 5..30", [WordEntry("CAT", "A pet")]
        )
        doc = self.store.load(doc_id)
        self.assertEqual(doc["status"], "failed")
        self.assertIn("4x4", doc["error"])
        self.assertEqual(doc["words"], [{"word": "CAT", "clue": "A pet"}])

    def test_load_unknown_id_raises(self) -> None:
        with self.assertRaises(CrosswordError):
            self.store.load("missing")

    def test_load_rejects_path_like_ids(self) -> None:
        outside = Path(self._tmp.name) / "outside.json"
        outside.write_text("{}", encoding="utf-8")
        for doc_id in ("../outside", "sub/doc", "", ".."):
            with self.subTest(doc_id=doc_id):
                with self.assertRaisesRegex(CrosswordError, "Invalid crossword id"):
                    self.store.load(doc_id)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
