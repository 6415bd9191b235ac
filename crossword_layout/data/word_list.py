"""Word intake: validated, de-duplicated word and clue entries."""

from __future__ import annotations

from typing import Iterable, List

from ..core.exceptions import WordValidationError
from ..core.models import WordEntry
from ..utils.logger import get_logger
from .normalization import is_valid_word, normalize_word


LOGGER = get_logger(__name__)


def parse_word_arg(item: str) -> WordEntry:
    """Parse ``WORD`` or ``WORD:Clue`` into an entry. Raises on an invalid word."""

    word, _, clue = item.partition(":")
    text = normalize_word(word)
    if not is_valid_word(text):
        raise WordValidationError(f"Invalid word '{word.strip()}': use letters, '-' or \"'\"")
    return WordEntry(text=text, clue=clue.strip())


class WordList:
    """Ordered word list with case-insensitive uniqueness."""

    def __init__(self, entries: Iterable[WordEntry] = ()) -> None:
        self._entries: List[WordEntry] = []
        self.extend(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and normalize_word(word) in self._texts()

    @property
    def entries(self) -> List[WordEntry]:
        return list(self._entries)

    def add(self, word: str, clue: str = "") -> bool:
        """Add a word; returns False for invalid words and duplicates."""
        text = normalize_word(word)
        if not is_valid_word(text):
            LOGGER.warning("Rejected invalid word %r", word)
            return False
        if text in self._texts():
            LOGGER.debug("Skipped duplicate word %s", text)
            return False
        self._entries.append(WordEntry(text=text, clue=(clue or "").strip()))
        return True

    def extend(self, entries: Iterable[WordEntry]) -> int:
        return sum(1 for entry in entries if self.add(entry.text, entry.clue))

    def remove(self, index: int) -> WordEntry:
        return self._entries.pop(index)

    def update_clue(self, index: int, clue: str) -> None:
        entry = self._entries[index]
        self._entries[index] = WordEntry(text=entry.text, clue=clue.strip())

    def clear(self) -> None:
        self._entries.clear()

    def _texts(self) -> set:
        return {entry.text for entry in self._entries}
