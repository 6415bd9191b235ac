"""Shared helpers for word normalization and intake checks."""

from __future__ import annotations

import re

from ..core.constants import MAX_GRID_SIZE, MIN_GRID_SIZE

# Letters plus the hyphen and apostrophe of entries like E-MAIL or O'BRIEN.
WORD_RE = re.compile(r"^[A-Za-z'-]+$")
WHITESPACE_RE = re.compile(r"\s+")


def normalize_word(text: str) -> str:
    """Return the trimmed uppercase form of ``text``."""

    if not text:
        return ""
    return text.strip().upper()


def is_valid_word(text: str) -> bool:
    return bool(text) and WORD_RE.match(text.strip()) is not None


def is_valid_clue(clue: str) -> bool:
    return bool(clue and clue.strip())


def validate_grid_size(rows: int, cols: int) -> bool:
    return MIN_GRID_SIZE <= rows <= MAX_GRID_SIZE and MIN_GRID_SIZE <= cols <= MAX_GRID_SIZE


def normalize_solution_text(text: str) -> str:
    """Uppercase the solution word and drop any whitespace inside it."""

    if not text:
        return ""
    return WHITESPACE_RE.sub("", text).upper()


__all__ = [
    "WORD_RE",
    "is_valid_clue",
    "is_valid_word",
    "normalize_solution_text",
    "normalize_word",
    "validate_grid_size",
]
