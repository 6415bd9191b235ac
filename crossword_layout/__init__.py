"""Crossword layout engine for free-form English word lists.

This package exposes the public API surface via:

- ``crossword_layout.engine.generator.CrosswordGenerator``: orchestrates a layout run.
- ``crossword_layout.engine.generator.generate``: one-call layout of a word list.
- ``crossword_layout.data.word_list.WordList``: validated, de-duplicated word intake.
- ``crossword_layout.io.csv_words`` helpers: delimited word list import and export.
"""

from .engine.generator import CrosswordGenerator, CrosswordResult, GeneratorConfig, generate
from .data.word_list import WordList

__all__ = [
    "CrosswordGenerator",
    "CrosswordResult",
    "GeneratorConfig",
    "WordList",
    "generate",
]

__version__ = "0.1.0"
