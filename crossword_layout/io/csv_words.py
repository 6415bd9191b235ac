"""Import and export of word/clue lists as delimited text."""

from __future__ import annotations

import csv
import io
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence

from ..core.exceptions import WordImportError
from ..core.models import WordEntry
from ..data.normalization import is_valid_word, normalize_word
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

SEPARATORS = (",", ";", "\t")
SAMPLE_LINES = 10
LINE_SPLIT_RE = re.compile(r"\r\n|\n|\r")
SURROUNDING_QUOTES_RE = re.compile(r"""^(["'])(.*)\1$""")


@dataclass
class CsvStructure:
    separator: str
    line_count: int
    valid_lines: int
    sample_lines: List[str] = field(default_factory=list)


def _non_blank_lines(content: str) -> List[str]:
    return [line for line in LINE_SPLIT_RE.split(content or "") if line.strip()]


def detect_separator(lines: Sequence[str]) -> str:
    """Pick tab, semicolon or comma from their counts in the first non-blank lines."""

    sample = [line for line in lines if line.strip()][:SAMPLE_LINES]
    commas = sum(line.count(",") for line in sample)
    semicolons = sum(line.count(";") for line in sample)
    tabs = sum(line.count("\t") for line in sample)
    if tabs > commas and tabs > semicolons:
        return "\t"
    if semicolons > commas:
        return ";"
    return ","


def _strip_quotes(field_text: str) -> str:
    text = field_text.strip()
    match = SURROUNDING_QUOTES_RE.match(text)
    return match.group(2) if match else text


def parse_csv_content(content: str) -> List[WordEntry]:
    """Parse ``WORD<sep>clue`` lines into entries.

    The first field is the word; any further fields are joined with ``", "``
    into the clue. Lines with an invalid word are skipped and later duplicates
    of a word are dropped.
    """

    lines = _non_blank_lines(content)
    if not lines:
        return []
    separator = detect_separator(lines)
    LOGGER.info("Detected separator: %s", "TAB" if separator == "\t" else separator)

    entries: List[WordEntry] = []
    seen = set()
    for line_number, line in enumerate(lines, start=1):
        # One record per physical line, even with an unbalanced quote.
        row = next(
            csv.reader(
                [line.strip()],
                delimiter=separator,
                quotechar='"',
                escapechar="\\",
                skipinitialspace=True,
            ),
            [],
        )
        parts = [_strip_quotes(part) for part in row]
        if not parts or not parts[0]:
            continue
        word = normalize_word(parts[0])
        if not is_valid_word(word):
            LOGGER.warning("Invalid word on line %d: %r", line_number, parts[0])
            continue
        if word in seen:
            LOGGER.debug("Duplicate word %s on line %d skipped", word, line_number)
            continue
        seen.add(word)
        clue = ", ".join(part for part in parts[1:] if part)
        entries.append(WordEntry(text=word, clue=clue))
    return entries


def export_words(entries: Sequence[WordEntry], separator: str = ",") -> str:
    """Render entries as ``WORD<sep>clue`` lines; clues are quoted when needed."""

    if not entries:
        raise WordImportError("No words to export")
    buffer = io.StringIO()
    writer = csv.writer(
        buffer,
        delimiter=separator,
        quotechar='"',
        doublequote=True,
        quoting=csv.QUOTE_MINIMAL,
        lineterminator="\n",
    )
    for entry in entries:
        writer.writerow([entry.text, entry.clue])
    return buffer.getvalue().rstrip("\n")


def analyze_csv_structure(content: str) -> CsvStructure:
    lines = _non_blank_lines(content)
    if not lines:
        return CsvStructure(separator=",", line_count=0, valid_lines=0)
    separator = detect_separator(lines)
    valid = sum(
        1 for line in lines if is_valid_word(normalize_word(line.split(separator)[0]))
    )
    return CsvStructure(
        separator=separator,
        line_count=len(lines),
        valid_lines=valid,
        sample_lines=lines[:3],
    )


def read_words_file(path: Path | str) -> List[WordEntry]:
    """Load entries from a delimited text file."""

    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise WordImportError(f"Cannot read words file {path}: {exc}") from exc
    entries = parse_csv_content(content)
    LOGGER.info("Loaded %d words from %s", len(entries), path)
    return entries
