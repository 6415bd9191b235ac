"""CLI entrypoint for the crossword layout engine."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List

from crossword_layout.core.constants import DEFAULT_GRID_SIZE, SolutionStrategy
from crossword_layout.core.exceptions import CrosswordError
from crossword_layout.core.models import SolutionWordConfig, WordEntry
from crossword_layout.data.word_list import WordList, parse_word_arg
from crossword_layout.engine.crossword_store import DEFAULT_STORE_DIR, CrosswordStore
from crossword_layout.engine.generator import CrosswordGenerator, GeneratorConfig
from crossword_layout.io.clues import GeminiClueGenerator
from crossword_layout.io.csv_words import export_words, read_words_file
from crossword_layout.utils.logger import configure_logging, get_logger, level_from_name
from crossword_layout.utils.pretty import print_crossword_stats


LOGGER = get_logger("crossword_layout.cli")

SEPARATOR_NAMES = {"comma": ",", "semicolon": ";", "tab": "\t"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Lay out a word list as a connected crossword",
    )
    parser.add_argument("--rows", type=int, default=DEFAULT_GRID_SIZE, help="Grid height in cells")
    parser.add_argument("--cols", type=int, default=DEFAULT_GRID_SIZE, help="Grid width in cells")
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Words to place (format: WORD or WORD:Clue)",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="Delimited file with WORD,clue lines (comma, semicolon or tab)",
    )
    parser.add_argument("--solution-word", type=str, help="Word whose letters are hidden in the grid")
    parser.add_argument("--solution-description", type=str, help="Description of the solution word")
    parser.add_argument(
        "--solution-strategy",
        type=str,
        choices=[s.value for s in SolutionStrategy],
        default=SolutionStrategy.GREEDY.value,
        help="How solution letters are distributed",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--no-optimize", action="store_true", help="Skip the repositioning pass")
    parser.add_argument(
        "--llm-clues",
        action="store_true",
        help="Write missing clues with Gemini (requires GEMINI_API_KEY)",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument("--export-csv", type=Path, metavar="FILE", help="Write the word list as CSV")
    parser.add_argument(
        "--separator",
        type=str,
        choices=sorted(SEPARATOR_NAMES),
        default="comma",
        help="Separator for --export-csv",
    )
    parser.add_argument("--pretty", action="store_true", help="Print the grid, clues and stats")
    parser.add_argument("--save", action="store_true", help="Persist the result as a JSON document")
    parser.add_argument("--store-dir", type=Path, default=DEFAULT_STORE_DIR, help="Directory for --save")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def collect_words(args: argparse.Namespace) -> List[WordEntry]:
    words = WordList()
    if args.words_file:
        words.extend(read_words_file(args.words_file))
    for item in args.words or []:
        words.extend([parse_word_arg(item)])
    return words.entries


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(level_from_name(args.log_level))

    if not args.words and not args.words_file:
        parser.error("provide --words and/or --words-file")

    config = GeneratorConfig(
        rows=args.rows,
        cols=args.cols,
        seed=args.seed,
        optimize=not args.no_optimize,
        solution_strategy=SolutionStrategy(args.solution_strategy),
    )
    store = CrosswordStore(args.store_dir) if args.save else None

    entries: List[WordEntry] = []
    try:
        entries = collect_words(args)
        clue_generator = GeminiClueGenerator() if args.llm_clues else None
        generator = CrosswordGenerator(config, clue_generator=clue_generator)
        solution = None
        if args.solution_word:
            solution = SolutionWordConfig(
                text=args.solution_word,
                description=args.solution_description,
            )
        result = generator.generate(entries, solution)
    except CrosswordError as exc:
        LOGGER.error("Generation failed: %s", exc)
        if store is not None:
            store.save_failure(config, str(exc), entries)
        return 1

    if store is not None:
        store.save_success(result, config)
    if args.export_csv and not result.placed_words:
        LOGGER.warning("Nothing placed; %s not written", args.export_csv)
    elif args.export_csv:
        placed = [WordEntry(text=word.text, clue=word.clue) for word in result.placed_words]
        args.export_csv.write_text(
            export_words(placed, SEPARATOR_NAMES[args.separator]) + "\n", encoding="utf-8"
        )

    output_text = json.dumps(result.to_payload(), ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    if args.pretty:
        print_crossword_stats(result)
    elif not args.output:
        print(output_text)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
