"""Pretty-print helpers for crossword layouts."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from ..core.models import PlacedWord, SolutionWordConfig
    from ..engine.generator import CrosswordResult
    from ..engine.grid import LetterGrid


EMPTY_SYMBOL = "."


def format_grid(grid: LetterGrid, solution: Optional[SolutionWordConfig] = None) -> str:
    """Render the grid; cells holding a solution letter are shown in lowercase."""

    marked = solution.cell_positions() if solution is not None else {}
    width = grid.cols
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r in range(grid.rows):
        row_cells = []
        for c in range(width):
            letter = grid.letter(r, c)
            if letter is None:
                row_cells.append(EMPTY_SYMBOL)
            else:
                row_cells.append(letter.lower() if (r, c) in marked else letter)
        row_render = " ".join(f"{symbol:>2}" for symbol in row_cells)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def _clue_lines(title: str, words: List[PlacedWord]) -> List[str]:
    lines = [title]
    for word in words:
        lines.append(f"  {word.sequence_number:>3}. {word.clue} ({word.length})")
    return lines


def format_clue_list(result: CrosswordResult) -> str:
    lines = _clue_lines("ACROSS", result.across())
    lines.append("")
    lines.extend(_clue_lines("DOWN", result.down()))
    return "\n".join(lines)


def print_crossword_stats(result: CrosswordResult, *, stream=None) -> None:
    """Print grid, clues and layout stats for a completed crossword."""

    stream = stream or sys.stdout
    print(format_grid(result.grid, result.solution_word), file=stream)
    print(file=stream)
    print(format_clue_list(result), file=stream)

    # --- Grid geometry ---
    grid = result.grid
    total_cells = grid.rows * grid.cols
    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {grid.rows} x {grid.cols} ({total_cells} cells)", file=stream)
    print(f"  Letters:       {grid.occupied_count} ({grid.occupied_count / total_cells * 100:.0f}%)", file=stream)

    # --- Word stats ---
    stats = result.stats
    lengths = [word.length for word in result.placed_words]
    print(file=stream)
    print("--- Words ---", file=stream)
    print(f"  Placed:        {stats.placed}/{stats.total}", file=stream)
    print(f"  Intersections: {stats.intersections} (efficiency {stats.efficiency:.2f})", file=stream)
    if lengths:
        print(f"  Length range:  {min(lengths)}-{max(lengths)} (avg {sum(lengths) / len(lengths):.1f})", file=stream)
        dist_parts = [f"{l}:{c}" for l, c in sorted(Counter(lengths).items())]
        print(f"  Distribution:  {' '.join(dist_parts)}", file=stream)
    if result.unplaced_words:
        print(f"  Unplaced:      {', '.join(entry.text for entry in result.unplaced_words)}", file=stream)

    # --- Solution word ---
    solution = result.solution_word
    if solution is not None:
        print(file=stream)
        print("--- Solution word ---", file=stream)
        print(f"  Word:          {solution.text}", file=stream)
        if solution.description:
            print(f"  Description:   {solution.description}", file=stream)
        if solution.missing_positions:
            print(f"  Missing:       positions {solution.missing_positions}", file=stream)

    # --- Validation ---
    if result.validation_messages:
        print(file=stream)
        print("--- Validation ---", file=stream)
        for msg in result.validation_messages:
            print(f"  {msg}", file=stream)

    if result.seed is not None:
        print(file=stream)
        print(f"Seed: {result.seed}", file=stream)
