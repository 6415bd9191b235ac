"""CP-SAT solution-letter assignment using OR-Tools."""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, List, Optional, Sequence, Tuple

from ortools.sat.python import cp_model

from ..core.models import LetterAssignment, PlacedWord
from ..data.normalization import normalize_solution_text
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


def solve_letter_assignment(
    solution_text: str,
    placed_words: Sequence[PlacedWord],
    timeout: float = 5.0,
) -> Optional[List[LetterAssignment]]:
    """Assign solution letters to grid cells via CP-SAT.

    Args:
        solution_text: The solution word; one assignment is returned per letter.
        placed_words: Final layout. ``source_word_index`` refers to this order.
        timeout: Solver time limit in seconds.

    Returns:
        Assignments ordered by solution position, with unplaceable letters
        marked as missing, or None if the solver found no solution in time.
    """
    text = normalize_solution_text(solution_text)
    if not text:
        return []

    model = cp_model.CpModel()

    # ------------------------------------------------------------------
    # Step 1: One boolean per (position, word cell) with a matching letter
    # ------------------------------------------------------------------
    # Each candidate: (word_index, offset, row, col)
    candidates: Dict[int, List[Tuple[int, int, int, int]]] = defaultdict(list)
    choice_vars: Dict[Tuple[int, int], cp_model.IntVar] = {}
    seen_cells: Dict[int, set] = defaultdict(set)

    for position, letter in enumerate(text):
        for word_index, word in enumerate(placed_words):
            for offset, (row, col) in enumerate(word.cells):
                if word.text[offset] != letter:
                    continue
                # A cell shared by two words is one candidate, owned by the first word.
                if (row, col) in seen_cells[position]:
                    continue
                seen_cells[position].add((row, col))
                k = len(candidates[position])
                candidates[position].append((word_index, offset, row, col))
                choice_vars[(position, k)] = model.new_bool_var(f"x_{position}_{k}")

    # ------------------------------------------------------------------
    # Step 2: Each position at most once, each cell at most once
    # ------------------------------------------------------------------
    assigned_terms = []
    by_cell: Dict[Tuple[int, int], list] = defaultdict(list)
    by_word: Dict[int, list] = defaultdict(list)
    for position in range(len(text)):
        options = [choice_vars[(position, k)] for k in range(len(candidates[position]))]
        if not options:
            continue
        model.add_at_most_one(options)
        assigned_terms.extend(options)
        for k, (word_index, _, row, col) in enumerate(candidates[position]):
            by_cell[(row, col)].append(choice_vars[(position, k)])
            by_word[word_index].append(choice_vars[(position, k)])

    for cell_vars in by_cell.values():
        if len(cell_vars) > 1:
            model.add_at_most_one(cell_vars)

    # ------------------------------------------------------------------
    # Step 3: Objective - place every letter we can, then spread them
    # ------------------------------------------------------------------
    max_load = model.new_int_var(0, len(text), "max_load")
    for word_vars in by_word.values():
        model.add(sum(word_vars) <= max_load)
    model.maximize(sum(assigned_terms) * (len(text) + 1) - max_load)

    # ------------------------------------------------------------------
    # Step 4: Solve
    # ------------------------------------------------------------------
    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = timeout
    solver.parameters.num_workers = 4

    LOGGER.info(
        "CP-SAT: %d letters, %d candidate cells, solving (timeout=%0.1fs)...",
        len(text), len(choice_vars), timeout,
    )
    status = solver.solve(model)
    if status not in (cp_model.OPTIMAL, cp_model.FEASIBLE):
        LOGGER.warning("CP-SAT: no assignment found (status=%s)", solver.status_name(status))
        return None
    LOGGER.info("CP-SAT: assignment found in %.2fs", solver.wall_time)

    # ------------------------------------------------------------------
    # Step 5: Extract solution
    # ------------------------------------------------------------------
    result: List[LetterAssignment] = []
    for position, letter in enumerate(text):
        chosen = None
        for k, candidate in enumerate(candidates[position]):
            if solver.value(choice_vars[(position, k)]):
                chosen = candidate
                break
        if chosen is None:
            result.append(LetterAssignment.missing(letter, position + 1))
            continue
        word_index, offset, row, col = chosen
        result.append(
            LetterAssignment(
                letter=letter,
                source_word_index=word_index,
                letter_index_in_word=offset,
                row=row,
                col=col,
                solution_position=position + 1,
            )
        )
    return result
