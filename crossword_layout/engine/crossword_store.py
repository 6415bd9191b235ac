"""Persistent crossword document store.

Every generation attempt (success or failure) can be saved as a JSON document
under ``local_db/collections/crosswords/``. Success documents hold the dense
grid, the placed words with their clues, the solution word and the stats.
"""

from __future__ import annotations

import json
import uuid
from collections import Counter
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional, Sequence

from ..core.exceptions import CrosswordError
from ..utils.logger import get_logger

if TYPE_CHECKING:
    from ..core.models import WordEntry
    from ..engine.generator import CrosswordResult, GeneratorConfig


LOGGER = get_logger(__name__)

DEFAULT_STORE_DIR = Path("local_db/collections/crosswords")


class CrosswordStore:
    """Save crossword generation results as structured JSON documents."""

    def __init__(self, store_dir: Path | str = DEFAULT_STORE_DIR) -> None:
        self.store_dir = Path(store_dir)
        self.store_dir.mkdir(parents=True, exist_ok=True)

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def save_success(self, result: "CrosswordResult", config: "GeneratorConfig") -> str:
        """Persist a successful crossword result and return its document ID."""
        doc_id = self._new_id()
        doc = {
            "id": doc_id,
            "created_at": datetime.now(timezone.utc).isoformat(),
            "status": "success",
            "config": self._serialize_config(config),
            **result.to_payload(),
            "layout": self._layout_stats(result),
        }
        self._write(doc_id, doc)
        LOGGER.info("Crossword saved: %s", doc_id)
        return doc_id

    def save_failure(
        self,
        config: "GeneratorConfig",
        error: str,
        words: Optional[Sequence["WordEntry"]] = None,
    ) -> str:
        """Persist a failed generation attempt and return its document ID."""
        doc_id = self._new_id()
        doc = {
            "id": doc_id,
            "created_at": datetime.now(timezone.utc).isoformat(),
            "status": "failed",
            "error": error,
            "config": self._serialize_config(config),
            "words": [{"word": entry.text, "clue": entry.clue} for entry in (words or [])],
        }
        self._write(doc_id, doc)
        LOGGER.info("Crossword failure saved: %s", doc_id)
        return doc_id

    def load(self, doc_id: str) -> Dict[str, Any]:
        if not doc_id or Path(doc_id).name != doc_id or doc_id in (".", ".."):
            raise CrosswordError(f"Invalid crossword id {doc_id!r}")
        path = self.store_dir / f"{doc_id}.json"
        if not path.exists():
            raise CrosswordError(f"No stored crossword with id {doc_id}")
        return json.loads(path.read_text(encoding="utf-8"))

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _write(self, doc_id: str, doc: Dict[str, Any]) -> None:
        path = self.store_dir / f"{doc_id}.json"
        path.write_text(json.dumps(doc, ensure_ascii=False, indent=2), encoding="utf-8")

    @staticmethod
    def _layout_stats(result: "CrosswordResult") -> Dict[str, Any]:
        """Grid fill and word-length breakdown of a finished layout."""
        grid = result.grid
        total_cells = grid.rows * grid.cols
        lengths = [word.length for word in result.placed_words]
        length_dist = Counter(lengths)
        return {
            "total_cells": total_cells,
            "letter_cells": grid.occupied_count,
            "fill_pct": round(grid.occupied_count / total_cells * 100, 1),
            "across": len(result.across()),
            "down": len(result.down()),
            "length_min": min(lengths) if lengths else 0,
            "length_max": max(lengths) if lengths else 0,
            "length_avg": round(sum(lengths) / len(lengths), 1) if lengths else 0.0,
            "length_distribution": {str(k): v for k, v in sorted(length_dist.items())},
        }

    @staticmethod
    def _serialize_config(config: "GeneratorConfig") -> Dict[str, Any]:
        return {
            "rows": config.rows,
            "cols": config.cols,
            "seed": config.seed,
            "optimize": config.optimize,
            "solution_strategy": getattr(config.solution_strategy, "value", config.solution_strategy),
            "solver_timeout_seconds": config.solver_timeout_seconds,
        }

    @staticmethod
    def _new_id() -> str:
        ts = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S")
        short_uuid = uuid.uuid4().hex[:8]
        return f"{ts}_{short_uuid}"
