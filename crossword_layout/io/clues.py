"""Clue writers for words submitted without a clue."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Dict, List, Optional, Protocol, Sequence

from ..core.exceptions import ClueGenerationError
from ..core.models import WordEntry
from ..utils.logger import get_logger
from .gemini_client import GeminiClient


LOGGER = get_logger(__name__)


@dataclass
class ClueRequest:
    word: str
    length: int


class ClueGenerator(Protocol):
    def generate(self, requests: List[ClueRequest]) -> Dict[str, str]:
        """Return mapping from word to clue text."""


class TemplateClueGenerator:
    """Placeholder clue writer used when nothing better is available."""

    TEMPLATE = "Clue for {word}"

    def generate(self, requests: List[ClueRequest]) -> Dict[str, str]:
        return {req.word: self.TEMPLATE.format(word=req.word) for req in requests}


class GeminiClueGenerator:
    """LLM clue writer using Gemini."""

    CLUE_RULES = (
        "You write clues for an English crossword puzzle. "
        "For every requested word write one short, fair definition-style clue.\n"
        "Rules:\n"
        "1. Do NOT include the answer word or an obvious fragment of it.\n"
        "2. Keep each clue between 2 and 10 words.\n"
        "3. Hyphens and apostrophes in a word are part of the answer.\n"
        "Respond as a JSON list [{{\"word\": ..., \"clue\": ...}}]."
    )

    def __init__(
        self,
        model_name: str = "gemini-2.5-flash",
        api_key_env: str = "GEMINI_API_KEY",
        model_env: str = "GEMINI_MODEL",
        gemini_client: GeminiClient | None = None,
    ) -> None:
        self.model_name = os.environ.get(model_env, model_name)
        self.api_key_env = api_key_env
        self.model_env = model_env
        self._client = gemini_client

    def generate(self, requests: List[ClueRequest]) -> Dict[str, str]:
        if not requests:
            return {}
        client = self._client or GeminiClient(
            model_name=self.model_name,
            api_key_env=self.api_key_env,
            model_env=self.model_env,
        )
        self._client = client
        response_text = client.generate_text(self._render_prompt(requests))
        return self._parse_response(response_text)

    @classmethod
    def _render_prompt(cls, requests: List[ClueRequest]) -> str:
        payload = [request.__dict__ for request in requests]
        return f"{cls.CLUE_RULES.format()}\nRequests: {json.dumps(payload, ensure_ascii=False)}"

    @staticmethod
    def _parse_response(text: str) -> Dict[str, str]:
        if not text:
            return {}
        try:
            data = json.loads(text)
        except json.JSONDecodeError:
            LOGGER.warning("Gemini clue payload not JSON; falling back to empty")
            return {}
        if not isinstance(data, list):
            return {}
        result: Dict[str, str] = {}
        for entry in data:
            if not isinstance(entry, dict):
                continue
            word = (entry.get("word") or "").strip().upper()
            clue = (entry.get("clue") or "").strip()
            if word and clue:
                result[word] = clue
        return result


def fill_missing_clues(
    entries: Sequence[WordEntry],
    generator: Optional[ClueGenerator] = None,
    fallback: Optional[ClueGenerator] = None,
) -> List[WordEntry]:
    """Return ``entries`` with every blank clue written by ``generator``.

    Words the generator skips, or all of them when it fails, get a clue from
    ``fallback`` (the template writer by default).
    """

    generator = generator or TemplateClueGenerator()
    fallback = fallback or TemplateClueGenerator()
    requests = [
        ClueRequest(word=entry.text, length=len(entry.text))
        for entry in entries
        if not entry.clue.strip()
    ]
    if not requests:
        return list(entries)

    try:
        written = generator.generate(requests)
    except ClueGenerationError as exc:
        LOGGER.warning("Clue generator failed, using fallback clues: %s", exc)
        written = {}

    missing = [req for req in requests if req.word not in written]
    if missing:
        written.update(fallback.generate(missing))
    LOGGER.info("Filled %d blank clues (%d from fallback)", len(requests), len(missing))

    return [
        entry if entry.clue.strip() else WordEntry(text=entry.text, clue=written[entry.text])
        for entry in entries
    ]
