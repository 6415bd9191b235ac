"""HTTP client for the Gemini ``generateContent`` endpoint."""

from __future__ import annotations

import os
from typing import Any, Dict, Iterator, Optional

import requests

from ..core.exceptions import ClueGenerationError
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


class GeminiAPIError(ClueGenerationError):
    """Gemini could not be reached or returned no usable text."""


class GeminiClient:
    """Sends one prompt per call and returns the model's JSON text reply."""

    API_BASE = "https://generativelanguage.googleapis.com/v1beta"

    def __init__(
        self,
        model_name: str = "gemini-2.5-flash",
        api_key_env: str = "GEMINI_API_KEY",
        model_env: str = "GEMINI_MODEL",
        timeout_seconds: float = 60.0,
        temperature: float = 0.4,
        session: Optional[requests.Session] = None,
    ) -> None:
        api_key = os.environ.get(api_key_env)
        if not api_key:
            raise GeminiAPIError(f"Set {api_key_env} to write clues with Gemini")
        self._api_key = api_key
        self.model_name = os.environ.get(model_env, model_name)
        self.timeout_seconds = timeout_seconds
        self.temperature = temperature
        self._session = session or requests.Session()

    @property
    def endpoint(self) -> str:
        return f"{self.API_BASE}/models/{self.model_name}:generateContent"

    def generate_text(self, prompt: str) -> str:
        body = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "temperature": self.temperature,
            },
        }
        data = self._post(body)
        text = next(self._texts(data), None)
        if text is None:
            reason = (data.get("promptFeedback") or {}).get("blockReason")
            LOGGER.warning("Gemini returned no text (block reason: %s)", reason)
            raise GeminiAPIError(f"Gemini returned no text for model {self.model_name}")
        LOGGER.debug("Gemini replied with %d characters", len(text))
        return text

    def _post(self, body: Dict[str, Any]) -> Dict[str, Any]:
        try:
            response = self._session.post(
                self.endpoint,
                params={"key": self._api_key},
                json=body,
                timeout=self.timeout_seconds,
            )
        except requests.RequestException as exc:  # pragma: no cover - network failure
            raise GeminiAPIError(f"Gemini request failed: {exc}") from exc
        if not response.ok:
            raise GeminiAPIError(
                f"Gemini responded {response.status_code}: {self._error_message(response)}"
            )
        try:
            return response.json()
        except ValueError as exc:
            raise GeminiAPIError(f"Gemini reply is not JSON: {response.text[:200]}") from exc

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            return response.json()["error"]["message"]
        except (ValueError, KeyError, TypeError):
            return response.text[:200]

    @staticmethod
    def _texts(payload: Dict[str, Any]) -> Iterator[str]:
        for candidate in payload.get("candidates") or []:
            for part in (candidate.get("content") or {}).get("parts") or []:
                if part.get("text"):
                    yield part["text"]
