"""Gemini model provider via the google-genai SDK.

Used for job descriptions, development plans, talent-pool analysis and
draft employee profiles.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from google import genai
from google.genai import types

from simt.core.exceptions import ModelProviderError

T = TypeVar("T")

logger = logging.getLogger(__name__)

_ROLE_MAP = {"user": "user", "assistant": "model", "model": "model"}


def _to_contents(messages: list[dict[str, str]]) -> tuple[str | None, list[types.Content]]:
    """Split chat messages into a system instruction and Gemini contents."""
    system_parts: list[str] = []
    contents: list[types.Content] = []
    for message in messages:
        role = message.get("role", "user")
        text = message.get("content", "")
        if role == "system":
            system_parts.append(text)
            continue
        contents.append(types.Content(role=_ROLE_MAP.get(role, "user"), parts=[types.Part(text=text)]))
    return ("\n\n".join(system_parts) or None), contents


class GeminiModelProvider:
    """IModelProvider backed by Google's Gemini API."""

    def __init__(self, api_key: str, model: str = "gemini-2.5-flash", top_p: float = 0.95) -> None:
        if not api_key:
            raise ModelProviderError("Gemini API key is not configured (SIMT_LLM_API_KEY)")
        self._model = model
        self._top_p = top_p
        self._client = genai.Client(api_key=api_key)

    def _generate(self, messages: list[dict[str, str]], **config: Any) -> types.GenerateContentResponse:
        system_instruction, contents = _to_contents(messages)
        try:
            return self._client.models.generate_content(
                model=self._model,
                contents=contents,
                config=types.GenerateContentConfig(
                    system_instruction=system_instruction,
                    top_p=self._top_p,
                    **config,
                ),
            )
        except Exception as exc:
            raise ModelProviderError(f"Gemini generate_content failed: {exc}") from exc

    def chat(self, messages: list[dict[str, str]], **kwargs: Any) -> str:
        response = self._generate(messages, temperature=kwargs.get("temperature"))
        if not response.text:
            raise ModelProviderError("Gemini returned an empty response")
        return response.text

    def structured_output(
        self, messages: list[dict[str, str]], response_model: type[T], **kwargs: Any
    ) -> T:
        response = self._generate(
            messages,
            temperature=kwargs.get("temperature"),
            response_mime_type="application/json",
            response_schema=response_model,
        )
        try:
            return response_model.model_validate_json(response.text.strip())  # type: ignore[attr-defined]
        except Exception as exc:
            logger.warning("Unparseable structured response from %s", self._model)
            raise ModelProviderError(f"Gemini structured output invalid: {exc}") from exc
