"""Mock model provider for local development and testing.

Returns canned responses. No real LLM calls.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from simt.core.exceptions import ModelProviderError

T = TypeVar("T")


class MockModelProvider:
    """IModelProvider implementation that returns deterministic mock responses."""

    def __init__(self, default_response: str = "Mock LLM response") -> None:
        self._default_response = default_response
        self._canned_responses: dict[str, str] = {}
        self._failure: str | None = None
        self.calls: list[dict[str, Any]] = []

    def set_response(self, prompt_contains: str, response: str) -> None:
        """Register a canned response for prompts containing a keyword."""
        self._canned_responses[prompt_contains] = response

    def fail_with(self, message: str | None) -> None:
        """Make every subsequent call raise ModelProviderError (None to reset)."""
        self._failure = message

    def _respond(self, messages: list[dict[str, str]], kwargs: dict[str, Any]) -> str:
        self.calls.append({"messages": messages, **kwargs})
        if self._failure is not None:
            raise ModelProviderError(self._failure)
        last_content = messages[-1].get("content", "") if messages else ""
        for keyword, response in self._canned_responses.items():
            if keyword in last_content:
                return response
        return self._default_response

    def chat(self, messages: list[dict[str, str]], **kwargs: Any) -> str:
        return self._respond(messages, kwargs)

    def structured_output(
        self, messages: list[dict[str, str]], response_model: type[T], **kwargs: Any
    ) -> T:
        """Parse a canned JSON response, or return a default instance of the model."""
        text = self._respond(messages, kwargs)
        if text != self._default_response and issubclass(response_model, BaseModel):
            try:
                return response_model.model_validate_json(text)  # type: ignore[return-value]
            except ValidationError as exc:
                raise ModelProviderError(f"Mock structured output invalid: {exc}") from exc
        return response_model()  # type: ignore[call-arg]
