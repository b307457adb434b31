"""Generative text providers behind the IModelProvider protocol."""

from __future__ import annotations

from simt.core.config import AppSettings
from simt.core.protocols import IModelProvider
from simt.model_providers.mock_provider import MockModelProvider


def create_model_provider(settings: AppSettings | None = None) -> IModelProvider:
    """Return the provider selected by ``SIMT_LLM_PROVIDER``."""
    if settings is None:
        settings = AppSettings()

    if settings.llm.provider == "gemini":
        from simt.model_providers.gemini_provider import GeminiModelProvider

        return GeminiModelProvider(
            api_key=settings.llm.api_key,
            model=settings.llm.model,
            top_p=settings.llm.top_p,
        )
    return MockModelProvider()
