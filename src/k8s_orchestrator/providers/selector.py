"""Model backend selection from captured settings."""

from __future__ import annotations

import logging

from k8s_orchestrator.core.config import Settings
from k8s_orchestrator.types.config import ApiKeyBackend, ModelBackend, VertexBackend

logger = logging.getLogger(__name__)


def select_backend(settings: Settings) -> ModelBackend:
    """Choose the Gemini backend for *settings*.

    Vertex AI wins when both project and location are set. Otherwise the
    API key backend is used, preferring ``GEMINI_API_KEY`` over
    ``GOOGLE_API_KEY``. The key itself is not checked here; an empty or bad
    key is rejected by the client.
    """
    if settings.project and settings.location:
        logger.debug(
            "Using Vertex AI backend (project=%s, location=%s)",
            settings.project,
            settings.location,
        )
        return VertexBackend(project=settings.project, location=settings.location)

    api_key = settings.gemini_api_key or settings.google_api_key
    logger.debug("Using Gemini API key backend")
    return ApiKeyBackend(api_key=api_key)
