"""Google Gemini model construction.

Uses the official ``google-genai`` SDK for the client and binds it into the
ADK :class:`~google.adk.models.Gemini` model so every agent in the tree
shares one explicitly configured client instead of one built from ambient
environment variables.
"""

from __future__ import annotations

import logging
from typing import Any

from google import genai
from google.adk.models import Gemini
from pydantic import PrivateAttr

from k8s_orchestrator.core.errors import ModelError
from k8s_orchestrator.types.config import ApiKeyBackend, ModelBackend, VertexBackend

logger = logging.getLogger(__name__)


class ConfiguredGemini(Gemini):
    """ADK Gemini model that talks through a pre-built ``genai.Client``."""

    _client: Any = PrivateAttr(default=None)

    @property
    def api_client(self) -> genai.Client:  # type: ignore[override]
        return self._client


def create_client(backend: ModelBackend) -> genai.Client:
    """Build a ``genai.Client`` for *backend*.

    Raises whatever the SDK raises; :func:`create_model` turns that into a
    :class:`ModelError`.
    """
    match backend:
        case VertexBackend(project=project, location=location):
            return genai.Client(vertexai=True, project=project, location=location)
        case ApiKeyBackend(api_key=api_key):
            return genai.Client(api_key=api_key)
    raise TypeError(f"Unsupported model backend: {backend!r}")


def create_model(backend: ModelBackend, model_name: str) -> ConfiguredGemini:
    """Create the model handle shared by the root agent and all sub-agents.

    Parameters
    ----------
    backend:
        Selected backend (see :func:`~k8s_orchestrator.providers.selector.select_backend`).
    model_name:
        Gemini model ID, e.g. ``"gemini-3-flash-preview"``.

    Raises
    ------
    ModelError
        If the client or model cannot be constructed.
    """
    try:
        client = create_client(backend)
        model = ConfiguredGemini(model=model_name)
    except Exception as exc:
        logger.debug(
            "Error creating Gemini client: %s: %s",
            type(exc).__name__,
            exc,
        )
        raise ModelError(f"Failed to create model: {exc}") from exc

    model._client = client
    logger.debug("Created model %s (%s)", model_name, type(backend).__name__)
    return model
