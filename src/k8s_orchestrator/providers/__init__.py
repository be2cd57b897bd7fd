"""Model backend selection and construction.

Public surface
--------------
- :func:`select_backend`     : settings to Vertex AI or API key backend
- :func:`create_client`      : ``genai.Client`` for a backend
- :func:`create_model`       : ADK Gemini model bound to that client
- :class:`ConfiguredGemini`  : the model type returned by :func:`create_model`
"""

from __future__ import annotations

from k8s_orchestrator.providers.google import ConfiguredGemini, create_client, create_model
from k8s_orchestrator.providers.selector import select_backend

__all__ = [
    "ConfiguredGemini",
    "create_client",
    "create_model",
    "select_backend",
]
