"""Model backend configuration types."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class VertexBackend:
    """Gemini served through Vertex AI, authenticated with application default credentials."""

    project: str
    location: str


@dataclass(frozen=True, slots=True)
class ApiKeyBackend:
    """Gemini Developer API, authenticated with an API key."""

    api_key: str

    def __repr__(self) -> str:
        return "ApiKeyBackend(api_key=***)"


ModelBackend = VertexBackend | ApiKeyBackend
