"""Configuration loading (.env, environment variables, fixed template paths)."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from current directory (and parents), won't override existing env vars
load_dotenv()

PROJECT_ENV = "GOOGLE_CLOUD_PROJECT"
LOCATION_ENV = "GOOGLE_CLOUD_LOCATION"
API_KEY_ENVS = ("GEMINI_API_KEY", "GOOGLE_API_KEY")  # primary, secondary
MODEL_ENV = "K8S_ORCHESTRATOR_MODEL"
LOG_LEVEL_ENV = "K8S_ORCHESTRATOR_LOG_LEVEL"

DEFAULT_MODEL = "gemini-3-flash-preview"
ROOT_TEMPLATE_PATH = Path("templates/root.tmpl")
SUB_AGENTS_DIR = Path("templates/sub-agents")
TEMPLATE_SUFFIX = ".tmpl"


@dataclass(frozen=True, slots=True)
class Settings:
    """Process-wide settings, captured once at startup.

    Nothing downstream reads the environment directly; the startup chain
    receives this value instead.
    """

    project: str = ""
    location: str = ""
    gemini_api_key: str = ""
    google_api_key: str = ""
    model: str = DEFAULT_MODEL
    root_template: Path = ROOT_TEMPLATE_PATH
    sub_agents_dir: Path = SUB_AGENTS_DIR

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Capture settings from *environ* (defaults to ``os.environ``)."""
        env = os.environ if environ is None else environ
        primary, secondary = API_KEY_ENVS
        return cls(
            project=env.get(PROJECT_ENV, ""),
            location=env.get(LOCATION_ENV, ""),
            gemini_api_key=env.get(primary, ""),
            google_api_key=env.get(secondary, ""),
            model=env.get(MODEL_ENV) or DEFAULT_MODEL,
        )

    def __repr__(self) -> str:
        # API keys stay out of logs and tracebacks
        return (
            f"Settings(project={self.project!r}, location={self.location!r}, "
            f"model={self.model!r}, root_template={str(self.root_template)!r}, "
            f"sub_agents_dir={str(self.sub_agents_dir)!r})"
        )


def resolve_log_level(environ: Mapping[str, str] | None = None) -> str:
    """Return the configured log level name, ``INFO`` when unset or unknown."""
    env = os.environ if environ is None else environ
    level = env.get(LOG_LEVEL_ENV, "").strip().upper()
    if level in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        return level
    return "INFO"
