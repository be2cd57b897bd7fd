"""Startup and launch errors.

Every error here is fatal: the entry point logs it once and exits non-zero.
"""

from __future__ import annotations


class OrchestratorError(Exception):
    """Base class for failures while building or running the orchestrator."""

    stage = "startup"


class TemplateError(OrchestratorError):
    """A template directory or file could not be read."""

    stage = "templates"


class ModelError(OrchestratorError):
    """The model client could not be constructed."""

    stage = "model"


class AgentBuildError(OrchestratorError):
    """An agent rejected its name, description or instruction."""

    stage = "agents"


class LaunchError(OrchestratorError):
    """The run loop reported a failure."""

    stage = "launch"
