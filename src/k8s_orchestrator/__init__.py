"""k8s-orchestrator: a Gemini root agent that delegates Kubernetes manifest
generation to template-defined specialist sub-agents.

Usage:
    from k8s_orchestrator import Settings, build_orchestrator

    orchestrator = build_orchestrator(Settings.from_env())
    print([a.name for a in orchestrator.sub_agents])
"""

from k8s_orchestrator.core.config import Settings
from k8s_orchestrator.core.engine import Orchestrator, build_orchestrator
from k8s_orchestrator.core.errors import (
    AgentBuildError,
    LaunchError,
    ModelError,
    OrchestratorError,
    TemplateError,
)
from k8s_orchestrator.types.agents import SubAgentSpec
from k8s_orchestrator.types.config import ApiKeyBackend, ModelBackend, VertexBackend

__version__ = "0.1.0"

__all__ = [
    # Core API
    "Orchestrator",
    "Settings",
    "build_orchestrator",
    # Configuration
    "ApiKeyBackend",
    "ModelBackend",
    "SubAgentSpec",
    "VertexBackend",
    # Errors
    "AgentBuildError",
    "LaunchError",
    "ModelError",
    "OrchestratorError",
    "TemplateError",
]
