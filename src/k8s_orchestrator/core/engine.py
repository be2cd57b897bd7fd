"""Engine: wires settings + model + templates into the root orchestrator agent."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from google.adk.agents import LlmAgent
from google.adk.models import BaseLlm

from k8s_orchestrator.agents.loader import (
    DirectoryTemplateSource,
    TemplateSource,
    discover_sub_agents,
)
from k8s_orchestrator.agents.registry import (
    as_tools,
    create_root_agent,
    create_sub_agents,
    read_root_instruction,
)
from k8s_orchestrator.core.config import Settings
from k8s_orchestrator.core.errors import AgentBuildError, TemplateError
from k8s_orchestrator.providers.google import create_model
from k8s_orchestrator.providers.selector import select_backend
from k8s_orchestrator.types.config import ModelBackend

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Orchestrator:
    """The fully assembled agent tree, ready to hand to a launcher."""

    root_agent: LlmAgent
    sub_agents: tuple[LlmAgent, ...]
    backend: ModelBackend | None = None


def build_orchestrator(
    settings: Settings,
    *,
    source: TemplateSource | None = None,
    model: BaseLlm | str | None = None,
) -> Orchestrator:
    """Build the root agent and its delegated sub-agents.

    Steps run strictly in order and the first failure stops the chain:
    model, sub-agents, root instruction, root agent.

    Args:
        settings: Captured process settings.
        source: Template source override (defaults to ``settings.sub_agents_dir``).
        model: Pre-built model override; skips backend selection.

    Raises:
        ModelError: The Gemini client could not be created.
        TemplateError: A template directory or file could not be read.
        AgentBuildError: ADK rejected an agent definition.
    """
    backend: ModelBackend | None = None
    if model is None:
        backend = select_backend(settings)
        model = create_model(backend, settings.model)

    if source is None:
        source = DirectoryTemplateSource(settings.sub_agents_dir)

    try:
        specs = discover_sub_agents(source)
    except (OSError, UnicodeDecodeError) as exc:
        raise TemplateError(f"Failed to load sub-agents: {exc}") from exc

    try:
        sub_agents = create_sub_agents(specs, model)
    except ValueError as exc:
        raise AgentBuildError(f"Failed to load sub-agents: {exc}") from exc

    tools = as_tools(sub_agents)

    try:
        instruction = read_root_instruction(settings.root_template)
    except (OSError, UnicodeDecodeError) as exc:
        raise TemplateError(f"Failed to read root template: {exc}") from exc

    try:
        root = create_root_agent(model, instruction, tools)
    except ValueError as exc:
        raise AgentBuildError(f"Failed to create root agent: {exc}") from exc

    logger.info(
        "Root agent %s ready with %d sub-agent tool(s)", root.name, len(tools)
    )
    return Orchestrator(root_agent=root, sub_agents=tuple(sub_agents), backend=backend)
