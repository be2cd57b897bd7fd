"""Agent construction: specialist sub-agents, their tool bindings, and the root agent."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path

from google.adk.agents import LlmAgent
from google.adk.models import BaseLlm
from google.adk.tools.agent_tool import AgentTool

from k8s_orchestrator.types.agents import SubAgentSpec

ROOT_AGENT_NAME = "K8sOrchestrator"
ROOT_AGENT_DESCRIPTION = (
    "A specialized orchestrator for generating Kubernetes manifests. "
    "It delegates to sub-agents for specific resource types."
)


def create_sub_agent(spec: SubAgentSpec, model: BaseLlm | str) -> LlmAgent:
    """Instantiate the specialist agent described by *spec*.

    Raises ``ValueError`` (pydantic ``ValidationError``) if ADK rejects the
    name, e.g. a template file name that is not a valid identifier.
    """
    return LlmAgent(
        name=spec.name,
        model=model,
        description=spec.description,
        instruction=spec.instruction,
    )


def create_sub_agents(
    specs: Iterable[SubAgentSpec], model: BaseLlm | str
) -> list[LlmAgent]:
    """Instantiate one agent per spec, in order."""
    return [create_sub_agent(spec, model) for spec in specs]


def as_tools(agents: Iterable[LlmAgent]) -> list[AgentTool]:
    """Wrap each agent so the root agent can call it by name."""
    return [AgentTool(agent=agent) for agent in agents]


def read_root_instruction(path: str | Path) -> str:
    """Read the root agent's instruction text verbatim."""
    return Path(path).read_text(encoding="utf-8")


def create_root_agent(
    model: BaseLlm | str,
    instruction: str,
    tools: Sequence[AgentTool],
) -> LlmAgent:
    """Create the root orchestrator with every sub-agent exposed as a tool."""
    return LlmAgent(
        name=ROOT_AGENT_NAME,
        model=model,
        description=ROOT_AGENT_DESCRIPTION,
        instruction=instruction,
        tools=list(tools),
    )


def delegated_agents(root: LlmAgent) -> list[LlmAgent]:
    """Return the sub-agents reachable from *root* through its agent tools."""
    return [t.agent for t in getattr(root, "tools", ()) if isinstance(t, AgentTool)]
