"""Agent definition types for sub-agents."""

from __future__ import annotations

from dataclasses import dataclass

SUB_AGENT_DESCRIPTION = "Specialist agent for generating {name} Kubernetes manifests."


@dataclass(frozen=True, slots=True)
class TemplateEntry:
    """A single entry of a template directory listing."""

    name: str
    is_dir: bool = False


@dataclass(frozen=True, slots=True)
class SubAgentSpec:
    """Definition of a sub-agent, derived from one template file."""

    name: str
    instruction: str

    @property
    def description(self) -> str:
        return SUB_AGENT_DESCRIPTION.format(name=self.name)
