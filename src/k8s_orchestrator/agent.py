"""ADK root agent entry point.

Defines ``root_agent`` for the ADK developer tools, run from the project
root so the template paths resolve::

    adk run src/k8s_orchestrator
    adk web src

The ``k8s-orchestrator`` console script builds the same agent.
"""

from k8s_orchestrator.core.config import Settings
from k8s_orchestrator.core.engine import build_orchestrator

root_agent = build_orchestrator(Settings.from_env()).root_agent
