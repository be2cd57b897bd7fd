"""CLI entry point for k8s-orchestrator."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from rich.console import Console
from rich.logging import RichHandler

from k8s_orchestrator.cli.launcher import LaunchConfig, Launcher, SingleAgentLoader
from k8s_orchestrator.core.config import Settings, resolve_log_level
from k8s_orchestrator.core.engine import build_orchestrator
from k8s_orchestrator.core.errors import OrchestratorError

logger = logging.getLogger("k8s_orchestrator")

_NOISY_LOGGERS = (
    "google",
    "google.genai",
    "google.auth",
    "google_adk",
    "httpx",
    "httpcore",
    "urllib3",
)


def configure_logging(level: str = "INFO") -> None:
    """Send log records to stderr through Rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    # Suppress verbose HTTP logging from Google API clients
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(logging.WARNING, logging.getLevelName(level)))


def run(
    args: Sequence[str],
    settings: Settings,
    launcher: Launcher | None = None,
) -> int:
    """Build the orchestrator from *settings* and launch it with *args*.

    Returns the launcher's exit status; raises :class:`OrchestratorError`
    if any startup stage or the run loop fails.
    """
    orchestrator = build_orchestrator(settings)
    config = LaunchConfig(agent_loader=SingleAgentLoader(orchestrator.root_agent))
    return (launcher or Launcher()).execute(config, args)


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point."""
    configure_logging(resolve_log_level())
    args = list(sys.argv[1:] if argv is None else argv)

    try:
        status = run(args, Settings.from_env())
    except OrchestratorError as exc:
        logger.critical("%s", exc)
        sys.exit(1)

    sys.exit(status)


if __name__ == "__main__":
    main()
