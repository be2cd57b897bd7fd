"""Launcher: runs a loaded agent in console or one-shot mode.

The launcher owns argument parsing. Everything before it hands over a
single configured root agent; everything after it is the ADK runtime.
"""

from __future__ import annotations

import asyncio
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field

import click
from google.adk.agents import BaseAgent

from k8s_orchestrator.agents.registry import delegated_agents
from k8s_orchestrator.cli.output import print_message
from k8s_orchestrator.cli.session import (
    APP_NAME,
    DEFAULT_USER_ID,
    AgentSession,
    RunnerFactory,
    default_runner_factory,
)
from k8s_orchestrator.core.errors import LaunchError, OrchestratorError
from k8s_orchestrator.types.messages import ErrorMessage

PROG_NAME = "k8s-orchestrator"


class SingleAgentLoader:
    """Agent loader that serves exactly one root agent."""

    def __init__(self, agent: BaseAgent) -> None:
        self._agent = agent

    @property
    def root_agent(self) -> BaseAgent:
        return self._agent

    def list_agents(self) -> list[str]:
        return [self._agent.name]

    def load_agent(self, name: str | None = None) -> BaseAgent:
        """Return the root agent. Raises KeyError for any other name."""
        if name and name != self._agent.name:
            raise KeyError(
                f"Unknown agent: {name!r}. Available: {self._agent.name}"
            )
        return self._agent


@dataclass(frozen=True, slots=True)
class LaunchConfig:
    """Everything the launcher needs besides the command-line arguments."""

    agent_loader: SingleAgentLoader
    app_name: str = APP_NAME
    runner_factory: RunnerFactory = field(default=default_runner_factory)


@dataclass
class _LaunchState:
    config: LaunchConfig
    agent: BaseAgent
    use_rich: bool
    user_id: str

    def new_session(self) -> AgentSession:
        runner = self.config.runner_factory(self.agent, self.config.app_name)
        return AgentSession(
            runner,
            app_name=self.config.app_name,
            user_id=self.user_id,
        )

    def output_fn(self):
        if self.use_rich:
            from k8s_orchestrator.ui.terminal import RichPrinter

            return RichPrinter().print_message
        return print_message


@click.group(invoke_without_command=True)
@click.option("--agent", "agent_name", default=None, help="Agent to run (default: root agent)")
@click.option("--user-id", default=DEFAULT_USER_ID, show_default=True, help="Session user ID")
@click.option("--rich/--no-rich", default=None, help="Rich terminal output (default: auto)")
@click.pass_context
def launcher_cli(
    ctx: click.Context,
    agent_name: str | None,
    user_id: str,
    rich: bool | None,
) -> None:
    """Kubernetes manifest orchestrator.

    \b
    Usage:
      k8s-orchestrator                      (interactive console)
      k8s-orchestrator run "Deploy nginx with 3 replicas behind a Service"
      k8s-orchestrator agents
    """
    config: LaunchConfig = ctx.obj
    try:
        agent = config.agent_loader.load_agent(agent_name)
    except KeyError as exc:
        raise click.BadParameter(str(exc.args[0]), param_hint="--agent") from exc

    # Determine rich mode: explicit flag > TTY auto-detection
    use_rich = rich if rich is not None else sys.stdout.isatty()
    ctx.obj = _LaunchState(config=config, agent=agent, use_rich=use_rich, user_id=user_id)

    if ctx.invoked_subcommand is None:
        ctx.invoke(console)


@launcher_cli.command()
@click.pass_obj
def console(state: _LaunchState) -> None:
    """Chat with the orchestrator interactively."""
    from k8s_orchestrator.cli.repl import Repl

    repl = Repl(state.new_session(), state.agent, output_fn=state.output_fn())
    asyncio.run(repl.run())


@launcher_cli.command()
@click.argument("prompt", nargs=-1)
@click.pass_obj
def run(state: _LaunchState, prompt: tuple[str, ...]) -> int:
    """Send a single PROMPT (or stdin) and print the response."""
    prompt_text = " ".join(prompt).strip()
    if not prompt_text and not sys.stdin.isatty():
        prompt_text = sys.stdin.read().strip()
    if not prompt_text:
        raise click.UsageError("empty prompt")

    return asyncio.run(_run_once(state.new_session(), prompt_text, state.output_fn()))


async def _run_once(session: AgentSession, prompt: str, output_fn) -> int:
    failed = False
    async for msg in session.send(prompt):
        if isinstance(msg, ErrorMessage):
            failed = True
        output_fn(msg)
    return 1 if failed else 0


@launcher_cli.command()
@click.pass_obj
def agents(state: _LaunchState) -> None:
    """List the root agent and the sub-agents it delegates to."""
    subs = delegated_agents(state.agent)
    if state.use_rich:
        from k8s_orchestrator.ui.terminal import print_agents_table

        print_agents_table(state.agent, subs)
        return

    click.echo(f"{state.agent.name}: {state.agent.description}")
    for sub in subs:
        click.echo(f"  {sub.name:<24} {sub.description}")


class Launcher:
    """Runs the launcher CLI with a given configuration and argument list."""

    def execute(self, config: LaunchConfig, args: Sequence[str]) -> int:
        """Parse *args* and run the selected mode. Returns the exit status.

        Raises:
            LaunchError: The run loop failed.
        """
        try:
            rv = launcher_cli.main(
                args=list(args),
                prog_name=PROG_NAME,
                standalone_mode=False,
                obj=config,
            )
        except click.ClickException as exc:
            exc.show()
            return exc.exit_code
        except click.exceptions.Abort:
            click.echo("Aborted!", err=True)
            return 1
        except OrchestratorError:
            raise
        except Exception as exc:
            raise LaunchError(f"Agent execution failed: {exc}") from exc

        return rv if isinstance(rv, int) else 0
