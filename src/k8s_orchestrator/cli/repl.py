"""Interactive console for the orchestrator."""

from __future__ import annotations

import asyncio
import signal
from collections.abc import Callable
from typing import Any

from k8s_orchestrator.agents.registry import delegated_agents
from k8s_orchestrator.cli.session import AgentSession
from k8s_orchestrator.types.messages import Message


class Repl:
    """Interactive read-eval-print loop over one :class:`AgentSession`.

    Enters a loop: read prompt -> run root agent -> print output -> repeat.
    Ctrl+C cancels the running prompt, Ctrl+D exits.
    """

    SLASH_COMMANDS = {
        "/help": "Show available commands",
        "/agents": "List the sub-agents the orchestrator can delegate to",
        "/new": "Start a new conversation",
        "/exit": "Exit (or press Ctrl+D)",
    }

    def __init__(
        self,
        session: AgentSession,
        root_agent: Any,
        *,
        output_fn: Callable[[Message], None],
        input_fn: Callable[[str], str] = input,
        echo: Callable[[str], None] = print,
    ) -> None:
        self._session = session
        self._root_agent = root_agent
        self._output_fn = output_fn
        self._input_fn = input_fn
        self._echo = echo
        self._cancelled = False

    # -- Main loop -------------------------------------------------------------

    async def run(self) -> None:
        """Main REPL loop."""
        self._print_banner()

        while True:
            try:
                prompt = await self._read_prompt()
            except EOFError:
                self._echo("\nGoodbye!")
                break
            except KeyboardInterrupt:
                self._echo("")
                continue

            if not prompt:
                continue

            if prompt.startswith("/"):
                if not self._handle_slash_command(prompt):
                    break
                continue

            await self._run_prompt(prompt)

    async def _read_prompt(self) -> str:
        """Read a prompt from stdin without blocking the event loop."""
        loop = asyncio.get_running_loop()
        line = await loop.run_in_executor(None, lambda: self._input_fn("k8s > "))
        return line.strip()

    async def _run_prompt(self, prompt: str) -> None:
        """Run a single prompt through the session and print messages."""
        self._cancelled = False
        original_handler = signal.getsignal(signal.SIGINT)

        def _cancel_handler(signum: int, frame: Any) -> None:
            self._cancelled = True

        try:
            signal.signal(signal.SIGINT, _cancel_handler)
            async for msg in self._session.send(prompt):
                if self._cancelled:
                    self._echo("\n[cancelled]")
                    break
                self._output_fn(msg)
        finally:
            signal.signal(signal.SIGINT, original_handler)

    # -- Slash command dispatch -------------------------------------------------

    def _handle_slash_command(self, cmd: str) -> bool:
        """Handle a slash command. Returns False when the loop should exit."""
        base = cmd.strip().split(maxsplit=1)[0].lower()

        if base == "/exit":
            self._echo("Goodbye!")
            return False
        if base == "/help":
            self._handle_help()
        elif base == "/agents":
            self._handle_agents()
        elif base == "/new":
            self._session.reset()
            self._echo("  Started a new conversation.")
        else:
            matches = [c for c in self.SLASH_COMMANDS if c.startswith(base)]
            if matches:
                self._echo(f"  Unknown command: {base}. Did you mean: {', '.join(matches)}?")
            else:
                self._echo(f"  Unknown command: {base}. Type /help to see all commands.")
        return True

    def _handle_help(self) -> None:
        self._echo("")
        for name, desc in self.SLASH_COMMANDS.items():
            self._echo(f"  {name:<10} {desc}")
        self._echo("")
        self._echo("  Anything else is sent to the orchestrator, e.g.")
        self._echo("    Create a Deployment and Service for nginx on port 80")
        self._echo("")

    def _handle_agents(self) -> None:
        agents = delegated_agents(self._root_agent)
        if not agents:
            self._echo("  No sub-agents loaded.")
            return
        for agent in agents:
            self._echo(f"  {agent.name:<24} {agent.description}")

    def _print_banner(self) -> None:
        count = len(delegated_agents(self._root_agent))
        self._echo(f"{self._root_agent.name}: {count} sub-agent(s). Type /help for commands.")
