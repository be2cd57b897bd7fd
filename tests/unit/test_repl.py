"""Tests for the interactive console."""

from __future__ import annotations

import pytest

from k8s_orchestrator.agents.registry import as_tools, create_root_agent, create_sub_agents
from k8s_orchestrator.cli.repl import Repl
from k8s_orchestrator.cli.session import AgentSession
from k8s_orchestrator.types.agents import SubAgentSpec
from k8s_orchestrator.types.messages import Result, TextMessage
from tests.conftest import TEST_MODEL, FakeRunner, text_event


def _scripted_input(lines: list[str]):
    pending = list(lines)

    def _input(prompt: str) -> str:
        if not pending:
            raise EOFError
        return pending.pop(0)

    return _input


def _make_repl(lines: list[str], runner: FakeRunner, *, sub_agents: bool = True):
    specs = [SubAgentSpec(name="deployment", instruction="d")] if sub_agents else []
    root = create_root_agent(TEST_MODEL, "Root", as_tools(create_sub_agents(specs, TEST_MODEL)))
    printed: list = []
    echoed: list[str] = []
    repl = Repl(
        AgentSession(runner),
        root,
        output_fn=printed.append,
        input_fn=_scripted_input(lines),
        echo=echoed.append,
    )
    return repl, printed, echoed


class TestRepl:
    @pytest.mark.asyncio
    async def test_prompt_runs_through_session(self):
        runner = FakeRunner(turns=[[text_event("K8sOrchestrator", "kind: Deployment")]])
        repl, printed, echoed = _make_repl(["Deploy nginx"], runner)
        await repl.run()
        assert runner.calls[0]["text"] == "Deploy nginx"
        assert isinstance(printed[0], TextMessage)
        assert isinstance(printed[-1], Result)
        assert "Goodbye!" in echoed[-1]

    @pytest.mark.asyncio
    async def test_banner_counts_sub_agents(self):
        repl, _, echoed = _make_repl([], FakeRunner())
        await repl.run()
        assert "1 sub-agent(s)" in echoed[0]

    @pytest.mark.asyncio
    async def test_blank_lines_ignored(self):
        runner = FakeRunner()
        repl, printed, _ = _make_repl(["", "   "], runner)
        await repl.run()
        assert runner.calls == []
        assert printed == []

    @pytest.mark.asyncio
    async def test_exit_command(self):
        runner = FakeRunner()
        repl, _, echoed = _make_repl(["/exit", "never sent"], runner)
        await repl.run()
        assert runner.calls == []
        assert echoed[-1] == "Goodbye!"

    @pytest.mark.asyncio
    async def test_agents_command(self):
        repl, _, echoed = _make_repl(["/agents"], FakeRunner())
        await repl.run()
        assert any("deployment" in line for line in echoed)

    @pytest.mark.asyncio
    async def test_agents_command_without_sub_agents(self):
        repl, _, echoed = _make_repl(["/agents"], FakeRunner(), sub_agents=False)
        await repl.run()
        assert "  No sub-agents loaded." in echoed

    @pytest.mark.asyncio
    async def test_new_conversation(self):
        runner = FakeRunner(turns=[[text_event("K8sOrchestrator", "a")], [text_event("K8sOrchestrator", "b")]])
        repl, _, _ = _make_repl(["first", "/new", "second"], runner)
        await repl.run()
        assert runner.calls[0]["session_id"] != runner.calls[1]["session_id"]

    @pytest.mark.asyncio
    async def test_help_and_unknown_commands(self):
        repl, _, echoed = _make_repl(["/help", "/ag", "/bogus"], FakeRunner())
        await repl.run()
        text = "\n".join(echoed)
        assert "/agents" in text
        assert "Did you mean: /agents?" in text
        assert "Unknown command: /bogus" in text
