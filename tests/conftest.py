"""Test fixtures: in-memory template source, scripted runner, template trees."""

from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path
from typing import Any

import pytest
from google.adk.events import Event
from google.adk.sessions import InMemorySessionService
from google.genai import types

from k8s_orchestrator.core.config import Settings
from k8s_orchestrator.types.agents import TemplateEntry

TEST_MODEL = "gemini-2.0-flash"

SUB_AGENT_TEMPLATES = {
    "deployment.tmpl": "You write Deployments.",
    "service.tmpl": "You write Services.",
}


class MemoryTemplateSource:
    """A template source backed by a dict, for loader tests without a filesystem.

    Usage:
        source = MemoryTemplateSource(
            files={"deployment.tmpl": "T", "README.md": "ignored"},
            dirs=["nested.tmpl"],
            unreadable={"broken.tmpl"},
        )
    """

    def __init__(
        self,
        files: dict[str, str] | None = None,
        *,
        dirs: list[str] | None = None,
        unreadable: set[str] | None = None,
        listing_error: OSError | None = None,
    ) -> None:
        self._files = dict(files or {})
        self._dirs = list(dirs or [])
        self._unreadable = set(unreadable or ())
        self._listing_error = listing_error
        self.reads: list[str] = []

    def list_entries(self) -> list[TemplateEntry]:
        if self._listing_error is not None:
            raise self._listing_error
        entries = [TemplateEntry(name=name) for name in self._files]
        entries += [TemplateEntry(name=name, is_dir=True) for name in self._dirs]
        return entries

    def read_text(self, name: str) -> str:
        self.reads.append(name)
        if name in self._unreadable:
            raise PermissionError(13, "Permission denied", name)
        if name in self._dirs:
            raise IsADirectoryError(21, "Is a directory", name)
        return self._files[name]


class FakeRunner:
    """A scripted stand-in for the ADK runner.

    Each call to :meth:`run_async` replays the next list of events from
    *turns*. Sessions are real, kept in an ``InMemorySessionService``.
    """

    def __init__(self, turns: list[list[Event]] | None = None, error: Exception | None = None):
        self.session_service = InMemorySessionService()
        self._turns = list(turns or [])
        self._error = error
        self.calls: list[dict[str, Any]] = []

    async def run_async(
        self,
        *,
        user_id: str,
        session_id: str,
        new_message: types.Content,
    ) -> AsyncIterator[Event]:
        self.calls.append({
            "user_id": user_id,
            "session_id": session_id,
            "text": new_message.parts[0].text,
        })
        if self._error is not None:
            raise self._error
        events = self._turns.pop(0) if self._turns else []
        for event in events:
            yield event


def text_event(author: str, text: str, *, partial: bool = False) -> Event:
    return Event(
        author=author,
        partial=partial,
        content=types.Content(role="model", parts=[types.Part(text=text)]),
    )


def call_event(author: str, name: str, request: str, call_id: str = "fc-1") -> Event:
    return Event(
        author=author,
        content=types.Content(role="model", parts=[
            types.Part(function_call=types.FunctionCall(
                id=call_id, name=name, args={"request": request},
            )),
        ]),
    )


def response_event(author: str, name: str, response: dict[str, Any], call_id: str = "fc-1") -> Event:
    return Event(
        author=author,
        content=types.Content(role="user", parts=[
            types.Part(function_response=types.FunctionResponse(
                id=call_id, name=name, response=response,
            )),
        ]),
    )


def error_event(author: str, code: str, message: str) -> Event:
    return Event(author=author, error_code=code, error_message=message)


def write_templates(
    root: Path,
    sub_agents: dict[str, str] | None = None,
    root_instruction: str | None = "You orchestrate Kubernetes manifests.",
) -> Path:
    """Lay out ``templates/root.tmpl`` and ``templates/sub-agents/*`` under *root*."""
    templates = root / "templates"
    sub_dir = templates / "sub-agents"
    sub_dir.mkdir(parents=True)
    if root_instruction is not None:
        (templates / "root.tmpl").write_text(root_instruction)
    for name, content in (SUB_AGENT_TEMPLATES if sub_agents is None else sub_agents).items():
        (sub_dir / name).write_text(content)
    return templates


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    """A project directory with a root template and two sub-agent templates."""
    write_templates(tmp_path)
    return tmp_path


@pytest.fixture
def settings(template_root: Path) -> Settings:
    return Settings(
        gemini_api_key="test-key",
        model=TEST_MODEL,
        root_template=template_root / "templates" / "root.tmpl",
        sub_agents_dir=template_root / "templates" / "sub-agents",
    )


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner(turns=[[
        call_event("K8sOrchestrator", "deployment", "nginx, 3 replicas"),
        response_event("K8sOrchestrator", "deployment", {"result": "kind: Deployment"}),
        text_event("K8sOrchestrator", "Here are your manifests."),
    ]])
