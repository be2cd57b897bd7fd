"""Conversation sessions on top of the ADK runner."""

from __future__ import annotations

import json
import logging
from collections.abc import AsyncIterator, Callable
from typing import Any

from google.adk.agents import BaseAgent
from google.adk.events import Event
from google.adk.runners import InMemoryRunner
from google.genai import types

from k8s_orchestrator.types.messages import (
    ErrorMessage,
    Message,
    Result,
    TextMessage,
    ToolResult,
    ToolUse,
)

logger = logging.getLogger(__name__)

APP_NAME = "k8s_orchestrator"
DEFAULT_USER_ID = "user"

RunnerFactory = Callable[[BaseAgent, str], Any]


def default_runner_factory(agent: BaseAgent, app_name: str) -> InMemoryRunner:
    return InMemoryRunner(agent=agent, app_name=app_name)


def messages_from_event(event: Event) -> list[Message]:
    """Translate one runtime event into the messages the printers understand."""
    messages: list[Message] = []
    author = event.author or ""

    if event.error_code or event.error_message:
        messages.append(ErrorMessage(
            code=str(event.error_code or "error"),
            message=event.error_message or "",
        ))

    if event.content is None or not event.content.parts:
        return messages

    for part in event.content.parts:
        if part.function_call:
            fc = part.function_call
            messages.append(ToolUse(
                author=author,
                id=fc.id or "",
                name=fc.name or "",
                args=dict(fc.args) if fc.args else {},
            ))
        elif part.function_response:
            fr = part.function_response
            messages.append(ToolResult(
                author=author,
                id=fr.id or "",
                name=fr.name or "",
                content=_response_text(fr.response),
                is_error=isinstance(fr.response, dict) and "error" in fr.response,
            ))
        elif part.text and not part.thought:
            messages.append(TextMessage(
                author=author,
                text=part.text,
                is_partial=bool(event.partial),
            ))

    return messages


def _response_text(response: Any) -> str:
    if isinstance(response, dict):
        for key in ("result", "error"):
            if key in response and isinstance(response[key], str):
                return response[key]
        return json.dumps(response, default=str)
    return "" if response is None else str(response)


class AgentSession:
    """One conversation with the root agent.

    The session is created lazily on the first prompt; :meth:`reset` drops
    it so the next prompt starts a fresh conversation.
    """

    def __init__(
        self,
        runner: Any,
        *,
        app_name: str = APP_NAME,
        user_id: str = DEFAULT_USER_ID,
    ) -> None:
        self._runner = runner
        self._app_name = app_name
        self._user_id = user_id
        self._session_id: str | None = None

    @property
    def session_id(self) -> str | None:
        return self._session_id

    async def start(self) -> str:
        """Create a new runtime session and return its ID."""
        session = await self._runner.session_service.create_session(
            app_name=self._app_name,
            user_id=self._user_id,
        )
        self._session_id = session.id
        logger.debug("Started session %s for user %s", session.id, self._user_id)
        return session.id

    def reset(self) -> None:
        self._session_id = None

    async def send(self, prompt: str) -> AsyncIterator[Message]:
        """Run *prompt* through the root agent, yielding messages as they arrive.

        Ends with a :class:`Result` carrying the final response text.
        """
        session_id = self._session_id or await self.start()

        new_message = types.Content(role="user", parts=[types.Part(text=prompt)])
        final_text = ""
        tool_calls = 0
        total_tokens = 0

        async for event in self._runner.run_async(
            user_id=self._user_id,
            session_id=session_id,
            new_message=new_message,
        ):
            if event.usage_metadata and event.usage_metadata.total_token_count:
                total_tokens += event.usage_metadata.total_token_count

            for msg in messages_from_event(event):
                if isinstance(msg, ToolUse):
                    tool_calls += 1
                elif isinstance(msg, TextMessage) and not msg.is_partial:
                    if event.is_final_response():
                        final_text = msg.text
                yield msg

        yield Result(
            text=final_text,
            session_id=session_id,
            tool_calls=tool_calls,
            total_tokens=total_tokens,
        )
