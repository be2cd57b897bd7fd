"""Message types rendered by the launcher while a conversation runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class TextMessage:
    """Text produced by an agent."""

    author: str
    text: str
    is_partial: bool = False


@dataclass(frozen=True, slots=True)
class ToolUse:
    """An agent delegates to a sub-agent (or calls any other tool)."""

    author: str
    id: str
    name: str
    args: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ToolResult:
    """A delegated sub-agent or tool returned."""

    author: str
    id: str
    name: str
    content: str
    is_error: bool = False


@dataclass(frozen=True, slots=True)
class ErrorMessage:
    """The runtime reported an error for this turn."""

    code: str
    message: str


@dataclass(frozen=True, slots=True)
class Result:
    """Summary emitted once a prompt has been fully handled."""

    text: str
    session_id: str
    tool_calls: int = 0
    total_tokens: int = 0


Message = TextMessage | ToolUse | ToolResult | ErrorMessage | Result
