"""Shared value types for k8s-orchestrator."""

from k8s_orchestrator.types.agents import SubAgentSpec, TemplateEntry
from k8s_orchestrator.types.config import ApiKeyBackend, ModelBackend, VertexBackend
from k8s_orchestrator.types.messages import (
    ErrorMessage,
    Message,
    Result,
    TextMessage,
    ToolResult,
    ToolUse,
)

__all__ = [
    # Configuration
    "ApiKeyBackend",
    "ModelBackend",
    "VertexBackend",
    # Agents
    "SubAgentSpec",
    "TemplateEntry",
    # Messages
    "ErrorMessage",
    "Message",
    "Result",
    "TextMessage",
    "ToolResult",
    "ToolUse",
]
