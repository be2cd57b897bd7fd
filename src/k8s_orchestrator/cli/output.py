"""Basic text output for non-rich mode."""

from __future__ import annotations

import sys

from k8s_orchestrator.types.messages import (
    ErrorMessage,
    Message,
    Result,
    TextMessage,
    ToolResult,
    ToolUse,
)


def print_message(msg: Message) -> None:
    """Print a message to stdout/stderr in basic text mode."""
    match msg:
        case TextMessage(text=t, is_partial=True):
            sys.stdout.write(t)
            sys.stdout.flush()
        case TextMessage(author=author, text=t, is_partial=False):
            print(f"[{author}] {t}" if author else t)
        case ToolUse(author=author, name=name, args=args):
            request = args.get("request", "")
            detail = f" {request[:120]}" if isinstance(request, str) and request else ""
            print(f"[{author} -> {name}]{detail}", file=sys.stderr)
        case ToolResult(name=name, content=content, is_error=is_error):
            if is_error:
                print(f"[Error from {name}] {content[:200]}", file=sys.stderr)
            elif len(content) > 200:
                print(f"[{name} returned] {content[:200]}...", file=sys.stderr)
            else:
                print(f"[{name} returned] {content}", file=sys.stderr)
        case ErrorMessage(code=code, message=message):
            print(f"[Error {code}] {message}", file=sys.stderr)
        case Result(session_id=sid, tool_calls=tc, total_tokens=tokens):
            parts = [f"Session: {sid}", f"Delegations: {tc}"]
            if tokens:
                parts.append(f"Tokens: {tokens:,}")
            print(" | ".join(parts), file=sys.stderr)
