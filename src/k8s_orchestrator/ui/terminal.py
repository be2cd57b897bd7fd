"""Rich-powered terminal output."""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from k8s_orchestrator.types.messages import (
    ErrorMessage,
    Message,
    Result,
    TextMessage,
    ToolResult,
    ToolUse,
)

# ── Palette ──────────────────────────────────────────────────────────────────

DELEGATE_ICON = "\u25c6"  # ◆  diamond: sub-agent delegation
RETURN_ICON = "\u25b8"    # ▸  triangle: delegation result

STYLE_AUTHOR = "bold #60a5fa"         # blue
STYLE_TOOL_NAME = "bold #a78bfa"      # violet: primary accent
STYLE_TOOL_DETAIL = "#7c7c8a"         # muted grey
STYLE_ERROR_LABEL = "bold #f87171"    # red
STYLE_ERROR_BODY = "#f87171"
STYLE_RESULT_DIM = "dim #7c7c8a"
STYLE_RESULT_LABEL = "bold #94a3b8"   # slate
STYLE_RESULT_VALUE = "#e2e8f0"        # light


class RichPrinter:
    """Rich-based message printer for terminal output.

    Agent text goes to stdout as Markdown; delegations, errors and the
    per-prompt summary go to stderr.
    """

    def __init__(
        self,
        console: Console | None = None,
        stdout: Console | None = None,
    ) -> None:
        self._console = console or Console(stderr=True)
        self._stdout = stdout or Console()
        self._partial_buffer = ""

    def print_message(self, msg: Message) -> None:
        """Print a message with Rich formatting."""
        match msg:
            case TextMessage(text=t, is_partial=True):
                self._partial_buffer += t
                self._stdout.print(t, end="", highlight=False)

            case TextMessage(author=author, text=t, is_partial=False):
                if self._partial_buffer:
                    self._stdout.print()  # Newline after streaming
                    self._partial_buffer = ""
                    return
                if author:
                    self._stdout.print(Text(author, style=STYLE_AUTHOR))
                self._stdout.print(Markdown(t))

            case ToolUse(name=name, args=args):
                self._print_tool_use(name, args)

            case ToolResult(name=name, content=content, is_error=is_error):
                self._print_tool_result(name, content, is_error)

            case ErrorMessage(code=code, message=message):
                label = Text(f"  ✗ {code} ", style=STYLE_ERROR_LABEL)
                label.append(message, style=STYLE_ERROR_BODY)
                self._console.print(label)

            case Result() as r:
                self._print_result(r)

    # ── Delegation ───────────────────────────────────────────────────────────

    def _print_tool_use(self, name: str, args: dict[str, Any]) -> None:
        line = Text()
        line.append(f"  {DELEGATE_ICON} ", style=STYLE_TOOL_NAME)
        line.append(name, style=STYLE_TOOL_NAME)

        request = args.get("request", "")
        if isinstance(request, str) and request:
            snippet = request[:80] + ("…" if len(request) > 80 else "")
            line.append("  ", style="default")
            line.append(snippet, style=STYLE_TOOL_DETAIL)

        self._console.print(line)

    def _print_tool_result(self, name: str, content: str, is_error: bool) -> None:
        """Print a delegation result. Errors are prominent, success is quiet."""
        if is_error:
            label = Text(f"    ✗ {name}: ", style=STYLE_ERROR_LABEL)
            label.append(content[:300], style=STYLE_ERROR_BODY)
            self._console.print(label)
        else:
            size = f"{len(content):,} chars"
            self._console.print(
                Text(f"    {RETURN_ICON} {name} returned {size}", style=STYLE_RESULT_DIM),
            )

    # ── Final Result ─────────────────────────────────────────────────────────

    def _print_result(self, result: Result) -> None:
        """Print the per-prompt summary as a compact, styled table."""
        self._console.print()

        tbl = Table(
            show_header=False,
            show_edge=False,
            show_lines=False,
            padding=(0, 1),
            expand=False,
        )
        tbl.add_column(style=STYLE_RESULT_LABEL, justify="right", no_wrap=True)
        tbl.add_column(style=STYLE_RESULT_VALUE, no_wrap=True)

        tbl.add_row("Session", str(result.session_id))
        tbl.add_row("Delegations", str(result.tool_calls))
        if result.total_tokens:
            tbl.add_row("Tokens", f"{result.total_tokens:,}")

        self._console.print(Panel(
            tbl,
            border_style="#3f3f50",
            expand=False,
            padding=(0, 1),
        ))


def print_agents_table(
    root: Any,
    sub_agents: list[Any],
    console: Console | None = None,
) -> None:
    """Render the root agent and its delegated sub-agents."""
    console = console or Console()
    tbl = Table(title=f"{root.name}", title_style=STYLE_TOOL_NAME)
    tbl.add_column("Sub-agent", style=STYLE_TOOL_NAME, no_wrap=True)
    tbl.add_column("Description", style=STYLE_RESULT_VALUE)
    for agent in sub_agents:
        tbl.add_row(agent.name, agent.description)
    console.print(tbl)
    console.print(Text(f"{len(sub_agents)} sub-agent(s)", style=STYLE_RESULT_DIM))
