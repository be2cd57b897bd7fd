"""Sub-agent template discovery."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol, runtime_checkable

from k8s_orchestrator.core.config import TEMPLATE_SUFFIX
from k8s_orchestrator.types.agents import SubAgentSpec, TemplateEntry

logger = logging.getLogger(__name__)


@runtime_checkable
class TemplateSource(Protocol):
    """Where sub-agent templates come from: a listing plus file contents."""

    def list_entries(self) -> Iterable[TemplateEntry]: ...

    def read_text(self, name: str) -> str: ...


class DirectoryTemplateSource:
    """Templates stored as files directly inside *directory* (non-recursive)."""

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def list_entries(self) -> list[TemplateEntry]:
        with os.scandir(self._directory) as it:
            return [TemplateEntry(name=e.name, is_dir=e.is_dir()) for e in it]

    def read_text(self, name: str) -> str:
        return (self._directory / name).read_text(encoding="utf-8")


def discover_sub_agents(
    source: TemplateSource,
    suffix: str = TEMPLATE_SUFFIX,
) -> list[SubAgentSpec]:
    """Build one :class:`SubAgentSpec` per template in *source*.

    Directories and entries not ending in *suffix* are skipped. The file
    name minus *suffix* is the agent name and the file content is its
    instruction. Results are sorted by file name.

    Any listing or read error propagates; a partial list is never returned.
    """
    entries = sorted(source.list_entries(), key=lambda e: e.name)

    specs: list[SubAgentSpec] = []
    for entry in entries:
        if entry.is_dir or not entry.name.endswith(suffix):
            continue
        content = source.read_text(entry.name)
        name = entry.name.removesuffix(suffix)
        logger.info("Loading sub-agent: %s", name)
        specs.append(SubAgentSpec(name=name, instruction=content))

    return specs
