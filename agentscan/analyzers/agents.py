"""Known AI assistant adapters and detection of their instruction files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping

from ..models import AgentConfigFile


@dataclass(frozen=True)
class AgentSpec:
    name: str
    file: str


KNOWN_AGENTS: Mapping[str, AgentSpec] = {
    "copilot": AgentSpec("GitHub Copilot", ".github/copilot-instructions.md"),
    "claude": AgentSpec("Claude (Anthropic)", "CLAUDE.md"),
    "cursor": AgentSpec("Cursor", ".cursorrules"),
    "gemini": AgentSpec("Gemini (Google)", ".gemini/config.md"),
    "codex": AgentSpec("Codex (OpenAI)", ".codex/AGENTS.md"),
    "windsurf": AgentSpec("Windsurf/Codeium", ".windsurfrules"),
}


def detect_agent_configs(
    root: Path, agents: Mapping[str, AgentSpec] = KNOWN_AGENTS
) -> Dict[str, AgentConfigFile]:
    """Return the adapter files present under ``root`` keyed by agent."""
    found: Dict[str, AgentConfigFile] = {}
    for key, spec in agents.items():
        path = root / spec.file
        try:
            if not path.is_file():
                continue
            size = path.stat().st_size
        except OSError:
            continue
        found[key] = AgentConfigFile(key=key, name=spec.name, path=spec.file, size=size)
    return found


__all__ = ["AgentSpec", "KNOWN_AGENTS", "detect_agent_configs"]
