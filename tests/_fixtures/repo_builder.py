"""Helper utilities for constructing temporary projects in tests."""

from __future__ import annotations

import json
import textwrap
from pathlib import Path
from typing import Any, Mapping

from agentscan.models import AnalysisProfile, ScanResult
from agentscan.profile import build_profile
from agentscan.repo_scanner import RepoScanner


class RepoBuilder:
    """Writes files into a throwaway project and analyzes it."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "repo"
        self.root.mkdir()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the project."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def write_json(self, relative: str, payload: Any) -> None:
        self.write({relative: json.dumps(payload, indent=2)})

    def touch(self, *paths: str) -> None:
        self.write({path: "" for path in paths})

    def scan(self) -> ScanResult:
        return RepoScanner().scan(str(self.root))

    def profile(self) -> AnalysisProfile:
        return build_profile(str(self.root))

    def path(self) -> Path:
        return self.root


__all__ = ["RepoBuilder"]
