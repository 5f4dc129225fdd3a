"""Presence checks for well-known project files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Sequence, Tuple


@dataclass(frozen=True)
class KeyFileSpec:
    key: str
    label: str
    candidates: Tuple[str, ...]


DEFAULT_KEY_FILES: Tuple[KeyFileSpec, ...] = (
    KeyFileSpec("readme", "README.md", ("README.md",)),
    KeyFileSpec("contributing", "CONTRIBUTING.md", ("CONTRIBUTING.md",)),
    KeyFileSpec("license", "LICENSE", ("LICENSE",)),
    KeyFileSpec("changelog", "CHANGELOG.md", ("CHANGELOG.md",)),
    KeyFileSpec("env_example", "Environment example", (".env.example", ".env.local.example")),
    KeyFileSpec("docker", "Docker support", ("Dockerfile", "docker-compose.yml")),
    KeyFileSpec("cicd", "GitHub Actions CI/CD", (".github/workflows",)),
    KeyFileSpec("husky", "Git hooks (Husky)", (".husky",)),
    KeyFileSpec("editorconfig", "EditorConfig", (".editorconfig",)),
    KeyFileSpec("nvmrc", ".nvmrc (Node version)", (".nvmrc",)),
)


def _exists(path: Path) -> bool:
    # Unsearchable parents raise PermissionError rather than returning False.
    try:
        return path.exists()
    except OSError:
        return False


class KeyFileDetector:
    """Reports which well-known files or directories exist at the root."""

    def __init__(self, specs: Sequence[KeyFileSpec] = DEFAULT_KEY_FILES) -> None:
        self.specs = tuple(specs)

    def detect(self, root: Path) -> Dict[str, bool]:
        return {
            spec.key: any(_exists(root / candidate) for candidate in spec.candidates)
            for spec in self.specs
        }

    def labels(self) -> Dict[str, str]:
        return {spec.key: spec.label for spec in self.specs}


__all__ = ["DEFAULT_KEY_FILES", "KeyFileDetector", "KeyFileSpec"]
