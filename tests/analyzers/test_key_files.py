"""Tests for agentscan.analyzers.key_files."""

from __future__ import annotations

import os
from pathlib import Path

from agentscan.analyzers.key_files import DEFAULT_KEY_FILES, KeyFileDetector, KeyFileSpec
from agentscan.models import KEY_FILE_KEYS
from tests._fixtures.repo_builder import RepoBuilder


def test_readme_only(repo_builder: RepoBuilder) -> None:
    repo_builder.write({"README.md": "# Demo\n"})

    found = KeyFileDetector().detect(repo_builder.path())

    assert tuple(found) == KEY_FILE_KEYS
    assert found["readme"] is True
    assert not any(value for key, value in found.items() if key != "readme")


def test_alternate_candidates_and_directories(repo_builder: RepoBuilder) -> None:
    repo_builder.touch(
        ".env.local.example",
        "docker-compose.yml",
        ".github/workflows/ci.yml",
        ".husky/pre-commit",
        ".nvmrc",
    )

    found = KeyFileDetector().detect(repo_builder.path())

    assert found["env_example"] is True
    assert found["docker"] is True
    assert found["cicd"] is True
    assert found["husky"] is True
    assert found["nvmrc"] is True
    assert found["editorconfig"] is False
    assert found["license"] is False


def test_custom_specs(repo_builder: RepoBuilder) -> None:
    repo_builder.touch("SECURITY.md")
    detector = KeyFileDetector((KeyFileSpec("security", "Security policy", ("SECURITY.md",)),))

    assert detector.detect(repo_builder.path()) == {"security": True}
    assert detector.labels() == {"security": "Security policy"}


def test_default_labels_cover_every_key() -> None:
    labels = KeyFileDetector().labels()

    assert tuple(labels) == tuple(spec.key for spec in DEFAULT_KEY_FILES)
    assert labels["cicd"] == "GitHub Actions CI/CD"


def test_unsearchable_directory_counts_as_missing(repo_builder: RepoBuilder, monkeypatch) -> None:
    repo_builder.touch("README.md", ".github/workflows/ci.yml")
    real_stat = os.stat

    def _stat(path, *args, **kwargs):
        if Path(path).name == "workflows":
            raise PermissionError(13, "Permission denied", str(path))
        return real_stat(path, *args, **kwargs)

    monkeypatch.setattr(os, "stat", _stat)

    found = KeyFileDetector().detect(repo_builder.path())

    assert found["cicd"] is False
    assert found["readme"] is True
