"""Tests for agentscan.repo_scanner."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from agentscan import repo_scanner
from agentscan.config import ScanConfig
from agentscan.repo_scanner import RepoScanner
from tests._fixtures.repo_builder import RepoBuilder


def test_scan_lists_files_and_directories(repo_builder: RepoBuilder) -> None:
    repo_builder.touch(
        "package.json",
        "src/components/Button.tsx",
        "src/hooks/useAuth.ts",
        "docs/guide.md",
    )

    result = repo_builder.scan()

    paths = [entry.relative_path for entry in result.files]
    assert sorted(paths) == [
        "docs/guide.md",
        "package.json",
        "src/components/Button.tsx",
        "src/hooks/useAuth.ts",
    ]
    assert set(result.directories) == {"docs", "src", "src/components", "src/hooks"}
    assert result.total_files == 4
    assert result.total_dirs == 4
    assert result.root == str(repo_builder.path().resolve())


def test_file_entry_fields(repo_builder: RepoBuilder) -> None:
    repo_builder.touch("src/components/Button.test.tsx")

    entry = repo_builder.scan().files[0]

    assert entry.name == "Button.test.tsx"
    assert entry.stem == "Button.test"
    assert entry.extension == ".tsx"
    assert entry.relative_path == "src/components/Button.test.tsx"
    assert Path(entry.path).is_absolute()


def test_scan_skips_ignored_and_hidden_directories(repo_builder: RepoBuilder) -> None:
    repo_builder.touch(
        "src/index.ts",
        "node_modules/react/index.js",
        "dist/bundle.js",
        ".next/cache.json",
        ".github/workflows/ci.yml",
        ".env.local",
    )

    result = repo_builder.scan()
    paths = {entry.relative_path for entry in result.files}

    assert paths == {"src/index.ts", ".env.local"}
    assert "node_modules" not in result.directories
    assert ".github" not in result.directories


def test_scan_enters_requested_root_config_directories(repo_builder: RepoBuilder) -> None:
    repo_builder.touch(".github/workflows/ci.yml", "packages/app/.github/notes.md")

    scanner = RepoScanner(ScanConfig(include_dirs=(".github",)))
    result = scanner.scan(str(repo_builder.path()))
    paths = {entry.relative_path for entry in result.files}

    assert ".github/workflows/ci.yml" in paths
    assert "packages/app/.github/notes.md" not in paths


def test_scan_depth_limit_is_inclusive(repo_builder: RepoBuilder) -> None:
    repo_builder.touch("a.ts", "one/b.ts", "one/two/c.ts", "one/two/three/d.ts")

    result = RepoScanner(ScanConfig(max_depth=2)).scan(str(repo_builder.path()))

    assert {entry.relative_path for entry in result.files} == {"a.ts", "one/b.ts"}
    assert set(result.directories) == {"one", "one/two"}


def test_scan_with_zero_depth_records_nothing(repo_builder: RepoBuilder) -> None:
    repo_builder.touch("a.ts")

    result = RepoScanner(ScanConfig(max_depth=0)).scan(str(repo_builder.path()))

    assert result.total_files == 0
    assert result.total_dirs == 0


def test_scan_is_deterministic(repo_builder: RepoBuilder) -> None:
    repo_builder.touch("src/b.ts", "src/a.ts", "lib/z.ts", "README.md")

    first = repo_builder.scan()
    second = repo_builder.scan()

    assert first.total_files == second.total_files
    assert first.total_dirs == second.total_dirs
    assert [e.relative_path for e in first.files] == [e.relative_path for e in second.files]


def test_scan_visits_entries_in_name_order(repo_builder: RepoBuilder) -> None:
    repo_builder.touch("b/two.ts", "a/one.ts", "c.ts")

    paths = [entry.relative_path for entry in repo_builder.scan().files]

    assert paths == ["a/one.ts", "b/two.ts", "c.ts"]


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
def test_scan_survives_symlink_cycles(repo_builder: RepoBuilder) -> None:
    repo_builder.touch("src/app.ts")
    root = repo_builder.path()
    try:
        os.symlink(root / "src", root / "src" / "loop", target_is_directory=True)
    except OSError:  # pragma: no cover - platform without symlink privileges
        pytest.skip("cannot create symlinks")

    result = repo_builder.scan()

    assert [entry.relative_path for entry in result.files] == ["src/app.ts"]


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
def test_scan_does_not_visit_a_directory_twice(repo_builder: RepoBuilder) -> None:
    repo_builder.touch("shared/util.ts")
    root = repo_builder.path()
    try:
        os.symlink(root / "shared", root / "alias", target_is_directory=True)
    except OSError:  # pragma: no cover
        pytest.skip("cannot create symlinks")

    result = repo_builder.scan()

    assert [entry.relative_path for entry in result.files] == ["alias/util.ts"]


def test_scan_skips_unreadable_directories(repo_builder: RepoBuilder, monkeypatch) -> None:
    repo_builder.touch("src/app.ts", "secret/keys.ts")
    real_scandir = repo_scanner.os.scandir

    def _scandir(path):
        if Path(path).name == "secret":
            raise PermissionError("denied")
        return real_scandir(path)

    monkeypatch.setattr(repo_scanner.os, "scandir", _scandir)

    result = repo_builder.scan()

    assert [entry.relative_path for entry in result.files] == ["src/app.ts"]
    assert "secret" in result.directories


def test_scan_rejects_missing_directory(tmp_path: Path) -> None:
    missing = tmp_path / "missing"
    with pytest.raises(FileNotFoundError) as excinfo:
        RepoScanner().scan(str(missing))
    assert str(missing) in str(excinfo.value)


def test_scan_rejects_file_root(tmp_path: Path) -> None:
    target = tmp_path / "file.txt"
    target.write_text("x", encoding="utf-8")
    with pytest.raises(NotADirectoryError):
        RepoScanner().scan(str(target))
