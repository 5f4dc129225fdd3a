"""Repository tree walking."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional, Set, Tuple

from .config import ScanConfig
from .logging import get_logger
from .models import FileEntry, ScanResult

_logger = get_logger("scanner")

_HIDDEN_PREFIX = "."


@dataclass
class _Frame:
    """A directory whose sorted entries are being consumed."""

    path: Path
    depth: int
    entries: Iterator[os.DirEntry] = field(default_factory=lambda: iter(()))


def _directory_identity(path: Path) -> Optional[Tuple[int, int]]:
    try:
        stat_result = path.stat()
    except OSError:
        return None
    return (stat_result.st_dev, stat_result.st_ino)


def _list_sorted(path: Path) -> Optional[List[os.DirEntry]]:
    try:
        with os.scandir(path) as iterator:
            return sorted(iterator, key=lambda entry: entry.name)
    except OSError as exc:
        _logger.debug("Skipping unreadable directory %s: %s", path, exc)
        return None


class RepoScanner:
    """Walks the repository and records every reachable file and directory.

    Traversal is an explicit depth-first stack of directory frames. Each frame
    yields its entries in name order, so the resulting file order is stable
    across runs on an unchanged tree.
    """

    def __init__(self, config: ScanConfig | None = None) -> None:
        self.config = config or ScanConfig()

    def scan(self, root: str) -> ScanResult:
        """Return the files and directories under ``root``."""
        root_path = Path(root).expanduser().resolve()
        if not root_path.exists():
            raise FileNotFoundError(f"Repository path not found: {root}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Repository path is not a directory: {root}")

        files: List[FileEntry] = []
        directories: List[str] = []
        visited: Set[Tuple[int, int]] = set()

        root_identity = _directory_identity(root_path)
        if root_identity is not None:
            visited.add(root_identity)

        stack: List[_Frame] = []
        self._push(stack, root_path, 0)

        while stack:
            frame = stack[-1]
            entry = next(frame.entries, None)
            if entry is None:
                stack.pop()
                continue

            entry_path = Path(entry.path)
            depth = frame.depth + 1
            if depth > self.config.max_depth:
                continue

            if self._is_directory(entry):
                if not self._may_enter(entry.name, frame.depth):
                    continue
                identity = _directory_identity(entry_path)
                if identity is not None:
                    if identity in visited:
                        _logger.debug("Skipping already visited directory %s", entry_path)
                        continue
                    visited.add(identity)
                directories.append(entry_path.relative_to(root_path).as_posix())
                if depth < self.config.max_depth:
                    self._push(stack, entry_path, depth)
                continue

            files.append(FileEntry.from_path(entry_path, root_path))

        _logger.debug(
            "Scanned %d files in %d directories under %s",
            len(files),
            len(directories),
            root_path,
        )
        return ScanResult(root=str(root_path), files=tuple(files), directories=tuple(directories))

    def _push(self, stack: List[_Frame], path: Path, depth: int) -> None:
        entries = _list_sorted(path)
        if entries is None:
            return
        stack.append(_Frame(path=path, depth=depth, entries=iter(entries)))

    def _is_directory(self, entry: os.DirEntry) -> bool:
        try:
            if entry.is_symlink() and not self.config.follow_symlinks:
                return False
            return entry.is_dir(follow_symlinks=self.config.follow_symlinks)
        except OSError:
            return False

    def _may_enter(self, name: str, parent_depth: int) -> bool:
        if name in self.config.ignore_dirs:
            return False
        if name.startswith(_HIDDEN_PREFIX):
            return parent_depth == 0 and name in self.config.include_dirs
        return True


__all__ = ["RepoScanner"]
