"""Assigns repository files to semantic buckets."""

from __future__ import annotations

import re
from typing import Callable, Dict, Iterable, List, Sequence, Tuple

from .models import CATEGORY_LABELS, FileEntry
from .rules import Rule, first_match

FALLBACK_LABEL = "other"

_SCRIPT_EXTENSIONS = {".ts", ".tsx", ".js", ".jsx"}
_STYLE_EXTENSIONS = {".css", ".scss", ".less", ".sass"}
_HOOK_NAME = re.compile(r"^use(?![a-z])")

PathRule = Rule[str, str]


def _split(relative_path: str) -> Tuple[List[str], str]:
    parts = relative_path.replace("\\", "/").split("/")
    return parts[:-1], parts[-1]


def _extension(name: str) -> str:
    index = name.rfind(".")
    return name[index:].lower() if index > 0 else ""


def in_directory(*names: str) -> Callable[[str], bool]:
    """Predicate for paths with any of ``names`` as a directory segment."""
    wanted = set(names)

    def _predicate(relative_path: str) -> bool:
        directories, _ = _split(relative_path)
        return any(segment in wanted for segment in directories)

    return _predicate


def _is_test(relative_path: str) -> bool:
    directories, name = _split(relative_path)
    return ".test." in name or ".spec." in name or "__tests__" in directories


def _is_page(relative_path: str) -> bool:
    directories, name = _split(relative_path)
    if "pages" in directories:
        return True
    return _extension(name) in _SCRIPT_EXTENSIONS and (
        "app" in directories or "routes" in directories
    )


def _is_hook(relative_path: str) -> bool:
    directories, name = _split(relative_path)
    return "hooks" in directories or bool(_HOOK_NAME.match(name))


def _is_style(relative_path: str) -> bool:
    _, name = _split(relative_path)
    return _extension(name) in _STYLE_EXTENSIONS


def _is_config(relative_path: str) -> bool:
    _, name = _split(relative_path)
    return "config" in name or name == "tsconfig.json" or name.startswith(".env")


# Order is significant: the first matching rule decides the bucket.
# Tests come first, so `src/hooks/useAuth.spec.ts` is a test rather than a
# hook, and a test file never counts toward a directory bucket.
DEFAULT_RULES: Tuple[PathRule, ...] = (
    Rule("tests", _is_test),
    Rule("components", in_directory("components", "Components")),
    Rule("pages", _is_page),
    Rule("api", in_directory("api", "server", "functions")),
    Rule("hooks", _is_hook),
    Rule("utils", in_directory("utils", "lib", "helpers")),
    Rule("styles", _is_style),
    Rule("config", _is_config),
)


class FileCategorizer:
    """Maps each relative path to exactly one category label."""

    def __init__(self, rules: Sequence[PathRule] = DEFAULT_RULES) -> None:
        unknown = {rule.label for rule in rules} - set(CATEGORY_LABELS)
        if unknown:
            raise ValueError(f"Unknown category labels: {', '.join(sorted(unknown))}")
        self.rules = tuple(rules)

    def categorize(self, relative_path: str) -> str:
        return first_match(self.rules, relative_path, default=FALLBACK_LABEL) or FALLBACK_LABEL

    def group(self, files: Iterable[FileEntry]) -> Dict[str, Tuple[str, ...]]:
        """Return every label mapped to its paths in scan order."""
        buckets: Dict[str, List[str]] = {label: [] for label in CATEGORY_LABELS}
        for entry in files:
            buckets[self.categorize(entry.relative_path)].append(entry.relative_path)
        return {label: tuple(paths) for label, paths in buckets.items()}


__all__ = ["DEFAULT_RULES", "FALLBACK_LABEL", "FileCategorizer", "in_directory"]
