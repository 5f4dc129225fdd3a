"""Naming convention inference from file names."""

from __future__ import annotations

import re
from collections import Counter
from typing import Iterable, Optional, Sequence, Tuple

from ..config import ConventionConfig
from ..models import ConventionProfile, FileEntry
from ..rules import Rule, first_match

# Tie-break preference follows tuple order.
STYLE_RULES: Tuple[Rule[str, str], ...] = (
    Rule("PascalCase", re.compile(r"^[A-Z][a-zA-Z0-9]*$").match),
    Rule("camelCase", re.compile(r"^[a-z][a-zA-Z0-9]*$").match),
    Rule("kebab-case", re.compile(r"^[a-z][a-z0-9-]*$").match),
)

EXTENSIONS: Tuple[str, str] = (".tsx", ".jsx")
TEST_MARKERS: Tuple[str, str] = (".test.", ".spec.")
INDEX_STEM = "index"


def dominant(counts: Counter, preference: Sequence[str]) -> Optional[str]:
    """Return the most frequent label, earlier entries in ``preference`` winning ties."""
    best: Optional[str] = None
    best_count = 0
    for label in preference:
        count = counts.get(label, 0)
        if count > best_count:
            best, best_count = label, count
    return best


class ConventionAnalyzer:
    """Derives naming conventions from the scanned file set."""

    def __init__(self, config: ConventionConfig | None = None) -> None:
        self.config = config or ConventionConfig()

    def analyze(self, files: Iterable[FileEntry]) -> ConventionProfile:
        styles: Counter = Counter()
        extensions: Counter = Counter()
        markers: Counter = Counter()
        index_count = 0

        for entry in files:
            style = first_match(STYLE_RULES, entry.stem)
            if style is not None:
                styles[style] += 1

            if entry.extension in EXTENSIONS:
                extensions[entry.extension] += 1

            for marker in TEST_MARKERS:
                if marker in entry.name:
                    markers[marker] += 1
                    break

            if entry.stem == INDEX_STEM:
                index_count += 1

        first_ext, second_ext = EXTENSIONS
        first_marker, second_marker = TEST_MARKERS
        return ConventionProfile(
            component_style=dominant(styles, [rule.label for rule in STYLE_RULES]),
            file_extension=(
                second_ext if extensions[second_ext] > extensions[first_ext] else first_ext
            ),
            # Equal counts favour the first marker.
            test_naming=(
                first_marker if markers[first_marker] >= markers[second_marker] else second_marker
            ),
            index_files=index_count > self.config.index_threshold,
            barrel_exports=index_count > self.config.barrel_threshold,
        )


__all__ = ["ConventionAnalyzer", "STYLE_RULES", "dominant"]
