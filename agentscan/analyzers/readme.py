"""README title and description extraction."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

from ..models import ReadmeSummary

_TITLE = re.compile(r"^#\s+(.+)$", re.MULTILINE)
_DESCRIPTION = re.compile(r"^#.+\n\n([^\n#]+)", re.MULTILINE)


def summarize_readme(root: Path, filename: str = "README.md") -> Optional[ReadmeSummary]:
    path = root / filename
    if not path.is_file():
        return None
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None

    title = _TITLE.search(content)
    description = _DESCRIPTION.search(content)
    return ReadmeSummary(
        title=title.group(1).strip() if title else None,
        description=description.group(1).strip() if description else None,
        length=len(content),
    )


__all__ = ["summarize_readme"]
