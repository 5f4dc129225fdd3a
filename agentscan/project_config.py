"""Reading the persisted .agents-project.json written by a previous run."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

from .config import OutputConfig, _as_dict, _as_str, _as_str_list
from .logging import get_logger
from .models import PersistedConfig, ProjectIdentity

CURRENT_SCHEMA_VERSION = "1.1.0"

_logger = get_logger("project_config")


def load_project_config(
    root: Path, output: OutputConfig | None = None
) -> Optional[PersistedConfig]:
    """Return the persisted configuration, or None when absent or unreadable."""
    output = output or OutputConfig()
    path = root / output.project_config
    if not path.is_file():
        return None
    try:
        payload = json.loads(path.read_text(encoding="utf-8-sig"))
    except (OSError, ValueError, RecursionError) as exc:
        _logger.warning("Could not parse %s: %s", output.project_config, exc)
        return None
    if not isinstance(payload, dict):
        _logger.warning("%s must contain a JSON object", output.project_config)
        return None
    return parse_project_config(payload)


def parse_project_config(payload: Dict[str, Any]) -> PersistedConfig:
    project = _as_dict(payload.get("project"))
    rules = _as_dict(payload.get("rules"))
    features = {
        str(key): value
        for key, value in _as_dict(payload.get("features")).items()
        if isinstance(value, bool)
    }
    return PersistedConfig(
        version=_as_str(payload.get("version")),
        project=ProjectIdentity(
            name=_as_str(project.get("name")),
            framework=_as_str(project.get("framework")),
            styling=_as_str(project.get("styling")),
            database=_as_str(project.get("database")),
        ),
        agents=tuple(_as_str_list(payload.get("agents"))),
        features=features,
        rules_include=tuple(_as_str_list(rules.get("include"))),
        rules_exclude=tuple(_as_str_list(rules.get("exclude"))),
        overrides=dict(_as_dict(payload.get("overrides"))),
    )


__all__ = ["CURRENT_SCHEMA_VERSION", "load_project_config", "parse_project_config"]
