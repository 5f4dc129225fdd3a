"""Configuration loading for agentscan (.agentscan.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

import yaml

CONFIG_FILENAME = ".agentscan.yml"

DEFAULT_IGNORE_DIRS: Tuple[str, ...] = (
    "node_modules",
    ".git",
    ".next",
    ".nuxt",
    "dist",
    "build",
    "out",
    ".cache",
    "coverage",
    ".turbo",
    ".vercel",
)


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass(frozen=True)
class ScanConfig:
    """Tree walker limits and exclusions."""

    max_depth: int = 10
    ignore_dirs: Tuple[str, ...] = DEFAULT_IGNORE_DIRS
    include_dirs: Tuple[str, ...] = ()
    follow_symlinks: bool = True


@dataclass(frozen=True)
class ConventionConfig:
    """Thresholds for index-file and barrel-export detection."""

    index_threshold: int = 5
    barrel_threshold: int = 10


@dataclass(frozen=True)
class OutputConfig:
    """Locations of generated and persisted artifacts, relative to the root."""

    agents_dir: str = ".agents"
    project_config: str = ".agents-project.json"
    report_name: str = "ANALYSIS.md"
    context_name: str = "PROJECT-CONTEXT.md"
    instructions_name: str = "AGENTS.md"


@dataclass
class AgentScanConfig:
    """Represents the settings defined in .agentscan.yml."""

    root: Path
    scan: ScanConfig = field(default_factory=ScanConfig)
    conventions: ConventionConfig = field(default_factory=ConventionConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def load_config(config_path: Path) -> AgentScanConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return AgentScanConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    scan = ScanConfig()
    scan_data = _as_dict(data.get("scan"))
    if scan_data:
        max_depth = _as_int(scan_data.get("max_depth"))
        follow = _as_bool(scan_data.get("follow_symlinks"))
        extra_ignores = _as_str_list(scan_data.get("ignore_dirs"))
        scan = ScanConfig(
            max_depth=max_depth if max_depth is not None and max_depth >= 0 else scan.max_depth,
            ignore_dirs=_merge(scan.ignore_dirs, extra_ignores),
            include_dirs=tuple(_as_str_list(scan_data.get("include_dirs"))),
            follow_symlinks=scan.follow_symlinks if follow is None else follow,
        )

    conventions = ConventionConfig()
    convention_data = _as_dict(data.get("conventions"))
    if convention_data:
        index_threshold = _as_int(convention_data.get("index_threshold"))
        barrel_threshold = _as_int(convention_data.get("barrel_threshold"))
        conventions = ConventionConfig(
            index_threshold=(
                index_threshold if index_threshold is not None else conventions.index_threshold
            ),
            barrel_threshold=(
                barrel_threshold if barrel_threshold is not None else conventions.barrel_threshold
            ),
        )

    output = OutputConfig()
    output_data = _as_dict(data.get("output"))
    if output_data:
        agents_dir = _as_str(output_data.get("dir"))
        if agents_dir:
            output = OutputConfig(agents_dir=agents_dir.strip("/"))

    return AgentScanConfig(root=root, scan=scan, conventions=conventions, output=output)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _merge(base: Sequence[str], extra: Sequence[str]) -> Tuple[str, ...]:
    merged = list(base)
    for name in extra:
        if name not in merged:
            merged.append(name)
    return tuple(merged)


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []
