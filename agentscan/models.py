"""Core data models shared across agentscan components."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

CATEGORY_LABELS: Tuple[str, ...] = (
    "components",
    "pages",
    "api",
    "hooks",
    "utils",
    "tests",
    "styles",
    "config",
    "other",
)

KEY_FILE_KEYS: Tuple[str, ...] = (
    "readme",
    "contributing",
    "license",
    "changelog",
    "env_example",
    "docker",
    "cicd",
    "husky",
    "editorconfig",
    "nvmrc",
)


@dataclass(frozen=True)
class FileEntry:
    """A single file discovered by the scanner."""

    path: str
    relative_path: str
    name: str
    stem: str
    extension: str

    @classmethod
    def from_path(cls, path: Path, root: Path) -> "FileEntry":
        suffix = path.suffix
        return cls(
            path=str(path),
            relative_path=path.relative_to(root).as_posix(),
            name=path.name,
            stem=path.name[: -len(suffix)] if suffix else path.name,
            extension=suffix,
        )


@dataclass(frozen=True)
class ScanResult:
    """Files and directories reachable from the scan root."""

    root: str
    files: Tuple[FileEntry, ...] = ()
    directories: Tuple[str, ...] = ()

    @property
    def total_files(self) -> int:
        return len(self.files)

    @property
    def total_dirs(self) -> int:
        return len(self.directories)


@dataclass(frozen=True)
class ConventionProfile:
    """Naming conventions inferred from file names."""

    component_style: Optional[str] = None
    file_extension: Optional[str] = None
    test_naming: Optional[str] = None
    index_files: bool = False
    barrel_exports: bool = False


@dataclass(frozen=True)
class StackProfile:
    """Technology choices derived from package.json."""

    name: Optional[str] = None
    version: Optional[str] = None
    module_type: Optional[str] = None
    framework: Optional[str] = None
    styling: Optional[str] = None
    database: Optional[str] = None
    testing: Optional[str] = None
    linting: Optional[str] = None
    build_tool: Optional[str] = None
    package_manager: Optional[str] = None
    features: Tuple[str, ...] = ()
    scripts: Mapping[str, str] = field(default_factory=dict)
    key_dependencies: Tuple[str, ...] = ()


@dataclass(frozen=True)
class TypeScriptConfig:
    """Subset of tsconfig.json compilerOptions."""

    strict: bool = False
    base_url: Optional[str] = None
    paths: Dict[str, Tuple[str, ...]] = field(default_factory=dict)
    target: Optional[str] = None
    jsx: Optional[str] = None


@dataclass(frozen=True)
class ReadmeSummary:
    title: Optional[str]
    description: Optional[str]
    length: int


@dataclass(frozen=True)
class AgentConfigFile:
    """An AI assistant adapter file present in the repository."""

    key: str
    name: str
    path: str
    size: int


@dataclass(frozen=True)
class ProjectIdentity:
    name: Optional[str] = None
    framework: Optional[str] = None
    styling: Optional[str] = None
    database: Optional[str] = None


@dataclass(frozen=True)
class PersistedConfig:
    """Choices recorded by a previous run in .agents-project.json."""

    version: Optional[str] = None
    project: ProjectIdentity = field(default_factory=ProjectIdentity)
    agents: Tuple[str, ...] = ()
    features: Dict[str, bool] = field(default_factory=dict)
    rules_include: Tuple[str, ...] = ()
    rules_exclude: Tuple[str, ...] = ()
    overrides: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class AnalysisProfile:
    """Everything known about a repository after one analysis run."""

    root: str
    scan: ScanResult
    categories: Mapping[str, Tuple[str, ...]]
    conventions: ConventionProfile
    stack: StackProfile
    typescript: Optional[TypeScriptConfig]
    key_files: Mapping[str, bool]
    readme: Optional[ReadmeSummary] = None
    agent_configs: Mapping[str, AgentConfigFile] = field(default_factory=dict)
    project_config: Optional[PersistedConfig] = None

    @property
    def project_name(self) -> str:
        return self.stack.name or Path(self.root).name


@dataclass(frozen=True)
class VerificationResult:
    """Outcome of checking a persisted configuration against the repo."""

    successes: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()
    issues: Tuple[str, ...] = ()

    @property
    def passed(self) -> bool:
        return not self.issues
