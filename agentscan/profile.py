"""Assembly of the AnalysisProfile from individual analyzer results."""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .analyzers import (
    ConventionAnalyzer,
    KeyFileDetector,
    ManifestInspector,
    detect_agent_configs,
    summarize_readme,
)
from .categorizer import FileCategorizer
from .config import AgentScanConfig
from .logging import get_logger
from .models import (
    AgentConfigFile,
    AnalysisProfile,
    ConventionProfile,
    PersistedConfig,
    ReadmeSummary,
    ScanResult,
    StackProfile,
    TypeScriptConfig,
)
from .project_config import load_project_config
from .repo_scanner import RepoScanner

_logger = get_logger("profile")


class ProfileAssembler:
    """Combines already computed analysis parts; performs no I/O."""

    def assemble(
        self,
        scan: ScanResult,
        categories: Mapping[str, Tuple[str, ...]],
        conventions: ConventionProfile,
        stack: StackProfile,
        key_files: Mapping[str, bool],
        *,
        typescript: Optional[TypeScriptConfig] = None,
        readme: Optional[ReadmeSummary] = None,
        agent_configs: Optional[Mapping[str, AgentConfigFile]] = None,
        project_config: Optional[PersistedConfig] = None,
    ) -> AnalysisProfile:
        return AnalysisProfile(
            root=scan.root,
            scan=scan,
            categories=MappingProxyType(dict(categories)),
            conventions=conventions,
            stack=stack,
            typescript=typescript,
            key_files=MappingProxyType(dict(key_files)),
            readme=readme,
            agent_configs=MappingProxyType(dict(agent_configs or {})),
            project_config=project_config,
        )


class ProfileBuilder:
    """Runs every analyzer over a repository in dependency order."""

    def __init__(
        self,
        config: AgentScanConfig | None = None,
        *,
        scanner: RepoScanner | None = None,
        categorizer: FileCategorizer | None = None,
        conventions: ConventionAnalyzer | None = None,
        inspector: ManifestInspector | None = None,
        key_files: KeyFileDetector | None = None,
        assembler: ProfileAssembler | None = None,
    ) -> None:
        self.config = config
        scan_config = config.scan if config else None
        convention_config = config.conventions if config else None
        self.scanner = scanner or RepoScanner(scan_config)
        self.categorizer = categorizer or FileCategorizer()
        self.conventions = conventions or ConventionAnalyzer(convention_config)
        self.inspector = inspector or ManifestInspector()
        self.key_files = key_files or KeyFileDetector()
        self.assembler = assembler or ProfileAssembler()

    def build(self, root: str) -> AnalysisProfile:
        scan = self.scanner.scan(root)
        root_path = Path(scan.root)
        _logger.info("Scanned %d files in %d directories", scan.total_files, scan.total_dirs)

        categories = self.categorizer.group(scan.files)
        conventions = self.conventions.analyze(scan.files)
        stack = self.inspector.inspect(root_path)
        if stack.framework:
            _logger.info("Framework: %s", stack.framework)
        if stack.styling:
            _logger.info("Styling: %s", stack.styling)
        if stack.database:
            _logger.info("Database: %s", stack.database)
        if stack.features:
            _logger.info("Features: %s", ", ".join(stack.features))

        output = self.config.output if self.config else None
        return self.assembler.assemble(
            scan,
            categories,
            conventions,
            stack,
            self.key_files.detect(root_path),
            typescript=self.inspector.inspect_typescript(root_path),
            readme=summarize_readme(root_path),
            agent_configs=detect_agent_configs(root_path),
            project_config=load_project_config(root_path, output),
        )


def build_profile(root: str, config: AgentScanConfig | None = None) -> AnalysisProfile:
    """Scan ``root`` and return its AnalysisProfile."""
    return ProfileBuilder(config).build(root)


__all__ = ["ProfileAssembler", "ProfileBuilder", "build_profile"]
