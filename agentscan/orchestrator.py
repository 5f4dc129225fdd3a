"""Pipeline orchestration for analyze/report/verify flows."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from .config import AgentScanConfig, ConfigError, load_config
from .logging import get_logger
from .models import AnalysisProfile, VerificationResult
from .profile import ProfileBuilder
from .rendering import render_context, render_report
from .verifier import Verifier


@dataclass(frozen=True)
class GeneratedFile:
    """An artifact produced by an analyze run."""

    path: Path
    relative_path: str
    content: str
    action: str


@dataclass(frozen=True)
class AnalyzeOutcome:
    """Result of an analyze run."""

    profile: AnalysisProfile
    files: Tuple[GeneratedFile, ...]
    dry_run: bool


class Orchestrator:
    """Coordinates profile building, rendering and verification."""

    def __init__(
        self,
        builder_factory: Callable[[AgentScanConfig], ProfileBuilder] = ProfileBuilder,
        *,
        today: Callable[[], date] | None = None,
    ) -> None:
        self._builder_factory = builder_factory
        self._today = today
        self.logger = get_logger("orchestrator")

    def profile(self, path: str) -> Tuple[AgentScanConfig, AnalysisProfile]:
        repo_path = Path(path).expanduser().resolve()
        config = self._load_config(repo_path)
        self.logger.info("Scanning project at %s", repo_path)
        profile = self._builder_factory(config).build(str(repo_path))
        return config, profile

    def run_analyze(self, path: str, *, dry_run: bool = False) -> AnalyzeOutcome:
        """Render both artifacts and write them into the agents directory."""
        repo_path = Path(path).expanduser().resolve()
        config = self._load_config(repo_path)
        output = config.output
        if (
            not (repo_path / output.project_config).exists()
            and not (repo_path / output.agents_dir).exists()
        ):
            raise FileNotFoundError(
                f"No agents configuration found in {repo_path}. "
                "Run `agents-init` first to set up agent configuration."
            )

        _, profile = self.profile(str(repo_path))
        agents_dir = repo_path / output.agents_dir
        artifacts: List[Tuple[str, str]] = [
            (output.report_name, render_report(profile, self._generated_on())),
            (output.context_name, render_context(profile)),
        ]

        files: List[GeneratedFile] = []
        for name, content in artifacts:
            target = agents_dir / name
            files.append(
                GeneratedFile(
                    path=target,
                    relative_path=f"{output.agents_dir}/{name}",
                    content=content,
                    action="update" if target.exists() else "create",
                )
            )

        if dry_run:
            self.logger.info("Dry run - no files written")
        else:
            agents_dir.mkdir(parents=True, exist_ok=True)
            for generated in files:
                generated.path.write_text(generated.content, encoding="utf-8")
                verb = "Updated" if generated.action == "update" else "Created"
                self.logger.info("%s %s", verb, generated.relative_path)

        return AnalyzeOutcome(profile=profile, files=tuple(files), dry_run=dry_run)

    def run_report(self, path: str) -> str:
        _, profile = self.profile(path)
        return render_report(profile, self._generated_on())

    def run_verify(self, path: str) -> VerificationResult:
        config, profile = self.profile(path)
        result = Verifier(config.output).verify(profile)
        self.logger.debug(
            "Verification finished: %d passed, %d warnings, %d issues",
            len(result.successes),
            len(result.warnings),
            len(result.issues),
        )
        return result

    def _generated_on(self) -> Optional[date]:
        return self._today() if self._today else None

    def _load_config(self, repo_path: Path) -> AgentScanConfig:
        try:
            return load_config(repo_path)
        except ConfigError as exc:
            self.logger.warning("Ignoring invalid configuration: %s", exc)
            return AgentScanConfig(root=repo_path)


__all__ = ["AnalyzeOutcome", "GeneratedFile", "Orchestrator"]
