"""Verification of a persisted configuration against a fresh profile."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from .config import OutputConfig
from .models import AnalysisProfile, VerificationResult
from .project_config import CURRENT_SCHEMA_VERSION


def frameworks_consistent(recorded: str, detected: str) -> bool:
    """Case-insensitive containment in either direction ("next" ~ "Next.js")."""
    left, right = recorded.strip().lower(), detected.strip().lower()
    return left in right or right in left


class _Checklist:
    def __init__(self) -> None:
        self.successes: List[str] = []
        self.warnings: List[str] = []
        self.issues: List[str] = []

    def result(self) -> VerificationResult:
        return VerificationResult(
            successes=tuple(self.successes),
            warnings=tuple(self.warnings),
            issues=tuple(self.issues),
        )


class Verifier:
    """Evaluates a fixed checklist; any issue fails verification, warnings never do."""

    def __init__(self, output: OutputConfig | None = None) -> None:
        self.output = output or OutputConfig()

    def verify(self, profile: AnalysisProfile) -> VerificationResult:
        root = Path(profile.root)
        agents_dir = root / self.output.agents_dir
        agents_label = f"{self.output.agents_dir}/"
        checks = _Checklist()

        config = profile.project_config
        if config is None:
            checks.issues.append(
                f"Missing {self.output.project_config} - run `agents-init` first"
            )
        else:
            checks.successes.append(f"{self.output.project_config} exists")
            if config.version != CURRENT_SCHEMA_VERSION:
                checks.warnings.append(
                    f"Config version {config.version} - consider running agents-init to update"
                )

        if not agents_dir.is_dir():
            checks.issues.append(f"Missing {agents_label} folder - run `agents-init` first")
        else:
            checks.successes.append(f"{agents_label} folder exists")
            instructions_label = f"{agents_label}{self.output.instructions_name}"
            if (agents_dir / self.output.instructions_name).is_file():
                checks.successes.append(f"{instructions_label} exists")
            else:
                checks.issues.append(f"Missing {instructions_label}")

        if config is not None:
            for agent in config.agents:
                detected = profile.agent_configs.get(agent)
                if detected is None:
                    checks.warnings.append(
                        f"Agent '{agent}' listed in config but no config file found"
                    )
                else:
                    checks.successes.append(f"{detected.name} config file exists")

        context_label = f"{agents_label}{self.output.context_name}"
        if (agents_dir / self.output.context_name).is_file():
            checks.successes.append(f"{context_label} exists")
        else:
            checks.warnings.append(
                f"Missing {context_label} - run `agentscan analyze` to generate"
            )

        recorded = config.project.framework if config is not None else None
        self._check_framework(checks, recorded, profile.stack.framework)

        return checks.result()

    @staticmethod
    def _check_framework(
        checks: _Checklist, recorded: Optional[str], detected: Optional[str]
    ) -> None:
        if not recorded or not recorded.strip() or not detected:
            return
        if frameworks_consistent(recorded, detected):
            checks.successes.append(f"Framework '{recorded}' matches detected '{detected}'")
        else:
            checks.warnings.append(
                f"Framework mismatch: config says '{recorded}' but detected '{detected}'"
            )


__all__ = ["Verifier", "frameworks_consistent"]
