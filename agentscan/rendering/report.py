"""Full human-readable analysis report (.agents/ANALYSIS.md)."""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import Callable, List, Optional, Tuple

from ..analyzers.key_files import DEFAULT_KEY_FILES
from ..models import CATEGORY_LABELS, AnalysisProfile

Recommendation = Callable[[AnalysisProfile], Optional[str]]

NO_RECOMMENDATIONS = "- No specific recommendations at this time."


def _framework(profile: AnalysisProfile) -> Optional[str]:
    if profile.stack.framework:
        return f"- Framework-specific patterns for {profile.stack.framework}"
    return None


def _styling(profile: AnalysisProfile) -> Optional[str]:
    if profile.stack.styling:
        return f"- {profile.stack.styling} component patterns and class naming"
    return None


def _aliases(profile: AnalysisProfile) -> Optional[str]:
    if profile.typescript and profile.typescript.paths:
        return "- Import alias patterns (e.g., `@/components/...`)"
    return None


def _naming(profile: AnalysisProfile) -> Optional[str]:
    if profile.conventions.component_style:
        return f"- {profile.conventions.component_style} naming convention for components"
    return None


def _api(profile: AnalysisProfile) -> Optional[str]:
    if profile.categories.get("api"):
        return "- API route patterns and data fetching conventions"
    return None


def _testing(profile: AnalysisProfile) -> Optional[str]:
    if profile.stack.testing:
        return f"- Testing patterns using {profile.stack.testing}"
    return None


RECOMMENDATIONS: Tuple[Recommendation, ...] = (
    _framework,
    _styling,
    _aliases,
    _naming,
    _api,
    _testing,
)


def recommendations(profile: AnalysisProfile) -> List[str]:
    """Return every recommendation line whose rule applies."""
    lines = [rule(profile) for rule in RECOMMENDATIONS]
    return [line for line in lines if line]


def render_report(profile: AnalysisProfile, generated_on: date | None = None) -> str:
    """Render the full analysis report as markdown."""
    stamp = generated_on or datetime.now(UTC).date()
    stack = profile.stack
    lines: List[str] = [
        "# Project Analysis Report",
        "",
        f"> Generated by `agentscan analyze` on {stamp.isoformat()}",
        "",
        "## Project Overview",
        "",
    ]
    if stack.name:
        lines.append(f"**Name:** {stack.name}")
    if profile.readme and profile.readme.description:
        lines.append(f"**Description:** {profile.readme.description}")
    for label, value in (
        ("Framework", stack.framework),
        ("Styling", stack.styling),
        ("Database", stack.database),
    ):
        if value:
            lines.append(f"**{label}:** {value}")
    lines.append("")

    lines.extend(["## Tech Stack", ""])
    if stack.key_dependencies:
        lines.append("### Key Dependencies")
        lines.extend(f"- {dep}" for dep in stack.key_dependencies)
        lines.append("")
    if stack.features:
        lines.append("### Features")
        lines.extend(f"- {feature}" for feature in stack.features)
        lines.append("")

    lines.extend(
        [
            "## Project Structure",
            "",
            f"- **Total Files:** {profile.scan.total_files}",
            f"- **Total Directories:** {profile.scan.total_dirs}",
            "",
            "### File Distribution",
            "",
            "| Category | Count |",
            "|----------|-------|",
        ]
    )
    for label in CATEGORY_LABELS:
        paths = profile.categories.get(label, ())
        if paths:
            lines.append(f"| {label} | {len(paths)} |")
    lines.append("")

    conventions = profile.conventions
    lines.extend(["## Coding Conventions", ""])
    if conventions.component_style:
        lines.append(f"- **Component Naming:** {conventions.component_style}")
    if conventions.file_extension:
        lines.append(f"- **File Extension:** {conventions.file_extension}")
    if conventions.test_naming:
        lines.append(f"- **Test Naming:** {conventions.test_naming}")
    if conventions.index_files:
        lines.append("- **Index Files:** Uses index.ts/js for exports")
    if conventions.barrel_exports:
        lines.append("- **Barrel Exports:** Uses barrel pattern extensively")
    lines.append("")

    typescript = profile.typescript
    if typescript is not None:
        lines.extend(["## TypeScript Configuration", ""])
        lines.append(f"- **Strict Mode:** {'Yes' if typescript.strict else 'No'}")
        if typescript.base_url:
            lines.append(f"- **Base URL:** {typescript.base_url}")
        if typescript.target:
            lines.append(f"- **Target:** {typescript.target}")
        if typescript.jsx:
            lines.append(f"- **JSX:** {typescript.jsx}")
        if typescript.paths:
            lines.append("- **Path Aliases:**")
            for alias, targets in typescript.paths.items():
                first = targets[0] if targets else ""
                lines.append(f"  - `{alias}` → `{first}`")
        lines.append("")

    lines.extend(["## Project Setup", ""])
    for spec in DEFAULT_KEY_FILES:
        status = "✅" if profile.key_files.get(spec.key) else "❌"
        lines.append(f"- {status} {spec.label}")
    lines.append("")

    if profile.agent_configs:
        lines.extend(["## Agent Configurations", ""])
        for agent in profile.agent_configs.values():
            lines.append(f"### {agent.name}")
            lines.append(f"- **File:** `{agent.path}`")
            lines.append(f"- **Size:** {agent.size / 1024:.1f} KB")
            lines.append("")

    lines.extend(
        [
            "## Recommendations",
            "",
            "Based on this analysis, consider updating your agent configurations with:",
            "",
        ]
    )
    lines.extend(recommendations(profile) or [NO_RECOMMENDATIONS])
    lines.extend(
        [
            "",
            "---",
            "",
            "*Run `agentscan analyze` again after making changes to update this report.*",
        ]
    )
    return "\n".join(lines) + "\n"


__all__ = ["NO_RECOMMENDATIONS", "RECOMMENDATIONS", "recommendations", "render_report"]
