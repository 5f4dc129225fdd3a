"""Tests for agentscan.rendering.report."""

from __future__ import annotations

from datetime import date

from agentscan.models import (
    AgentConfigFile,
    AnalysisProfile,
    ConventionProfile,
    ScanResult,
    StackProfile,
    TypeScriptConfig,
)
from agentscan.rendering import render_report
from agentscan.rendering.report import NO_RECOMMENDATIONS, recommendations
from tests._fixtures.repo_builder import RepoBuilder

FIXED_DAY = date(2024, 5, 1)


def _bare_profile(**overrides) -> AnalysisProfile:
    values = dict(
        root="/tmp/empty",
        scan=ScanResult(root="/tmp/empty"),
        categories={},
        conventions=ConventionProfile(),
        stack=StackProfile(),
        typescript=None,
        key_files={},
    )
    values.update(overrides)
    return AnalysisProfile(**values)


def test_report_for_next_project(repo_builder: RepoBuilder) -> None:
    repo_builder.write_json(
        "package.json",
        {
            "name": "web",
            "dependencies": {"next": "14.1.0", "react": "18.2.0", "tailwindcss": "3.4.0"},
            "devDependencies": {"typescript": "5.4.0", "vitest": "1.0.0"},
        },
    )
    repo_builder.write_json(
        "tsconfig.json",
        {"compilerOptions": {"strict": True, "paths": {"@/*": ["./src/*"]}}},
    )
    repo_builder.write({"README.md": "# Web\n\nMarketing site.\n"})
    repo_builder.touch("src/components/Button.tsx", "src/app/api/route.ts")

    report = render_report(repo_builder.profile(), FIXED_DAY)

    assert report.startswith("# Project Analysis Report\n")
    assert "> Generated by `agentscan analyze` on 2024-05-01" in report
    assert "**Name:** web" in report
    assert "**Description:** Marketing site." in report
    assert "**Framework:** Next.js" in report
    assert "- next@14.1.0" in report
    assert "- TypeScript" in report
    assert "| components | 1 |" in report
    assert "- **Strict Mode:** Yes" in report
    assert "  - `@/*` → `./src/*`" in report
    assert "- ✅ README.md" in report
    assert "- ❌ LICENSE" in report
    assert "- Framework-specific patterns for Next.js" in report
    assert "- Import alias patterns (e.g., `@/components/...`)" in report
    assert "- Testing patterns using Vitest" in report
    assert report.endswith("*Run `agentscan analyze` again after making changes to update this report.*\n")


def test_report_is_stable_for_a_fixed_date(repo_builder: RepoBuilder) -> None:
    repo_builder.write_json("package.json", {"dependencies": {"vue": "3.4.0"}})
    repo_builder.touch("src/App.vue", "src/utils/format.ts")
    profile = repo_builder.profile()

    assert render_report(profile, FIXED_DAY) == render_report(profile, FIXED_DAY)


def test_empty_profile_gets_fallback_recommendation() -> None:
    profile = _bare_profile()

    report = render_report(profile, FIXED_DAY)

    assert recommendations(profile) == []
    assert NO_RECOMMENDATIONS in report
    assert "## TypeScript Configuration" not in report
    assert "## Agent Configurations" not in report


def test_typescript_section_without_strict() -> None:
    report = render_report(_bare_profile(typescript=TypeScriptConfig()), FIXED_DAY)

    assert "- **Strict Mode:** No" in report
    assert "Path Aliases" not in report


def test_agent_sizes_in_kilobytes() -> None:
    profile = _bare_profile(
        agent_configs={"claude": AgentConfigFile("claude", "Claude (Anthropic)", "CLAUDE.md", 1536)}
    )

    report = render_report(profile, FIXED_DAY)

    assert "### Claude (Anthropic)" in report
    assert "- **File:** `CLAUDE.md`" in report
    assert "- **Size:** 1.5 KB" in report


def test_api_and_naming_recommendations() -> None:
    profile = _bare_profile(
        categories={"api": ("src/api/users.ts",)},
        conventions=ConventionProfile(component_style="kebab-case"),
    )

    assert recommendations(profile) == [
        "- kebab-case naming convention for components",
        "- API route patterns and data fetching conventions",
    ]
