"""Condensed project context for AI assistants (.agents/PROJECT-CONTEXT.md)."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from ..analyzers.manifest import script_command
from ..models import CATEGORY_LABELS, AnalysisProfile

STACK_SEPARATOR = " + "

CATEGORY_TITLES: Dict[str, str] = {
    "components": "Components",
    "pages": "Pages/Routes",
    "api": "API Routes",
    "hooks": "Custom Hooks",
    "utils": "Utilities",
    "tests": "Tests",
    "styles": "Styles",
    "config": "Configuration",
    "other": "Other",
}

IMPORTANT_SCRIPTS: Tuple[str, ...] = ("dev", "build", "start", "test", "lint", "format")

PLACEHOLDER_TODOS: Tuple[str, ...] = (
    "- [ ] TODO: Document component composition patterns",
    "- [ ] TODO: Document state management approach",
    "- [ ] TODO: Document API/data fetching patterns",
    "- [ ] TODO: Document error handling conventions",
)


def stack_line(profile: AnalysisProfile) -> str:
    """Join the detected stack fields, skipping the ones that are unset."""
    stack = profile.stack
    parts: List[Optional[str]] = [
        stack.framework,
        stack.styling,
        stack.database,
        stack.testing,
        "TypeScript" if "TypeScript" in stack.features else None,
    ]
    return STACK_SEPARATOR.join(part for part in parts if part)


def representative_directory(path: str) -> str:
    head, sep, _ = path.partition("/")
    return f"{head}/" if sep else "./"


def render_context(profile: AnalysisProfile) -> str:
    """Render the condensed agent-facing summary as markdown."""
    stack = profile.stack
    lines: List[str] = [
        "# Project Context",
        "",
        "> **This file provides project-specific context for AI coding assistants.**",
        "> Auto-generated by `agentscan analyze`. Edit as needed.",
        ">",
        "> This file **extends** the general guidelines in [AGENTS.md](./AGENTS.md).",
        "> Project-specific patterns here override generic rules when they conflict.",
        "",
        "## Project Identity",
        "",
        f"- **Name:** {profile.project_name}",
    ]
    if profile.readme and profile.readme.description:
        lines.append(f"- **Purpose:** {profile.readme.description}")
    lines.append("")

    lines.extend(["## Technology Stack", "", stack_line(profile) or "Not detected", ""])
    if stack.features:
        lines.append("### Additional Libraries")
        lines.extend(f"- {feature}" for feature in stack.features)
        lines.append("")

    lines.extend(["## File Organization", ""])
    for label in CATEGORY_LABELS:
        paths = profile.categories.get(label, ())
        if not paths:
            continue
        directory = representative_directory(paths[0])
        lines.append(f"- **{CATEGORY_TITLES[label]}:** `{directory}` ({len(paths)} files)")
    lines.append("")

    conventions = profile.conventions
    lines.extend(
        [
            "## Coding Standards",
            "",
            f"- **Component naming:** {conventions.component_style or 'PascalCase'}",
            f"- **File extension:** {conventions.file_extension or '.tsx'}",
            f"- **Test files:** {conventions.test_naming or '.test.'}",
        ]
    )
    if profile.typescript and profile.typescript.strict:
        lines.append("- **TypeScript:** Strict mode enabled")
    if profile.typescript and profile.typescript.paths:
        lines.append("- **Import aliases:** Use `@/` prefix for src imports")
    lines.append("")

    scripts = [name for name in IMPORTANT_SCRIPTS if stack.scripts.get(name)]
    if scripts:
        lines.extend(["## Available Scripts", ""])
        for name in scripts:
            command = script_command(name, stack.package_manager)
            lines.append(f"- `{command}` - {stack.scripts[name]}")
        lines.append("")

    lines.extend(
        [
            "## Project-Specific Patterns",
            "",
            "<!-- Add project-specific patterns, conventions, and notes below -->",
            "",
            *PLACEHOLDER_TODOS,
            "",
        ]
    )
    return "\n".join(lines)


__all__ = [
    "CATEGORY_TITLES",
    "IMPORTANT_SCRIPTS",
    "PLACEHOLDER_TODOS",
    "STACK_SEPARATOR",
    "render_context",
    "representative_directory",
    "stack_line",
]
