"""Stack detection from package.json and tsconfig.json."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Optional, Tuple

from ..logging import get_logger
from ..models import StackProfile, TypeScriptConfig
from ..rules import (
    Dependencies,
    Rule,
    all_matches,
    dependency_rule,
    first_match,
    has_all,
    version_contains,
)

_logger = get_logger("manifest")

DepRule = Rule[Dependencies, str]

FRAMEWORK_RULES: Tuple[DepRule, ...] = (
    dependency_rule("Next.js", "next"),
    dependency_rule("Remix", "remix", "@remix-run/react"),
    dependency_rule("Astro", "astro"),
    dependency_rule("Nuxt", "nuxt"),
    dependency_rule("SvelteKit", "svelte", "@sveltejs/kit"),
    dependency_rule("Gatsby", "gatsby"),
    Rule("React (Vite)", has_all("react", "vite")),
    dependency_rule("React", "react"),
    dependency_rule("Vue", "vue"),
)

STYLING_RULES: Tuple[DepRule, ...] = (
    dependency_rule("Tailwind CSS", "tailwindcss"),
    dependency_rule("Material-UI", "@mui/material"),
    dependency_rule("Styled Components", "styled-components"),
    dependency_rule("Emotion", "@emotion/react"),
    dependency_rule("Sass/SCSS", "sass", "node-sass"),
)

DATABASE_RULES: Tuple[DepRule, ...] = (
    dependency_rule("Supabase", "@supabase/supabase-js"),
    dependency_rule("Firebase", "firebase"),
    dependency_rule("Prisma", "@prisma/client"),
    dependency_rule("Drizzle", "drizzle-orm"),
    dependency_rule("MongoDB (Mongoose)", "mongoose"),
)

TESTING_RULES: Tuple[DepRule, ...] = (
    dependency_rule("Vitest", "vitest"),
    dependency_rule("Jest", "jest"),
    dependency_rule("Playwright", "@playwright/test"),
    dependency_rule("Cypress", "cypress"),
)

LINTING_RULES: Tuple[DepRule, ...] = (
    Rule("ESLint + Prettier", has_all("eslint", "prettier")),
    dependency_rule("ESLint", "eslint"),
    dependency_rule("Biome", "biome", "@biomejs/biome"),
)

BUILD_TOOL_RULES: Tuple[DepRule, ...] = (
    dependency_rule("Turborepo", "turbo", "@turbo/gen"),
    dependency_rule("Nx", "nx"),
    dependency_rule("Vite", "vite"),
    dependency_rule("Webpack", "webpack"),
)

FEATURE_RULES: Tuple[DepRule, ...] = (
    Rule("React 19", version_contains("react", "19", "canary")),
    dependency_rule("Monorepo", "turbo", "@turbo/gen", "nx"),
    dependency_rule("Google Gemini AI", "@google/generative-ai"),
    dependency_rule("OpenAI API", "openai"),
    dependency_rule("Anthropic Claude", "@anthropic-ai/sdk"),
    dependency_rule("Storybook", "storybook", "@storybook/react"),
    dependency_rule("Three.js/R3F", "three", "@react-three/fiber"),
    dependency_rule("Framer Motion", "framer-motion"),
    dependency_rule("TanStack Query", "react-query", "@tanstack/react-query"),
    dependency_rule("Zustand", "zustand"),
    dependency_rule("Jotai", "jotai"),
    dependency_rule("Redux", "redux", "@reduxjs/toolkit"),
    dependency_rule("Zod validation", "zod"),
    dependency_rule("React Hook Form", "react-hook-form"),
    dependency_rule("TypeScript", "typescript"),
)

KEY_DEPENDENCIES: Tuple[str, ...] = (
    "next",
    "react",
    "tailwindcss",
    "@mui/material",
    "@supabase/supabase-js",
    "typescript",
)

# Checked in order; npm is assumed when no lockfile is present.
LOCKFILES: Tuple[Tuple[str, str], ...] = (
    ("pnpm-lock.yaml", "pnpm"),
    ("yarn.lock", "yarn"),
    ("package-lock.json", "npm"),
)

# Strings are matched first so that "//" or "/*" inside them survive.
_JSONC_TOKENS = re.compile(r'("(?:\\.|[^"\\])*")|//[^\n]*|/\*.*?\*/', re.DOTALL)
_TRAILING_COMMA = re.compile(r'("(?:\\.|[^"\\])*")|,(\s*[}\]])')


@dataclass(frozen=True)
class StackRules:
    """Ordered rule tables used to resolve each stack field."""

    framework: Tuple[DepRule, ...] = FRAMEWORK_RULES
    styling: Tuple[DepRule, ...] = STYLING_RULES
    database: Tuple[DepRule, ...] = DATABASE_RULES
    testing: Tuple[DepRule, ...] = TESTING_RULES
    linting: Tuple[DepRule, ...] = LINTING_RULES
    build_tool: Tuple[DepRule, ...] = BUILD_TOOL_RULES
    features: Tuple[DepRule, ...] = FEATURE_RULES
    key_dependencies: Tuple[str, ...] = KEY_DEPENDENCIES


def strip_json_comments(text: str) -> str:
    """Remove comments and trailing commas from JSON-with-comments text."""
    without_comments = _JSONC_TOKENS.sub(lambda match: match.group(1) or "", text)
    return _TRAILING_COMMA.sub(
        lambda match: match.group(1) or match.group(2), without_comments
    )


def _read_json(path: Path, *, allow_comments: bool = False) -> Optional[Any]:
    try:
        # Tolerates a leading BOM.
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        _logger.debug("Could not read %s: %s", path.name, exc)
        return None
    if allow_comments:
        text = strip_json_comments(text)
    try:
        return json.loads(text)
    except (ValueError, RecursionError) as exc:
        _logger.debug("Could not parse %s: %s", path.name, exc)
        return None


def _string_map(value: Any) -> Dict[str, str]:
    if not isinstance(value, dict):
        return {}
    return {str(key): str(item) for key, item in value.items() if item is not None}


def _optional_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def detect_package_manager(root: Path) -> str:
    """Infer the Node package manager from lockfiles at the root."""
    for lockfile, manager in LOCKFILES:
        if (root / lockfile).exists():
            return manager
    return "npm"


def script_command(script: str, manager: Optional[str]) -> str:
    manager = (manager or "npm").lower()
    if manager in {"pnpm", "yarn"}:
        return f"{manager} {script}"
    return f"npm run {script}"


def merge_dependencies(package: Dict[str, Any]) -> Dict[str, str]:
    """Return runtime and dev dependencies, dev versions winning on conflict."""
    merged = _string_map(package.get("dependencies"))
    merged.update(_string_map(package.get("devDependencies")))
    return merged


class ManifestInspector:
    """Resolves a StackProfile from package.json via ordered rule tables."""

    MANIFEST = "package.json"
    TSCONFIG = "tsconfig.json"

    def __init__(self, rules: StackRules | None = None) -> None:
        self.rules = rules or StackRules()

    def inspect(self, root: Path) -> StackProfile:
        path = root / self.MANIFEST
        if not path.is_file():
            return StackProfile()
        package = _read_json(path)
        if not isinstance(package, dict):
            return StackProfile()
        return replace(self.resolve(package), package_manager=detect_package_manager(root))

    def resolve(self, package: Dict[str, Any]) -> StackProfile:
        """Build a StackProfile from already parsed package.json content."""
        deps = merge_dependencies(package)
        rules = self.rules
        key_dependencies: List[str] = [
            f"{name}@{deps[name]}" for name in rules.key_dependencies if name in deps
        ]
        return StackProfile(
            name=_optional_str(package.get("name")),
            version=_optional_str(package.get("version")),
            module_type=_optional_str(package.get("type")) or "commonjs",
            framework=first_match(rules.framework, deps),
            styling=first_match(rules.styling, deps),
            database=first_match(rules.database, deps),
            testing=first_match(rules.testing, deps),
            linting=first_match(rules.linting, deps),
            build_tool=first_match(rules.build_tool, deps),
            features=tuple(all_matches(rules.features, deps)),
            scripts=MappingProxyType(_string_map(package.get("scripts"))),
            key_dependencies=tuple(key_dependencies),
        )

    def inspect_typescript(self, root: Path) -> Optional[TypeScriptConfig]:
        path = root / self.TSCONFIG
        if not path.is_file():
            return None
        data = _read_json(path, allow_comments=True)
        if not isinstance(data, dict):
            return TypeScriptConfig()
        options = data.get("compilerOptions")
        if not isinstance(options, dict):
            return TypeScriptConfig()

        paths: Dict[str, Tuple[str, ...]] = {}
        raw_paths = options.get("paths")
        if isinstance(raw_paths, dict):
            for alias, targets in raw_paths.items():
                if isinstance(targets, list):
                    paths[str(alias)] = tuple(str(target) for target in targets)
                elif isinstance(targets, str):
                    paths[str(alias)] = (targets,)

        return TypeScriptConfig(
            strict=options.get("strict") is True,
            base_url=_optional_str(options.get("baseUrl")),
            paths=paths,
            target=_optional_str(options.get("target")),
            jsx=_optional_str(options.get("jsx")),
        )


__all__ = [
    "ManifestInspector",
    "StackRules",
    "detect_package_manager",
    "merge_dependencies",
    "script_command",
    "strip_json_comments",
]
