"""Analyzers that turn a scanned repository into profile fragments."""

from __future__ import annotations

from .agents import KNOWN_AGENTS, AgentSpec, detect_agent_configs
from .conventions import ConventionAnalyzer
from .key_files import DEFAULT_KEY_FILES, KeyFileDetector, KeyFileSpec
from .manifest import ManifestInspector, StackRules
from .readme import summarize_readme

__all__ = [
    "AgentSpec",
    "ConventionAnalyzer",
    "DEFAULT_KEY_FILES",
    "KNOWN_AGENTS",
    "KeyFileDetector",
    "KeyFileSpec",
    "ManifestInspector",
    "StackRules",
    "detect_agent_configs",
    "summarize_readme",
]
