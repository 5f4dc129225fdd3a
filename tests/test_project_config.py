"""Tests for agentscan.project_config."""

from __future__ import annotations

from agentscan.config import OutputConfig
from agentscan.models import PersistedConfig
from agentscan.project_config import (
    CURRENT_SCHEMA_VERSION,
    load_project_config,
    parse_project_config,
)
from tests._fixtures.repo_builder import RepoBuilder


def test_loads_full_document(repo_builder: RepoBuilder) -> None:
    repo_builder.write_json(
        ".agents-project.json",
        {
            "version": "1.1.0",
            "project": {
                "name": "web",
                "framework": "next",
                "styling": "tailwind",
                "database": None,
            },
            "agents": ["claude", "copilot"],
            "features": {"mcp": True, "hooks": False, "note": "ignored"},
            "rules": {"include": ["react"], "exclude": ["vue"]},
            "overrides": {"claude": {"model": "x"}},
        },
    )

    config = load_project_config(repo_builder.path())

    assert config is not None
    assert config.version == CURRENT_SCHEMA_VERSION
    assert config.project.name == "web"
    assert config.project.framework == "next"
    assert config.project.database is None
    assert config.agents == ("claude", "copilot")
    assert config.features == {"mcp": True, "hooks": False}
    assert config.rules_include == ("react",)
    assert config.rules_exclude == ("vue",)
    assert config.overrides == {"claude": {"model": "x"}}


def test_missing_file_returns_none(repo_builder: RepoBuilder) -> None:
    assert load_project_config(repo_builder.path()) is None


def test_malformed_file_returns_none(repo_builder: RepoBuilder, caplog) -> None:
    repo_builder.write({".agents-project.json": "{ nope"})

    with caplog.at_level("WARNING", logger="agentscan"):
        assert load_project_config(repo_builder.path()) is None


def test_non_object_document_returns_none(repo_builder: RepoBuilder) -> None:
    repo_builder.write({".agents-project.json": "[]"})

    assert load_project_config(repo_builder.path()) is None


def test_custom_location(repo_builder: RepoBuilder) -> None:
    repo_builder.write_json("agents.json", {"version": "1.0.0"})

    config = load_project_config(repo_builder.path(), OutputConfig(project_config="agents.json"))

    assert config is not None
    assert config.version == "1.0.0"


def test_parse_tolerates_missing_sections() -> None:
    assert parse_project_config({}) == PersistedConfig()


def test_deeply_nested_document_returns_none(repo_builder: RepoBuilder) -> None:
    repo_builder.write({".agents-project.json": "{\"a\": " + "[" * 100000 + "]" * 100000 + "}"})

    assert load_project_config(repo_builder.path()) is None
