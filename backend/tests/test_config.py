"""Tests for environment-driven settings."""

import logging
import os
from pathlib import Path

import pytest

from exptree import Settings, configure_logging


@pytest.fixture
def clean_env(monkeypatch):
    monkeypatch.delenv("EXPTREE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("EXPTREE_PATH", raising=False)
    return monkeypatch


class TestSettingsFromEnv:
    def test_defaults(self, clean_env):
        settings = Settings.from_env()
        assert settings.log_level == "WARNING"
        assert settings.search_paths == []

    def test_log_level_case_insensitive(self, clean_env):
        clean_env.setenv("EXPTREE_LOG_LEVEL", "debug")
        assert Settings.from_env().log_level == "DEBUG"

    def test_unknown_log_level_falls_back(self, clean_env):
        clean_env.setenv("EXPTREE_LOG_LEVEL", "chatty")
        assert Settings.from_env().log_level == "WARNING"

    def test_search_paths(self, clean_env):
        clean_env.setenv("EXPTREE_PATH", os.pathsep.join(["rules", "", "more/rules"]))
        assert Settings.from_env().search_paths == [Path("rules"), Path("more/rules")]


class TestOverrides:
    def test_cli_log_level_wins(self):
        settings = Settings(log_level="WARNING").with_overrides(log_level="info")
        assert settings.log_level == "INFO"

    def test_missing_override_keeps_value(self):
        settings = Settings(log_level="ERROR").with_overrides()
        assert settings.log_level == "ERROR"

    def test_cli_paths_come_first(self):
        settings = Settings(search_paths=[Path("env")]).with_overrides(
            search_paths=[Path("cli")]
        )
        assert settings.search_paths == [Path("cli"), Path("env")]

    def test_original_unchanged(self):
        original = Settings(search_paths=[Path("env")])
        original.with_overrides(search_paths=[Path("cli")])
        assert original.search_paths == [Path("env")]


class TestConfigureLogging:
    def test_sets_root_level(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))

        configure_logging("debug")

        assert calls[0]["level"] == "DEBUG"
        assert "%(name)s" in calls[0]["format"]
