"""Tests for data and configuration models."""

import pytest
from pydantic import ValidationError

from gitrelnotes.errors import IncompleteRangeError
from gitrelnotes.models import (
    CommitRange,
    CommitSelection,
    GenerationConfig,
    LastCommits,
    ReleaseNotesDraft,
    Settings,
    criteria_from_options,
)


class TestSelectionCriteria:
    """Building selection criteria from optional values."""

    def test_defaults_to_last_five(self):
        criteria = criteria_from_options()

        assert isinstance(criteria, LastCommits)
        assert criteria.count == 5

    def test_count(self):
        assert criteria_from_options(count=12) == LastCommits(count=12)

    def test_range(self):
        criteria = criteria_from_options(from_commit="abc", to_commit="def")

        assert criteria == CommitRange(from_commit="abc", to_commit="def")
        assert criteria.mode == "range"

    def test_range_wins_over_count(self):
        assert isinstance(criteria_from_options(3, "abc", "def"), CommitRange)

    @pytest.mark.parametrize(
        "from_commit,to_commit",
        [("abc", None), (None, "def"), ("abc", "")],
    )
    def test_incomplete_range(self, from_commit, to_commit):
        with pytest.raises(IncompleteRangeError):
            criteria_from_options(from_commit=from_commit, to_commit=to_commit)

    @pytest.mark.parametrize("count", [0, -3])
    def test_non_positive_count_rejected(self, count):
        with pytest.raises(ValidationError):
            LastCommits(count=count)


def test_commit_selection_must_not_be_empty():
    with pytest.raises(ValidationError):
        CommitSelection(mode="last", commits=[])


def test_release_notes_draft_is_append_only():
    draft = ReleaseNotesDraft()
    assert draft.is_empty()

    draft.append("Foo")
    draft.append(" ")
    fragments = draft.fragments
    fragments.append("tampered")

    assert draft.text == "Foo "
    assert draft.fragments == ["Foo", " "]
    assert not draft.is_empty()


def test_generation_config_defaults():
    config = GenerationConfig()

    assert config.max_diff_chars == 3000
    assert config.max_tokens == 16384
    assert config.temperature is None


class TestSettings:
    """Environment-driven settings."""

    @pytest.fixture(autouse=True)
    def isolated_env(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        for name in [
            "AZURE_OPENAI_API_KEY",
            "AZURE_OPENAI_ENDPOINT",
            "AZURE_OPENAI_DEPLOYMENT",
            "AZURE_OPENAI_API_VERSION",
            "OPENAI_API_KEY",
            "LOG_LEVEL",
        ]:
            monkeypatch.delenv(name, raising=False)

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("AZURE_OPENAI_API_KEY", "env-key")
        monkeypatch.setenv("AZURE_OPENAI_ENDPOINT", "https://env.openai.azure.com")
        monkeypatch.setenv("AZURE_OPENAI_DEPLOYMENT", "notes-deployment")

        config = Settings().to_llm_config()

        assert config.api_key == "env-key"
        assert config.endpoint == "https://env.openai.azure.com"
        assert config.deployment == "notes-deployment"
        assert config.api_version == "2024-10-21"

    def test_overrides_win(self, monkeypatch):
        monkeypatch.setenv("AZURE_OPENAI_API_KEY", "env-key")

        config = Settings().to_llm_config(api_key="cli-key", endpoint="https://cli.example.com")

        assert config.api_key == "cli-key"
        assert config.endpoint == "https://cli.example.com"

    def test_openai_key_fallback(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "openai-key")

        config = Settings().to_llm_config()

        assert config.api_key == "openai-key"
        assert config.endpoint is None

    def test_missing_key(self):
        with pytest.raises(ValueError, match="API key is required"):
            Settings().to_llm_config()

    def test_env_file(self, tmp_path):
        (tmp_path / ".env").write_text("AZURE_OPENAI_API_KEY=file-key\nLOG_LEVEL=DEBUG\n")

        settings = Settings()

        assert settings.azure_openai_api_key == "file-key"
        assert settings.log_level == "DEBUG"
