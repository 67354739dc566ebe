"""Unit tests for SettingsManager."""

import os
import tempfile
from pathlib import Path

import pytest

from word_lookup.services import SettingsManager
from word_lookup.services.settings_manager import DEFAULT_DICTIONARY_API_URL

ENV_VARS = ("DICTIONARY_API_KEY", "DICTIONARY_API_URL", "WORD_LOOKUP_DATA_PATH")


@pytest.fixture
def temp_env_dir():
    """Provide a temporary directory for .env files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def clean_env():
    """Clean up settings variables from environment before and after test."""
    old_values = {name: os.environ.pop(name, None) for name in ENV_VARS}
    yield
    for name, value in old_values.items():
        if value is not None:
            os.environ[name] = value
        else:
            os.environ.pop(name, None)


@pytest.fixture
def settings(temp_env_dir, clean_env):
    """Provide a SettingsManager with a test .env file."""
    env_file = temp_env_dir / ".env"
    env_file.write_text("DICTIONARY_API_KEY=\n")
    return SettingsManager(project_root=temp_env_dir)


class TestSettingsManagerAPIKey:
    """Tests for API key management from .env file."""

    def test_get_api_key_returns_none_when_empty(self, settings):
        assert settings.get_dictionary_api_key() is None

    def test_get_api_key_returns_value_from_env_file(self, temp_env_dir, clean_env):
        env_file = temp_env_dir / ".env"
        env_file.write_text("DICTIONARY_API_KEY=test-key-123\n")

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_dictionary_api_key() == "test-key-123"

    def test_get_api_key_returns_none_for_whitespace_only(self, temp_env_dir, clean_env):
        os.environ["DICTIONARY_API_KEY"] = "   "

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_dictionary_api_key() is None

    def test_reload_env_updates_api_key(self, temp_env_dir, clean_env):
        env_file = temp_env_dir / ".env"
        env_file.write_text("DICTIONARY_API_KEY=old-key\n")
        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_dictionary_api_key() == "old-key"

        env_file.write_text("DICTIONARY_API_KEY=new-key\n")
        settings.reload_env()
        assert settings.get_dictionary_api_key() == "new-key"

    def test_missing_env_file_returns_none(self, temp_env_dir, clean_env):
        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_dictionary_api_key() is None


class TestSettingsManagerPaths:
    def test_default_api_url(self, settings):
        assert settings.get_dictionary_api_url() == DEFAULT_DICTIONARY_API_URL

    def test_api_url_trailing_slash_stripped(self, temp_env_dir, clean_env):
        os.environ["DICTIONARY_API_URL"] = "https://example.test/json/"
        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_dictionary_api_url() == "https://example.test/json"

    def test_default_data_path_in_project_root(self, settings, temp_env_dir):
        assert settings.get_data_path() == temp_env_dir / ".word_lookup.db"

    def test_data_path_override(self, temp_env_dir, clean_env, tmp_path):
        os.environ["WORD_LOOKUP_DATA_PATH"] = str(tmp_path / "activity.db")
        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_data_path() == tmp_path / "activity.db"
