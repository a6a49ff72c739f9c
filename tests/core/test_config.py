"""
Tests for configuration loading.

Settings must fail fast with ConfigError before any network call.
"""

import pytest

from undefined_terms.core.config import (
    DEFAULT_OLLAMA_HOST,
    DEFAULT_OLLAMA_MODEL,
    DEFAULT_TEMPERATURE,
    load_settings,
    parse_model,
    parse_temperature,
)
from undefined_terms.core.errors import ConfigError


class TestLoadSettings:
    """Tests for load_settings."""

    def test_missing_api_key(self):
        """Test that a missing credential raises ConfigError."""
        with pytest.raises(ConfigError, match="OLLAMA_API_KEY"):
            load_settings({})

    def test_blank_api_key(self):
        """Test that a whitespace-only credential counts as missing."""
        with pytest.raises(ConfigError):
            load_settings({"OLLAMA_API_KEY": "   "})

    def test_defaults(self):
        """Test defaults when only the credential is set."""
        settings = load_settings({"OLLAMA_API_KEY": "test_key"})

        assert settings.api_key == "test_key"
        assert settings.host == DEFAULT_OLLAMA_HOST
        assert settings.model == DEFAULT_OLLAMA_MODEL
        assert settings.temperature == DEFAULT_TEMPERATURE

    def test_overrides_from_environment(self):
        """Test that host, model and temperature come from the environment."""
        settings = load_settings({
            "OLLAMA_API_KEY": "test_key",
            "OLLAMA_HOST": "http://localhost:11434",
            "OLLAMA_MODEL": "test-model",
            "UNDEFINED_TERMS_TEMPERATURE": "0.7",
        })

        assert settings.host == "http://localhost:11434"
        assert settings.model == "test-model"
        assert settings.temperature == 0.7

    def test_blank_model(self):
        """Test that an empty model identifier is rejected."""
        with pytest.raises(ConfigError, match="OLLAMA_MODEL"):
            load_settings({"OLLAMA_API_KEY": "test_key", "OLLAMA_MODEL": " "})

    def test_reads_process_environment(self, monkeypatch):
        """Test that os.environ is used when no mapping is passed."""
        monkeypatch.setenv("OLLAMA_API_KEY", "env_key")
        monkeypatch.delenv("OLLAMA_MODEL", raising=False)
        monkeypatch.delenv("UNDEFINED_TERMS_TEMPERATURE", raising=False)

        assert load_settings().api_key == "env_key"

    def test_api_key_hidden_from_repr(self):
        """Test that the credential does not leak into logs via repr."""
        settings = load_settings({"OLLAMA_API_KEY": "secret-value"})
        assert "secret-value" not in repr(settings)


class TestParseTemperature:
    """Tests for temperature parsing."""

    @pytest.mark.parametrize("raw,expected", [("0", 0.0), ("0.3", 0.3), ("2", 2.0)])
    def test_valid(self, raw, expected):
        assert parse_temperature(raw) == expected

    @pytest.mark.parametrize("raw", ["hot", "", "-0.1", "2.5"])
    def test_invalid(self, raw):
        with pytest.raises(ConfigError):
            parse_temperature(raw)

    def test_invalid_from_environment(self):
        """Test that a bad temperature variable fails settings loading."""
        with pytest.raises(ConfigError, match="Temperature"):
            load_settings({"OLLAMA_API_KEY": "k", "UNDEFINED_TERMS_TEMPERATURE": "warm"})


class TestParseModel:
    """Tests for model identifier parsing."""

    def test_strips_whitespace(self):
        assert parse_model("  llama3.2  ") == "llama3.2"

    @pytest.mark.parametrize("raw", ["", " ", "\t\n"])
    def test_blank(self, raw):
        with pytest.raises(ConfigError, match="empty"):
            parse_model(raw)
