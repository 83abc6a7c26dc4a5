"""
Tests for configuration management commands and settings.
"""

from pathlib import Path

import pytest
from click.testing import CliRunner
from pydantic import ValidationError

from flashui.cli.config_cmd import config, mask_api_key
from flashui.config import Settings, get_settings
from flashui.config.validation import validate_config


def test_config_set(tmp_path: Path) -> None:
    """Test config set command."""
    runner = CliRunner()
    env_file = tmp_path / ".env"

    result = runner.invoke(config, ["set", "LOG_LEVEL", "DEBUG", "--env-file", str(env_file)])
    assert result.exit_code == 0
    assert "✅ Successfully set LOG_LEVEL" in result.output
    assert "LOG_LEVEL='DEBUG'" in env_file.read_text()

    result = runner.invoke(config, ["set", "DATABASE_URL", "x", "--env-file", str(env_file)])
    assert result.exit_code == 0
    assert "❌ Invalid configuration key: DATABASE_URL" in result.output

    result = runner.invoke(config, ["set", "LOG_LEVEL", "LOUD", "--env-file", str(env_file)])
    assert result.exit_code == 0
    assert "❌ Invalid value for LOG_LEVEL" in result.output


def test_config_set_validates_generation_settings(tmp_path: Path) -> None:
    runner = CliRunner()
    env_file = str(tmp_path / ".env")

    result = runner.invoke(config, ["set", "DEFAULT_MODEL", "gpt-2", "--env-file", env_file])
    assert "Unknown model" in result.output

    result = runner.invoke(config, ["set", "ARTIFACT_COUNT", "0", "--env-file", env_file])
    assert "Must be greater than zero" in result.output

    result = runner.invoke(config, ["set", "ARTIFACT_COUNT", "4", "--env-file", env_file])
    assert "Successfully set ARTIFACT_COUNT" in result.output


def test_config_set_requires_key_and_value() -> None:
    result = CliRunner().invoke(config, ["set", "LOG_LEVEL"])
    assert "Usage: flashui config set KEY VALUE" in result.output


def test_config_get(test_env_file: Path) -> None:
    """Test config get command."""
    runner = CliRunner()

    result = runner.invoke(config, ["get", "--env-file", str(test_env_file)])
    assert result.exit_code == 0
    assert "LOG_LEVEL=DEBUG" in result.output
    assert "OPENAI_API_KEY=sk-1234567...1234" in result.output
    assert "GROQ_API_KEY=gsk_123456...1234" in result.output

    result = runner.invoke(config, ["get", "DEFAULT_MODEL", "--env-file", str(test_env_file)])
    assert result.output.strip() == "DEFAULT_MODEL=gpt-4o"

    result = runner.invoke(config, ["get", "NONEXISTENT", "--env-file", str(test_env_file)])
    assert "Key not found" in result.output


def test_config_get_missing_file(tmp_path: Path) -> None:
    result = CliRunner().invoke(config, ["get", "--env-file", str(tmp_path / "none.env")])
    assert "❌ Environment file not found" in result.output


def test_mask_api_key() -> None:
    assert mask_api_key("short") == "short"
    assert mask_api_key("sk-abcdefghijklmnop") == "sk-abcdefg...mnop"


def test_validate_config_flags_each_key() -> None:
    results = validate_config(
        {
            "OPENAI_API_KEY": "sk-not-long",
            "GROQ_API_KEY": "gsk_" + "a" * 24,
            "LOG_LEVEL": "info",
            "VARIATION_TEMPERATURE": "warm",
            "UNKNOWN": "1",
        }
    )
    assert not results["OPENAI_API_KEY"].is_valid
    assert results["GROQ_API_KEY"].is_valid
    assert results["LOG_LEVEL"].is_valid
    assert results["VARIATION_TEMPERATURE"].message == "Not a number: warm"
    assert results["UNKNOWN"].message == "Invalid configuration key: UNKNOWN"


def test_settings_defaults() -> None:
    settings = get_settings()
    assert settings.DEFAULT_MODEL == "gpt-4o-mini"
    assert settings.ARTIFACT_COUNT == 3
    assert settings.VARIATION_TEMPERATURE == 1.1
    assert settings.LOG_LEVEL == "WARNING"
    assert get_settings() is settings


def test_settings_read_env_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".env").write_text("ARTIFACT_COUNT=5\nDEFAULT_MODEL=gemma2-9b-it\n")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings()

    assert settings.ARTIFACT_COUNT == 5
    assert settings.DEFAULT_MODEL == "gemma2-9b-it"
    assert settings.LOG_LEVEL == "DEBUG"


def test_settings_reject_bad_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEFAULT_MODEL", "gpt-2")
    with pytest.raises(ValidationError):
        Settings()

    monkeypatch.setenv("DEFAULT_MODEL", "gpt-4o")
    monkeypatch.setenv("ARTIFACT_COUNT", "0")
    with pytest.raises(ValidationError):
        Settings()
