"""
Pytest configuration for CLI tests.
"""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def cli_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every CLI test from an empty directory with quiet logging."""
    monkeypatch.chdir(tmp_path)
    for var in ("DEFAULT_MODEL", "ARTIFACT_COUNT", "LOG_FILE"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    return tmp_path


@pytest.fixture
def test_env_file(tmp_path: Path) -> Path:
    """Create a test environment file."""
    env_file = tmp_path / "test.env"
    env_content = """
    LOG_LEVEL=DEBUG
    DEFAULT_MODEL=gpt-4o
    OPENAI_API_KEY=sk-1234567890abcdef1234567890abcdef1234567890abcdef1234
    GROQ_API_KEY=gsk_1234567890abcdef1234567890abcdef1234567890abcdef1234
    """
    env_file.write_text("\n".join(line.strip() for line in env_content.strip().splitlines()))
    return env_file
