"""
Configuration validation module.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict

from flashui.domain.model_types import parse_model_type, supported_model_names

KNOWN_KEYS = {
    "OPENAI_API_KEY",
    "GROQ_API_KEY",
    "LOG_LEVEL",
    "LOG_FILE",
    "DEFAULT_MODEL",
    "ARTIFACT_COUNT",
    "VARIATION_TEMPERATURE",
    "LLM_TIMEOUT_SECONDS",
}


@dataclass
class ValidationResult:
    """Result of a configuration validation."""

    is_valid: bool
    message: str


def validate_api_key(key: str, provider: str) -> ValidationResult:
    """Validate API key format."""
    patterns = {"openai": r"^sk-[A-Za-z0-9_\-]{20,}$", "groq": r"^gsk_[A-Za-z0-9]{20,}$"}
    if provider not in patterns:
        return ValidationResult(False, f"Unknown provider: {provider}")

    if re.match(patterns[provider], key):
        return ValidationResult(True, f"Valid {provider} API key")
    return ValidationResult(False, f"Invalid {provider} API key format")


def validate_log_level(level: str) -> ValidationResult:
    """Validate log level."""
    valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if level.upper() in valid_levels:
        return ValidationResult(True, "Valid log level")
    return ValidationResult(
        False, f"Invalid log level. Must be one of: {', '.join(valid_levels)}"
    )


def validate_log_file(path: str) -> ValidationResult:
    """Validate log file path."""
    log_dir = Path(path).parent
    if not log_dir.exists():
        return ValidationResult(False, f"Log directory does not exist: {log_dir}")
    return ValidationResult(True, "Valid log file path")


def validate_model(name: str) -> ValidationResult:
    try:
        parse_model_type(name)
    except ValueError:
        return ValidationResult(
            False, f"Unknown model. Must be one of: {', '.join(supported_model_names())}"
        )
    return ValidationResult(True, "Valid model")


def validate_positive_number(value: str, integer: bool = False) -> ValidationResult:
    try:
        number = int(value) if integer else float(value)
    except ValueError:
        return ValidationResult(False, f"Not a number: {value}")
    if number <= 0:
        return ValidationResult(False, "Must be greater than zero")
    return ValidationResult(True, "Valid number")


def validate_config(config: Dict[str, str]) -> Dict[str, ValidationResult]:
    """Validate all configuration settings."""
    results = {}

    for key in config:
        if key not in KNOWN_KEYS:
            results[key] = ValidationResult(False, f"Invalid configuration key: {key}")

    if "OPENAI_API_KEY" in config:
        results["OPENAI_API_KEY"] = validate_api_key(config["OPENAI_API_KEY"], "openai")

    if "GROQ_API_KEY" in config:
        results["GROQ_API_KEY"] = validate_api_key(config["GROQ_API_KEY"], "groq")

    if "LOG_LEVEL" in config:
        results["LOG_LEVEL"] = validate_log_level(config["LOG_LEVEL"])

    if "LOG_FILE" in config:
        results["LOG_FILE"] = validate_log_file(config["LOG_FILE"])

    if "DEFAULT_MODEL" in config:
        results["DEFAULT_MODEL"] = validate_model(config["DEFAULT_MODEL"])

    if "ARTIFACT_COUNT" in config:
        results["ARTIFACT_COUNT"] = validate_positive_number(config["ARTIFACT_COUNT"], integer=True)

    for key in ("VARIATION_TEMPERATURE", "LLM_TIMEOUT_SECONDS"):
        if key in config:
            results[key] = validate_positive_number(config[key])

    return results
