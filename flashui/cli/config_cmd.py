"""
Configuration management commands.
"""

from pathlib import Path
from typing import Optional

import click
from dotenv import dotenv_values, set_key

from flashui.config.validation import KNOWN_KEYS, validate_config


def mask_api_key(key: str) -> str:
    """Mask sensitive API key."""
    if len(key) <= 12:
        return key
    return f"{key[:10]}...{key[-4:]}"


@click.group()
def config() -> None:
    """Manage FlashUI configuration."""
    pass


@config.command()
@click.argument("key", required=False)
@click.argument("value", required=False)
@click.option("--env-file", default=".env", help="Path to .env file")
def set(key: Optional[str], value: Optional[str], env_file: str) -> None:
    """Set configuration value."""
    if not key or not value:
        click.echo("Usage: flashui config set KEY VALUE")
        return

    if key not in KNOWN_KEYS:
        click.echo(f"❌ Invalid configuration key: {key}")
        return

    validation = validate_config({key: value})[key]
    if not validation.is_valid:
        click.echo(f"❌ Invalid value for {key}: {validation.message}")
        return

    Path(env_file).touch(exist_ok=True)
    set_key(env_file, key, value)
    click.echo(f"✅ Successfully set {key}")


@config.command()
@click.argument("key", required=False)
@click.option("--env-file", default=".env", help="Path to .env file")
def get(key: Optional[str], env_file: str) -> None:
    """Get configuration value(s)."""
    if not Path(env_file).exists():
        click.echo("❌ Environment file not found")
        return

    config_values = dotenv_values(env_file)
    if not config_values:
        click.echo("No configuration values found")
        return

    if key:
        if key not in config_values:
            click.echo("Key not found")
            return
        value = config_values[key] or ""
        if "API_KEY" in key:
            value = mask_api_key(value)
        click.echo(f"{key}={value}")
    else:
        for k, v in config_values.items():
            v = v or ""
            if "API_KEY" in k:
                v = mask_api_key(v)
            click.echo(f"{k}={v}")
