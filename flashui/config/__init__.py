"""
Configuration package for FlashUI.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from flashui.domain.model_types import parse_model_type


class Settings(BaseSettings):
    """Application settings."""

    OPENAI_API_KEY: Optional[str] = None
    GROQ_API_KEY: Optional[str] = None
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None
    DEFAULT_MODEL: str = "gpt-4o-mini"
    ARTIFACT_COUNT: int = Field(default=3, ge=1)
    VARIATION_TEMPERATURE: float = 1.1
    LLM_TIMEOUT_SECONDS: float = 120.0

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )

    @field_validator("DEFAULT_MODEL")
    @classmethod
    def _known_model(cls, value: str) -> str:
        parse_model_type(value)
        return value

    @field_validator("LOG_LEVEL")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
