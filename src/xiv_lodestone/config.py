"""
Configuration management for Lodestone access.

Loads settings from environment variables and config file, with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="LODESTONE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_timeout: float = Field(default=30.0, description="HTTP request timeout in seconds")
    base_url: str = Field(
        default="https://na.finalfantasyxiv.com/lodestone",
        description="Lodestone root URL, without trailing slash",
    )
    user_agent: str = Field(
        default="xiv-lodestone/0.1",
        description="User-Agent header sent with every request",
    )
    log_level: str = Field(default="INFO", description="Logging level")


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    global _settings
    _settings = Settings()
    return _settings
