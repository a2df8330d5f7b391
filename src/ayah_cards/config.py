"""Configuration management for Ayah Cards."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, loaded from environment and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="AYC_",
    )

    # Quran text API
    api_base_url: str = Field(default="https://api.alquran.cloud/v1")
    arabic_edition: str = Field(default="quran-uthmani")
    default_language: str = Field(default="English")
    request_timeout: float = Field(default=30.0, description="HTTP timeout in seconds")

    # Grouping
    card_capacity: int = Field(
        default=450, gt=0, description="Max combined Arabic characters per card"
    )

    # Card base settings
    font_size: int = Field(default=55)
    show_translation: bool = Field(default=True)

    # Visit counter
    counter_base_url: str = Field(default="https://api.counterapi.dev/v1")
    counter_namespace: str = Field(default="quran-card-design-karim-app-v1")
    counter_key: str = Field(default="visits")

    # Paths
    output_dir: Path = Field(default=Path("data/cards"))


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
