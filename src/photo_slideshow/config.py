"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

BASE_DIR = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    data_file: Path = BASE_DIR / "data.json"
    openapi_file: Path = BASE_DIR / "openapi.json"
    assets_dir: Path = BASE_DIR / "public" / "assets"
    persist_settings: bool = False
    cors_allow_origins: list[str] = ["*"]
    backend_base_url: str = "http://localhost:3000"
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="SLIDESHOW_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
