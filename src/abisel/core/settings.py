"""Configuration settings module."""

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import ConfigDict
from pydantic_settings import BaseSettings

from abisel.core.constants import ENV_PATH
from abisel.core.utils import singleton


@singleton
class Settings(BaseSettings):
    """Application Settings loaded from environment and the abisel.env file."""

    signature: Optional[str] = None
    log_level: str = "WARNING"
    log_file: Optional[Path] = None

    model_config = ConfigDict(
        env_prefix="ABISEL_",
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def __init__(self, **values):
        """Initialize Settings and load environment variables."""
        load_dotenv(ENV_PATH, override=False)
        super().__init__(**values)


# Global settings instance
settings = Settings()
