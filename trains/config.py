"""Application configuration management."""

import os
from pathlib import Path

from dotenv import load_dotenv

from . import __version__

# Load environment variables from project-level .env if available
PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(dotenv_path=PROJECT_ROOT / ".env")


class Settings:
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = os.getenv("APP_NAME", "trains")
    app_version: str = os.getenv("APP_VERSION", __version__)
    debug: bool = os.getenv("DEBUG", "False") == "True"

    # Database
    # MariaDB deployments use e.g. mysql+pymysql://root@localhost/
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./trains.db")
    database_name: str = os.getenv("DATABASE_NAME", "trains")

    # Console
    timestamp_format: str = os.getenv("TIMESTAMP_FORMAT", "%Y-%m-%d %H:%M")
    prompt_pause_seconds: float = float(os.getenv("PROMPT_PAUSE_SECONDS", "0.5"))

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_format: str = os.getenv("LOG_FORMAT", "text")


# Global settings instance
settings = Settings()
