"""Application configuration loaded from environment variables."""

from datetime import date
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """All configuration is loaded from environment variables (or .env file)."""

    # --- App ---
    app_name: str = "Luna"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    environment: str = "development"  # development | staging | production

    # --- Time ---
    timezone: str = "UTC"  # IANA name; defines the local day for all day math

    # --- Demo simulation ---
    simulation_enabled: bool = False
    simulation_date: date | None = None

    # --- Chart ---
    chart_window_days: int = 28

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
