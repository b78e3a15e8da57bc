"""
Global Configuration Settings

Centralized configuration for the chartcanvas geometry engine and service.
Values come from the environment (optionally a ``.env`` file).
"""

from typing import List, Optional
import logging
import os

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_NUMBER_FORMAT = "#,##0"
DEFAULT_HISTOGRAM_TITLE = "Data"
DEFAULT_CURVE_TENSION = 0.3

# Colors handed out round-robin to grouped histogram series
SERIES_PALETTE = ["blue", "red", "green", "orange", "purple", "brown", "pink", "gray"]


class Settings(BaseSettings):
    # Environment
    environment: str = os.getenv("ENVIRONMENT", "development")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Loader settings; None disables the client timeout
    fetch_timeout: Optional[float] = None

    # Geometry defaults
    default_number_format: str = DEFAULT_NUMBER_FORMAT
    default_histogram_title: str = DEFAULT_HISTOGRAM_TITLE
    curve_tension: float = DEFAULT_CURVE_TENSION

    # Service settings (comma separated origins)
    allowed_origins: str = os.getenv("ALLOWED_ORIGINS", "*")

    # Hosts the geometry service may fetch from (comma separated); empty allows none
    allowed_source_hosts: str = os.getenv("ALLOWED_SOURCE_HOSTS", "")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def origins(self) -> List[str]:
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]

    @property
    def source_hosts(self) -> List[str]:
        return [host.strip().lower() for host in self.allowed_source_hosts.split(",") if host.strip()]

    def is_development_mode(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() in ("dev", "development", "local")

    def get_summary(self) -> dict:
        """Get a summary of current configuration."""
        return {
            "environment": self.environment,
            "log_level": self.log_level,
            "fetch_timeout": self.fetch_timeout,
            "default_number_format": self.default_number_format,
            "curve_tension": self.curve_tension,
            "development_mode": self.is_development_mode(),
        }


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
        logger.debug(f"Loaded settings: {_settings.get_summary()}")
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
