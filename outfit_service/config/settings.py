"""
Settings Module (v1.0.0)
Centralized configuration from environment variables.
"""
import os
import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_LOCATION = "New York"
OPEN_METEO_GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
OPEN_METEO_FORECAST_URL = "https://api.open-meteo.com/v1/forecast"


@dataclass
class Settings:
    """Application settings from environment variables."""

    # Request defaults
    default_location: str = DEFAULT_LOCATION

    # Weather provider (Open-Meteo, no API key required)
    geocoding_url: str = OPEN_METEO_GEOCODING_URL
    forecast_url: str = OPEN_METEO_FORECAST_URL
    http_timeout: float = 10.0

    # Observability
    logging_enabled: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables."""
        return cls(
            default_location=os.getenv("OUTFIT_DEFAULT_LOCATION", DEFAULT_LOCATION).strip() or DEFAULT_LOCATION,

            geocoding_url=os.getenv("OUTFIT_GEOCODING_URL", OPEN_METEO_GEOCODING_URL),
            forecast_url=os.getenv("OUTFIT_FORECAST_URL", OPEN_METEO_FORECAST_URL),
            http_timeout=float(os.getenv("OUTFIT_HTTP_TIMEOUT", "10.0")),

            logging_enabled=os.getenv("OUTFIT_LOGGING_ENABLED", "true").lower() == "true",
        )

    def to_dict(self) -> dict:
        """Export settings as dict."""
        return {
            "default_location": self.default_location,
            "geocoding_url": self.geocoding_url,
            "forecast_url": self.forecast_url,
            "http_timeout": self.http_timeout,
            "logging_enabled": self.logging_enabled,
        }


def get_settings() -> Settings:
    """Get application settings (cached singleton)."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
        logger.info(f"Settings loaded: {_settings.to_dict()}")
    return _settings


def reload_settings() -> Settings:
    """Force reload settings from environment."""
    global _settings
    _settings = Settings.from_env()
    logger.info(f"Settings reloaded: {_settings.to_dict()}")
    return _settings


# Singleton instance
_settings: Optional[Settings] = None
