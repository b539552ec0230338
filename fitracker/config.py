"""
Fitracker application settings.

Extends the base settings with Fitracker-specific configuration.
"""

from common.config import BaseAppSettings


class Settings(BaseAppSettings):
    """Fitracker-specific settings."""

    # ==========================================================================
    # Collections
    # ==========================================================================
    PROGRESS_COLLECTION: str = "progress"

    # ==========================================================================
    # Client
    # ==========================================================================
    # Base URL the view model talks to
    FITRACKER_API_URL: str = "http://localhost:8000"
    # Seconds before an API call from the view model gives up
    FITRACKER_API_TIMEOUT: float = 10.0


# Global settings instance
settings = Settings()
