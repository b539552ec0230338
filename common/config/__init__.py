"""
Configuration module - Environment-driven settings shared by the API and
the client scripts.
"""

from common.config.base_settings import BaseAppSettings

__all__ = ["BaseAppSettings"]
