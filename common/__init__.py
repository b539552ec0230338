"""
Common library for reusable infrastructure components.

- database: Lazily connected async MongoDB handle (Motor)
- utils: Standard responses and HTTP exceptions
- config: Base settings class
"""

from common.database import MongoDB
from common.utils import (
    success_response,
    error_response,
    APIException,
    BadRequestException,
    MethodNotAllowedException,
    InternalServerException,
)
from common.config import BaseAppSettings

__all__ = [
    # Database
    "MongoDB",
    # Utils
    "success_response",
    "error_response",
    "APIException",
    "BadRequestException",
    "MethodNotAllowedException",
    "InternalServerException",
    # Config
    "BaseAppSettings",
]
