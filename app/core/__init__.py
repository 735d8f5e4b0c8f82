"""Core: config, constants, error registry and application bootstrap.

Single place for settings and shared constants.
"""

from app.core.config import Settings, get_settings
from app.core.error_registry import get_error_definition, get_http_status, is_error_code

__all__ = [
    "Settings",
    "get_error_definition",
    "get_http_status",
    "get_settings",
    "is_error_code",
]
