"""
Core Package - Configuration and errors

IMPORTANT: Only import config and exceptions here.
Dependencies must be imported directly to avoid circular imports.
"""

from task_tracker.core.config import settings, get_settings, validate_config, is_production
from task_tracker.core.exceptions import StorageError

__all__ = [
    "settings",
    "get_settings",
    "validate_config",
    "is_production",
    "StorageError",
]
