"""
Task Tracker Package

Usage:
    from task_tracker.models import Task
    from task_tracker.core.config import settings
"""

__version__ = "1.0.0"  # Application version
