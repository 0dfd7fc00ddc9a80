"""
API Package - Exports all API routers
"""

from task_tracker.api import tasks

__all__ = ["tasks"]
