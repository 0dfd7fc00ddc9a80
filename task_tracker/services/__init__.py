"""
Services Package - Task operations
"""

from task_tracker.services.task_service import TaskService

__all__ = ["TaskService"]
