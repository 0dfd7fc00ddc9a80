"""
Repositories Package - Database access objects
"""

from task_tracker.repositories.task_repository import TaskRepository

__all__ = ["TaskRepository"]
