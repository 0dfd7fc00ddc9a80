"""
Models Package - Exports all database models for easy importing
"""

# Import models to register them with SQLAlchemy Base
# This ensures create_all() knows about all tables
from task_tracker.models.task import Task, TaskStatus, TaskPriority

__all__ = [
    "Task",
    "TaskStatus",
    "TaskPriority",
]
