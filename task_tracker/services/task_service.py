"""
Task Service - Task operations on top of the repository
"""

from typing import List, Optional
import logging

from task_tracker.models import Task
from task_tracker.repositories import TaskRepository
from task_tracker.schemas.task import TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)

# Fields a caller may write; everything else is owned by storage
WRITABLE_FIELDS = ("title", "description", "priority", "status", "due_date")

class TaskService:
    """
    Create, list, get and update tasks.

    Storage errors from the repository are not caught here.
    """

    def __init__(self, repository: TaskRepository):
        self.repository = repository

    def create(self, data: TaskCreate) -> Task:
        task = Task(**{field: getattr(data, field) for field in WRITABLE_FIELDS})
        return self.repository.save(task)

    def list_all(self) -> List[Task]:
        return self.repository.find_all()

    def get_by_id(self, task_id: int) -> Optional[Task]:
        return self.repository.find_by_id(task_id)

    def update(self, task_id: int, data: TaskUpdate) -> Optional[Task]:
        """
        Replace the writable fields of an existing task.

        Full replace, not a patch: None values in data are written as NULL.
        id and created_at are kept; updated_at is refreshed on save.

        Returns:
            The saved Task, or None (without writing) when task_id does not exist
        """
        existing = self.repository.find_by_id(task_id)
        if existing is None:
            logger.info(f"⚠️  Task {task_id} not found - nothing updated")
            return None

        for field in WRITABLE_FIELDS:
            setattr(existing, field, getattr(data, field))

        return self.repository.save(existing)
