"""
Task Repository - Data access for the tasks table
"""

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.orm.attributes import flag_modified
from typing import List, Optional
import logging

from task_tracker.core.exceptions import StorageError
from task_tracker.models import Task

logger = logging.getLogger(__name__)

# Range of a signed 64-bit integer primary key
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1

class TaskRepository:
    """SQLAlchemy repository for Task rows: save, find_by_id, find_all."""

    def __init__(self, db: Session):
        self.db = db

    def save(self, task: Task) -> Task:
        """
        Insert a task without an id, or update the row matching its id.

        Timestamps are stamped by the Task mapper events: both set on insert,
        updated_at refreshed on every update.

        Returns:
            The persisted Task, reloaded from the database

        Raises:
            StorageError: if the table cannot be written
        """
        try:
            if task.id is None:
                self.db.add(task)
            else:
                task = self.db.merge(task)
                state = inspect(task)
                if state.persistent:
                    if "updated_at" not in state.dict:
                        self.db.refresh(task, ["updated_at"])
                    # Force an UPDATE even when no column changed
                    flag_modified(task, "updated_at")

            self.db.commit()
            self.db.refresh(task)  # Reload generated id and timestamps
            logger.debug(f"💾 Saved task {task.id}")
            return task
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Failed to save task: {str(e)}", exc_info=True)
            raise StorageError("Failed to save task") from e

    def find_by_id(self, task_id: int) -> Optional[Task]:
        """Task with this id, or None when no such row exists"""
        if not MIN_ID <= task_id <= MAX_ID:
            return None  # No row can hold an id outside the column range
        try:
            return self.db.query(Task).filter(Task.id == task_id).first()
        except SQLAlchemyError as e:
            logger.error(f"❌ Failed to load task {task_id}: {str(e)}", exc_info=True)
            raise StorageError(f"Failed to load task {task_id}") from e

    def find_all(self) -> List[Task]:
        """Every task, in whatever order the database returns them"""
        try:
            return self.db.query(Task).all()
        except SQLAlchemyError as e:
            logger.error(f"❌ Failed to list tasks: {str(e)}", exc_info=True)
            raise StorageError("Failed to list tasks") from e
