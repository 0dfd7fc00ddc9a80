"""
Task Schemas - Pydantic models for task operations
"""

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime, timezone

from task_tracker.models.task import TaskStatus, TaskPriority

# DO NOT import from task_tracker.schemas here - causes circular import

class TaskBase(BaseModel):
    """
    The five caller-writable task fields.
    JSON uses camelCase names (dueDate); snake_case is accepted on input too.
    Unknown keys such as id or createdAt are ignored.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[TaskPriority] = None  # Symbolic name: "LOW", "MEDIUM", "HIGH"
    status: Optional[TaskStatus] = None  # Symbolic name: "TODO", ..., "ESCALATED"
    due_date: Optional[datetime] = None  # ISO-8601 date-time

    @field_validator("due_date")
    @classmethod
    def normalize_due_date(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Offset-aware values are converted to naive UTC, the stored convention"""
        if v is not None and v.tzinfo is not None:
            return v.astimezone(timezone.utc).replace(tzinfo=None)
        return v

class TaskCreate(TaskBase):
    """Schema for creating new task"""

class TaskUpdate(TaskBase):
    """
    Schema for replacing a task's writable fields.
    Full replace: a field left out of the body is written as null.
    """

class TaskResponse(TaskBase):
    """Schema for task data in responses"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int  # Assigned by storage
    created_at: Optional[datetime] = None  # Set once on insert
    updated_at: Optional[datetime] = None  # Refreshed on every save
