"""
Task Model - Represents work items in the system
"""

from sqlalchemy import Column, Integer, String, Text, DateTime, Enum as SQLEnum, event
from datetime import datetime, timedelta, timezone
import enum

from task_tracker.database import Base

def utcnow() -> datetime:
    """Naive UTC timestamp, microsecond precision"""
    return datetime.now(timezone.utc).replace(tzinfo=None)

class TaskStatus(str, enum.Enum):
    """Task status enumeration - tracks task lifecycle"""
    TODO = "TODO"  # Not started
    IN_PROGRESS = "IN_PROGRESS"  # Currently being worked on
    DONE = "DONE"  # Completed
    ESCALATED = "ESCALATED"  # Needs attention from someone else

class TaskPriority(str, enum.Enum):
    """Task priority enumeration - helps with work prioritization"""
    LOW = "LOW"  # Can be done later
    MEDIUM = "MEDIUM"  # Normal priority
    HIGH = "HIGH"  # Urgent

class Task(Base):
    """
    Task table - stores work items and their audit timestamps.
    Only the primary key is NOT NULL; the service does no validation.
    """
    __tablename__ = "tasks"

    # Primary key - assigned by the database on insert
    id = Column(Integer, primary_key=True, autoincrement=True)

    # Task content
    title = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)

    # Task metadata - enums are persisted by symbolic name ("HIGH", "ESCALATED")
    priority = Column(SQLEnum(TaskPriority, name="task_priority"), nullable=True)
    status = Column(SQLEnum(TaskStatus, name="task_status"), nullable=True)
    due_date = Column(DateTime, nullable=True)  # Caller supplied

    # Timestamps - managed by the mapper events below
    created_at = Column(DateTime, nullable=True)
    updated_at = Column(DateTime, nullable=True)

    def __repr__(self):
        """String representation for debugging"""
        return f"<Task {self.id}: {self.title} ({self.status})>"

@event.listens_for(Task, "before_insert")
def stamp_created(mapper, connection, target):
    """First persistence: created_at and updated_at share one clock reading"""
    now = utcnow()
    target.created_at = now
    target.updated_at = now

@event.listens_for(Task, "before_update")
def stamp_updated(mapper, connection, target):
    """Every later persistence moves updated_at strictly forward"""
    now = utcnow()
    if target.updated_at is not None and now <= target.updated_at:
        now = target.updated_at + timedelta(microseconds=1)
    target.updated_at = now
