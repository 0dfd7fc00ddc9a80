"""
FastAPI Dependencies - Explicit wiring of session, repository and service
"""

from fastapi import Depends, HTTPException, Request
from sqlalchemy.orm import Session
from typing import Generator
import logging

from task_tracker.database import Database
from task_tracker.repositories import TaskRepository
from task_tracker.services import TaskService

logger = logging.getLogger(__name__)

def get_database(request: Request) -> Database:
    """Storage handle attached to the application by create_application()"""
    return request.app.state.database

def get_db(database: Database = Depends(get_database)) -> Generator[Session, None, None]:
    """
    Provide a database session per request.
    Automatically handles session lifecycle and cleanup.
    """
    db = database.session()  # Create new session for this request
    try:
        yield db
    except HTTPException:
        raise  # Not-found and other HTTP responses are not database errors
    except Exception as e:
        logger.error(f"❌ Database error during request: {str(e)}", exc_info=True)
        db.rollback()  # Rollback failed transaction to prevent partial commits
        raise  # Re-raise so the exception handlers build the HTTP response
    finally:
        db.close()  # Always close session (prevents connection leaks)
        logger.debug("✅ Database session closed")

def get_task_repository(db: Session = Depends(get_db)) -> TaskRepository:
    return TaskRepository(db)

def get_task_service(repository: TaskRepository = Depends(get_task_repository)) -> TaskService:
    """
    Usage in endpoints:
        @router.get("")
        def list_tasks(service: TaskService = Depends(get_task_service)):
            ...
    """
    return TaskService(repository)
