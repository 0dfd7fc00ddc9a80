"""
Tasks API - Create, list, get and update tasks
"""

from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
import logging

from task_tracker.schemas import TaskCreate, TaskUpdate, TaskResponse
from task_tracker.services import TaskService
from task_tracker.core.dependencies import get_task_service

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    task_data: TaskCreate,
    service: TaskService = Depends(get_task_service)
):
    """
    Create a new task.

    Any id or timestamps in the body are ignored - storage assigns them.

    Returns:
        TaskResponse with id, createdAt and updatedAt filled in
    """
    logger.info(f"➡️  Create task request: {task_data.title!r}")
    task = service.create(task_data)
    logger.info(f"✅ Task created: {task.id}")
    return TaskResponse.model_validate(task)

@router.get("", response_model=List[TaskResponse])
def list_tasks(service: TaskService = Depends(get_task_service)):
    """Get all tasks, in no particular order"""
    tasks = service.list_all()
    logger.info(f"✅ Returning {len(tasks)} tasks")
    return [TaskResponse.model_validate(task) for task in tasks]

@router.get("/{task_id}", response_model=TaskResponse)
def get_task(task_id: int, service: TaskService = Depends(get_task_service)):
    """
    Get task by ID.

    Raises:
        404: Task not found
    """
    task = service.get_by_id(task_id)
    if task is None:
        logger.warning(f"⚠️  Task {task_id} not found")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Task with ID {task_id} not found"
        )
    return TaskResponse.model_validate(task)

@router.put("/{task_id}", response_model=TaskResponse)
def update_task(
    task_id: int,
    task_data: TaskUpdate,
    service: TaskService = Depends(get_task_service)
):
    """
    Replace a task's title, description, priority, status and dueDate.

    Fields missing from the body are cleared (full replace).

    Raises:
        404: Task not found - nothing is written
    """
    logger.info(f"➡️  Update task {task_id} request")
    task = service.update(task_id, task_data)
    if task is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Task with ID {task_id} not found"
        )
    logger.info(f"✅ Task {task_id} updated")
    return TaskResponse.model_validate(task)
