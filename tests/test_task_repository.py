from datetime import datetime

import pytest
from sqlalchemy import text

from task_tracker.core.exceptions import StorageError
from task_tracker.database import Base
from task_tracker.models import Task, TaskPriority, TaskStatus
from task_tracker.repositories import TaskRepository


def test_save_new_task_assigns_id_and_matching_timestamps(repository: TaskRepository) -> None:
    task = repository.save(Task(title="Write report", priority=TaskPriority.HIGH))

    assert task.id is not None
    assert isinstance(task.created_at, datetime)
    assert task.created_at == task.updated_at


def test_find_by_id_returns_saved_row(repository: TaskRepository) -> None:
    saved = repository.save(
        Task(title="Call bank", status=TaskStatus.ESCALATED, due_date=datetime(2026, 11, 2, 8, 15))
    )

    found = repository.find_by_id(saved.id)

    assert found is not None
    assert found.title == "Call bank"
    assert found.status is TaskStatus.ESCALATED
    assert found.due_date == datetime(2026, 11, 2, 8, 15)


def test_find_by_id_miss_returns_none(repository: TaskRepository) -> None:
    assert repository.find_by_id(12345) is None


def test_find_all_returns_every_row(repository: TaskRepository) -> None:
    ids = {repository.save(Task(title=f"task {i}")).id for i in range(3)}

    assert {t.id for t in repository.find_all()} == ids


def test_find_all_on_empty_table(repository: TaskRepository) -> None:
    assert repository.find_all() == []


def test_save_existing_refreshes_updated_at_only(repository: TaskRepository) -> None:
    task = repository.save(Task(title="Draft"))
    task_id, created, updated = task.id, task.created_at, task.updated_at

    task.title = "Final"
    saved = repository.save(task)

    assert saved.id == task_id
    assert saved.title == "Final"
    assert saved.created_at == created
    assert saved.updated_at > updated


def test_save_without_changes_still_bumps_updated_at(repository: TaskRepository) -> None:
    task = repository.save(Task(title="Unchanged"))
    before = task.updated_at

    again = repository.save(task)

    assert again.updated_at > before
    assert again.created_at == task.created_at


def test_enum_columns_store_symbolic_names(repository: TaskRepository, database) -> None:
    task = repository.save(Task(priority=TaskPriority.MEDIUM, status=TaskStatus.IN_PROGRESS))

    with database.engine.connect() as conn:
        row = conn.execute(
            text("SELECT priority, status FROM tasks WHERE id = :id"), {"id": task.id}
        ).one()

    assert tuple(row) == ("MEDIUM", "IN_PROGRESS")


def test_all_fields_may_be_null(repository: TaskRepository) -> None:
    task = repository.save(Task())

    assert task.id is not None
    assert task.title is None
    assert task.priority is None


def test_save_on_missing_table_raises_storage_error(repository: TaskRepository, database) -> None:
    Base.metadata.drop_all(bind=database.engine)

    with pytest.raises(StorageError) as exc_info:
        repository.save(Task(title="Lost"))

    assert exc_info.value.__cause__ is not None


def test_find_all_on_missing_table_raises_storage_error(repository: TaskRepository, database) -> None:
    Base.metadata.drop_all(bind=database.engine)

    with pytest.raises(StorageError):
        repository.find_all()


@pytest.mark.parametrize("task_id", [2 ** 63, -(2 ** 63) - 1, 10 ** 30])
def test_find_by_id_outside_column_range_returns_none(repository: TaskRepository, task_id: int) -> None:
    repository.save(Task(title="only row"))

    assert repository.find_by_id(task_id) is None
