"""Task service"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from trustbyte.models.task import Task
from trustbyte.schemas.task import TaskFields, TaskUpdate

logger = logging.getLogger(__name__)


def list_tasks(db: Session, owner: str) -> List[Task]:
    # insertion order, the board relies on it to avoid reshuffling columns
    return (
        db.query(Task)
        .filter(Task.owner == owner)
        .order_by(Task.pk.asc())
        .all()
    )


def get_task(db: Session, task_id: str) -> Optional[Task]:
    return db.query(Task).filter(Task.id == task_id).first()


def create_task(db: Session, owner: str, data: TaskFields) -> Task:
    task = Task(
        owner=owner,
        title=data.title,
        description=data.description,
        due_date=data.due_date,
        priority=data.priority,
        status=data.status,
    )
    db.add(task)
    db.commit()
    db.refresh(task)
    logger.info("Task %s created for %s", task.id, owner)
    return task


def update_task(db: Session, data: TaskUpdate) -> Optional[Task]:
    task = get_task(db, data.id)
    if task is None:
        return None

    update_data = data.model_dump(exclude={"id"}, exclude_unset=True)
    for field, value in update_data.items():
        setattr(task, field, value)

    db.commit()
    db.refresh(task)
    logger.info("Task %s updated (status=%s)", task.id, task.status.value)
    return task


def delete_task(db: Session, owner: str, task_id: str) -> bool:
    task = db.query(Task).filter(Task.id == task_id, Task.owner == owner).first()
    if task is None:
        return False
    db.delete(task)
    db.commit()
    logger.info("Task %s deleted", task_id)
    return True
