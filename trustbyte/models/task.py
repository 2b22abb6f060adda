"""Task model"""

import uuid
from sqlalchemy import Column, Integer, String, DateTime, Enum, ForeignKey
from datetime import datetime
from trustbyte.core.database import Base
from trustbyte.schemas.task import TaskStatus, TaskPriority


def _new_task_id() -> str:
    return uuid.uuid4().hex


class Task(Base):
    __tablename__ = "tasks"

    # pk keeps insertion order, id is the opaque public identifier
    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(32), unique=True, nullable=False, index=True, default=_new_task_id)
    owner = Column(String, ForeignKey("users.email"), nullable=False, index=True)

    title = Column(String, nullable=False)
    description = Column(String, nullable=True)
    due_date = Column(DateTime, nullable=True, index=True)
    priority = Column(
        Enum(TaskPriority, values_callable=lambda e: [m.value for m in e], native_enum=False),
        nullable=False,
        default=TaskPriority.MEDIUM,
    )
    status = Column(
        Enum(TaskStatus, values_callable=lambda e: [m.value for m in e], native_enum=False),
        nullable=False,
        default=TaskStatus.TODO,
    )

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
