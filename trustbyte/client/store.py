"""In-memory task collection, the single source of truth for every view."""

import logging
from datetime import datetime
from enum import Enum
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from trustbyte.schemas.task import Task, TaskFields, TaskPriority, TaskStatus, normalize_due_date

logger = logging.getLogger(__name__)

Listener = Callable[["TaskStore"], None]


class UpdateResult(str, Enum):
    UPDATED = "updated"
    NO_MATCH = "no_match"


class TaskDraft(BaseModel):
    """Working copy behind the add/edit form. `id` is set when editing."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(None, alias="_id")
    title: str = ""
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.TODO
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: Optional[datetime] = Field(None, alias="dueDate")

    @field_validator("due_date", mode="before")
    @classmethod
    def parse_due_date(cls, value):
        return normalize_due_date(value)

    @property
    def is_edit(self) -> bool:
        return self.id is not None

    def fields(self) -> TaskFields:
        """Validated editable fields; raises pydantic.ValidationError on a blank title."""
        return TaskFields.model_validate(self.model_dump(exclude={"id"}))

    def to_task(self, owner: Optional[str] = None) -> Task:
        return Task.model_validate({**self.model_dump(), "owner": owner})


class TaskStore:
    """Holds the current user's tasks and the form draft.

    Records are immutable `Task` objects; every change replaces a record, so
    an untouched record stays the same object across mutations of others.
    """

    def __init__(self, tasks: Sequence[Task] = ()):
        self._tasks: List[Task] = []
        self._draft = TaskDraft()
        self._listeners: List[Listener] = []
        if tasks:
            self.set_tasks(tasks)

    # -------------------- reads --------------------
    @property
    def tasks(self) -> Tuple[Task, ...]:
        return tuple(self._tasks)

    @property
    def draft(self) -> TaskDraft:
        return self._draft

    def get(self, task_id: str) -> Optional[Task]:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(tuple(self._tasks))

    def __contains__(self, task_id: object) -> bool:
        return any(task.id == task_id for task in self._tasks)

    # -------------------- collection --------------------
    def set_tasks(self, tasks: Sequence[Task]) -> None:
        """Replace the whole collection, used after a full fetch."""
        unique: List[Task] = []
        seen = set()
        for task in tasks:
            if task.id in seen:
                logger.warning("Dropping duplicate task id %s from fetched list", task.id)
                continue
            seen.add(task.id)
            unique.append(task)
        self._tasks = unique
        self._changed()

    def add_task(self, task: Task) -> bool:
        if not task.id:
            raise ValueError("Only server-confirmed tasks (with an id) can be added")
        if task.id in self:
            logger.debug("Task %s already in store, add ignored", task.id)
            return False
        self._tasks.append(task)
        self._changed()
        return True

    def update_task(self, task: Task) -> UpdateResult:
        for index, current in enumerate(self._tasks):
            if current.id == task.id:
                self._tasks[index] = task
                self._changed()
                return UpdateResult.UPDATED
        logger.debug("No task with id %s to update", task.id)
        return UpdateResult.NO_MATCH

    def remove_task(self, task_id: str) -> bool:
        for index, current in enumerate(self._tasks):
            if current.id == task_id:
                del self._tasks[index]
                self._changed()
                return True
        return False

    # -------------------- draft --------------------
    def set_draft(self, **fields) -> TaskDraft:
        """Merge `fields` into the draft."""
        merged = {**self._draft.model_dump(), **fields}
        self._draft = TaskDraft.model_validate(merged)
        return self._draft

    def edit(self, task: Task) -> TaskDraft:
        """Load an existing task into the form."""
        self._draft = TaskDraft.model_validate(task.model_dump(exclude={"owner"}))
        return self._draft

    def clear_draft(self) -> None:
        self._draft = TaskDraft()

    # -------------------- listeners --------------------
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call `listener` after every collection change; returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _changed(self) -> None:
        for listener in list(self._listeners):
            listener(self)
