"""Status changes from a Kanban drop or the status menu.

Both paths reduce to a `Transition`: the task as it was and the status it
moves to. No transition means nothing to apply and nothing to send.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Union

from trustbyte.client.store import TaskStore, UpdateResult
from trustbyte.schemas.task import Task, TaskStatus


@dataclass(frozen=True)
class DropLocation:
    droppable_id: str  # column id, the status value
    index: int = 0


@dataclass(frozen=True)
class DragResult:
    """What the board reports when a drag ends."""

    draggable_id: str
    source: DropLocation
    destination: Optional[DropLocation] = None  # None: dropped outside any column


@dataclass(frozen=True)
class Transition:
    task: Task
    new_status: TaskStatus

    @property
    def updated(self) -> Task:
        return self.task.with_status(self.new_status)


def column_status(column_id: Union[str, TaskStatus]) -> TaskStatus:
    try:
        return TaskStatus(column_id)
    except ValueError:
        raise ValueError(f"Unknown column: {column_id!r}") from None


def transition_from_selection(task: Task, status: Union[str, TaskStatus]) -> Optional[Transition]:
    new_status = column_status(status)
    if new_status == task.status:
        return None
    return Transition(task, new_status)


def transition_from_drag(tasks: Iterable[Task], result: DragResult) -> Optional[Transition]:
    if result.destination is None:
        return None
    if result.destination.droppable_id == result.source.droppable_id:
        # reorder inside a column, order is not persisted
        return None

    new_status = column_status(result.destination.droppable_id)
    task = next((t for t in tasks if t.id == result.draggable_id), None)
    if task is None:
        return None
    return transition_from_selection(task, new_status)


def apply_transition(store: TaskStore, transition: Transition) -> Task:
    """Write the new status into the store before anything goes over the wire."""
    updated = transition.updated
    if store.update_task(updated) is UpdateResult.NO_MATCH:
        raise KeyError(transition.task.id)
    return updated
