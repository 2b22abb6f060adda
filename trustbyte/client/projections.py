"""Read-only views over the task list: Kanban columns and the filtered list."""

import locale
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, Iterable, List, Optional, Union

from trustbyte.schemas.task import PRIORITY_RANK, Task, TaskPriority, TaskStatus

ALL = "all"


class SortKey(str, Enum):
    NONE = "none"
    TITLE = "title"
    PRIORITY = "priority"
    DUE_DATE = "dueDate"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


StatusFilter = Union[TaskStatus, str]
PriorityFilter = Union[TaskPriority, str]


def group_by_status(tasks: Iterable[Task]) -> Dict[TaskStatus, List[Task]]:
    """Kanban columns in board order; each column keeps list order."""
    columns: Dict[TaskStatus, List[Task]] = {status: [] for status in TaskStatus}
    for task in tasks:
        columns[task.status].append(task)
    return columns


def _selector(value, enum_cls):
    if value is None or value == ALL:
        return None
    return enum_cls(value)


def filter_tasks(
    tasks: Iterable[Task],
    status: StatusFilter = ALL,
    priority: PriorityFilter = ALL,
) -> List[Task]:
    wanted_status = _selector(status, TaskStatus)
    wanted_priority = _selector(priority, TaskPriority)
    return [
        task for task in tasks
        if (wanted_status is None or task.status == wanted_status)
        and (wanted_priority is None or task.priority == wanted_priority)
    ]


def _title_key(task: Task):
    # strxfrm refuses NUL, titles stored before validation may still carry one
    title = task.title.replace("\x00", "")
    return (locale.strxfrm(title.casefold()), locale.strxfrm(title), task.title)


def sort_tasks(
    tasks: Iterable[Task],
    key: Union[SortKey, str] = SortKey.NONE,
    direction: Union[SortDirection, str] = SortDirection.ASC,
) -> List[Task]:
    key = SortKey(key)
    descending = SortDirection(direction) is SortDirection.DESC
    tasks = list(tasks)

    if key is SortKey.NONE:
        return tasks
    if key is SortKey.TITLE:
        return sorted(tasks, key=_title_key, reverse=descending)
    if key is SortKey.PRIORITY:
        return sorted(tasks, key=lambda t: PRIORITY_RANK[t.priority], reverse=descending)

    # undated counts as the largest value: last ascending, first descending
    return sorted(
        tasks,
        key=lambda t: (t.due_date is None, t.due_date or datetime.min),
        reverse=descending,
    )


@dataclass(frozen=True)
class ListQuery:
    """Filter and sort selectors of the task list view."""

    status: StatusFilter = ALL
    priority: PriorityFilter = ALL
    sort_by: SortKey = SortKey.NONE
    direction: SortDirection = SortDirection.ASC

    @property
    def has_active_filters(self) -> bool:
        return self.status != ALL or self.priority != ALL or SortKey(self.sort_by) is not SortKey.NONE

    def cleared(self) -> "ListQuery":
        # direction is kept, like the list view's reset button
        return replace(self, status=ALL, priority=ALL, sort_by=SortKey.NONE)


def process_tasks(tasks: Iterable[Task], query: Optional[ListQuery] = None) -> List[Task]:
    query = query or ListQuery()
    filtered = filter_tasks(tasks, query.status, query.priority)
    return sort_tasks(filtered, query.sort_by, query.direction)


def is_overdue(task: Task, now: Optional[datetime] = None) -> bool:
    if task.due_date is None or task.status == TaskStatus.COMPLETED:
        return False
    # due dates are naive UTC
    if now is None:
        now = datetime.now(timezone.utc).replace(tzinfo=None)
    return task.due_date < now
