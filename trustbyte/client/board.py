"""Wires store, transitions, projections and the sync client together.

Store writes happen synchronously, before the request for them is handed to
`dispatch`. A failed request leaves the local change in place and only raises
an error notification; the next `load()` brings the store back in line with
the server.
"""

import logging
from typing import Callable, Dict, List, Optional, Union

from pydantic import ValidationError

from trustbyte.client.exceptions import SyncError
from trustbyte.client.notify import Notifier
from trustbyte.client.projections import ListQuery, group_by_status, process_tasks
from trustbyte.client.session import UserProfile
from trustbyte.client.store import TaskStore
from trustbyte.client.sync import SyncClient
from trustbyte.client.transitions import (
    DragResult,
    apply_transition,
    transition_from_drag,
    transition_from_selection,
)
from trustbyte.schemas.task import Task, TaskStatus

logger = logging.getLogger(__name__)

Job = Callable[[], None]


def run_now(job: Job) -> None:
    job()


class TaskBoard:
    def __init__(
        self,
        store: TaskStore,
        sync: SyncClient,
        notifier: Notifier,
        profile: UserProfile,
        dispatch: Callable[[Job], None] = run_now,
    ):
        self.store = store
        self.sync = sync
        self.notifier = notifier
        self.profile = profile
        self.dispatch = dispatch

    # -------------------- loading --------------------
    def load(self) -> bool:
        """Rebuild the store from the server's full list."""
        try:
            tasks = self.sync.fetch_tasks(self.profile)
        except SyncError as e:
            self.notifier.error("Error", e.message)
            return False
        self.store.set_tasks(tasks)
        logger.info("Loaded %d tasks for %s", len(tasks), self.profile.email)
        return True

    # -------------------- status changes --------------------
    def on_drag_end(self, result: DragResult) -> Optional[Task]:
        transition = transition_from_drag(self.store.tasks, result)
        if transition is None:
            return None
        return self._commit(apply_transition(self.store, transition))

    def select_status(self, task_id: str, status: Union[str, TaskStatus]) -> Optional[Task]:
        task = self.store.get(task_id)
        if task is None:
            logger.debug("Status change for unknown task %s ignored", task_id)
            return None
        transition = transition_from_selection(task, status)
        if transition is None:
            return None
        return self._commit(apply_transition(self.store, transition))

    def _commit(self, task: Task) -> Task:
        self.dispatch(lambda: self._push_status(task))
        return task

    def _push_status(self, task: Task) -> None:
        try:
            self.sync.update_task(task)
        except SyncError as e:
            if task.id not in self.store:
                return
            # local state stays optimistic until the next load()
            logger.warning("Task %s diverged from server: %s", task.id, e.message)
            self.notifier.error("Error", e.message)
            return
        if task.id not in self.store:
            return
        self.notifier.notify("Task Updated", f"Status changed to {task.status.value}")

    # -------------------- add / edit form --------------------
    def submit_draft(self) -> Optional[Task]:
        draft = self.store.draft
        try:
            fields = draft.fields()
        except ValidationError:
            self.notifier.error("Error", "Title is required")
            return None

        try:
            if draft.is_edit:
                task = draft.to_task(owner=self.profile.email)
                self.sync.update_task(task)
                self.store.update_task(task)
                self.notifier.notify("Task Updated", "Your changes have been saved.")
            else:
                task = self.sync.add_task(self.profile, fields)
                self.store.add_task(task)
                self.notifier.notify("Task Added", "The task was created successfully.")
        except SyncError as e:
            self.notifier.error("Something went wrong", e.message)
            return None

        self.store.clear_draft()
        return task

    # -------------------- delete --------------------
    def delete(self, task_id: str) -> bool:
        if not self.store.remove_task(task_id):
            return False

        def push() -> None:
            try:
                self.sync.delete_task(self.profile, task_id)
            except SyncError as e:
                self.notifier.error("Error", e.message)
                return
            self.notifier.notify("Task Deleted", "The task was removed.")

        self.dispatch(push)
        return True

    # -------------------- views --------------------
    def kanban(self) -> Dict[TaskStatus, List[Task]]:
        return group_by_status(self.store.tasks)

    def task_list(self, query: Optional[ListQuery] = None) -> List[Task]:
        return process_tasks(self.store.tasks, query)
