"""Register, login and logout against the API, with the session cache."""

import logging
from typing import Optional

from trustbyte.client.exceptions import SyncError
from trustbyte.client.notify import Notifier
from trustbyte.client.session import SessionStorage, UserProfile
from trustbyte.client.store import TaskStore
from trustbyte.client.sync import SyncClient

logger = logging.getLogger(__name__)


class AuthFlow:
    def __init__(self, sync: SyncClient, storage: SessionStorage, notifier: Notifier):
        self.sync = sync
        self.storage = storage
        self.notifier = notifier

    @property
    def current_user(self) -> Optional[UserProfile]:
        return self.storage.load()

    def register(self, name: str, email: str, password: str, confirm_password: str) -> bool:
        if password != confirm_password:
            self.notifier.error("Error", "Passwords do not match")
            return False
        try:
            self.sync.register(name, email, password)
        except SyncError as e:
            self.notifier.error("Error", e.message)
            return False
        self.notifier.notify("Account Created")
        return True

    def login(self, email: str, password: str, store: Optional[TaskStore] = None) -> Optional[UserProfile]:
        """Log in and cache the profile; `store` is emptied so it never mixes users."""
        try:
            profile = self.sync.login(email, password)
        except SyncError as e:
            self.notifier.error("Error", e.message)
            return None
        if store is not None:
            store.set_tasks([])
            store.clear_draft()
        self.storage.save(profile)
        self.notifier.notify("Login Successful", f"Welcome back, {profile.name}")
        return profile

    def logout(self, store: Optional[TaskStore] = None) -> None:
        self.storage.clear()
        if store is not None:
            store.set_tasks([])
        self.notifier.notify("Logged out")
