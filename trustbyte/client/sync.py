"""HTTP client for the task API.

Every call sends exactly one request and either returns the parsed result or
raises `SyncError` carrying the server's message. Nothing here touches the
store; the board decides what to do with results and failures.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from trustbyte.client.exceptions import SyncError
from trustbyte.client.session import UserProfile
from trustbyte.core.config import settings
from trustbyte.schemas.task import Task, TaskFields

logger = logging.getLogger(__name__)


def normalize_base(value: Optional[str]) -> str:
    """Strip trailing slashes; unset-looking values mean same-origin ("")."""
    if not value or value in ("undefined", "null") or not value.strip():
        return ""
    return value.strip().rstrip("/")


class SyncClient:
    def __init__(self, base_url: Optional[str] = None, session: Any = None, timeout: Optional[float] = None):
        """
        Args:
            base_url: API root, e.g. http://localhost:8081
            session: object with a requests-style `post`; a new requests.Session by default
            timeout: seconds per request
        """
        self.base_url = normalize_base(settings.BASE_URL if base_url is None else base_url)
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout if timeout is not None else settings.HTTP_TIMEOUT

    def url(self, path: str) -> str:
        return f"{self.base_url}{path if path.startswith('/') else '/' + path}"

    # -------------------- auth --------------------
    def register(self, name: str, email: str, password: str) -> str:
        data = self._post("/auth/register", {"name": name, "email": email, "password": password})
        return data.get("message", "User registered successfully")

    def login(self, email: str, password: str) -> UserProfile:
        data = self._post("/auth/login", {"email": email, "password": password})
        return UserProfile(name=data["name"], email=data["email"], token=data["jwtToken"])

    # -------------------- tasks --------------------
    def fetch_tasks(self, profile: UserProfile) -> List[Task]:
        # the list endpoint takes the raw token, without the Bearer prefix
        data = self._post(
            "/api/alltasks",
            {"user": profile.email},
            headers={"Authorization": profile.token},
        )
        return [Task.model_validate(item) for item in data.get("tasks") or []]

    def add_task(self, profile: UserProfile, fields: TaskFields) -> Task:
        body = fields.model_dump(mode="json", by_alias=True)
        body["user"] = profile.email
        data = self._post("/api/addtask", body, headers={"Authorization": profile.bearer})
        return Task.model_validate(data["task"])

    def update_task(self, task: Task) -> None:
        # the echoed task is not returned: local state is already ahead of it
        self._post("/api/updatetask", task.to_wire())

    def delete_task(self, profile: UserProfile, task_id: str) -> None:
        self._post("/api/deletetask", {"_id": task_id}, headers={"Authorization": profile.bearer})

    # -------------------- transport --------------------
    def _post(self, path: str, body: Dict[str, Any], headers: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        url = self.url(path)
        try:
            response = self.session.post(
                url,
                json=body,
                headers={"Content-Type": "application/json", **(headers or {})},
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"POST {path} failed: {e}")
            raise SyncError(f"Network error: {e}") from e

        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        if response.status_code >= 400 or data.get("success") is False:
            message = data.get("message") or f"Request failed with status {response.status_code}"
            logger.error(f"POST {path} -> {response.status_code}: {message}")
            raise SyncError(message, response.status_code)

        return data
