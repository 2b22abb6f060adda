"""Cached login, the client's equivalent of the `user` local storage key."""

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional, Union

from trustbyte.core.config import settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserProfile:
    name: str
    email: str
    token: str

    @property
    def bearer(self) -> str:
        return f"Bearer {self.token}"


class SessionStorage:
    def __init__(self, path: Union[str, Path, None] = None):
        self.path = Path(path or settings.SESSION_FILE).expanduser()

    def load(self) -> Optional[UserProfile]:
        """Return the cached profile, or None when logged out."""
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return UserProfile(name=data["name"], email=data["email"], token=data["token"])
        except (ValueError, KeyError, TypeError) as e:
            logger.warning(f"Ignoring unreadable session file {self.path}: {e}")
            return None

    def save(self, profile: UserProfile) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(asdict(profile)), encoding="utf-8")

    def clear(self) -> None:
        """Logout"""
        self.path.unlink(missing_ok=True)
