"""Toast-style notifications raised by the board."""

import logging
from dataclasses import dataclass
from typing import List, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notification:
    title: str
    description: Optional[str] = None
    variant: str = "default"  # "default" or "destructive"

    @property
    def is_error(self) -> bool:
        return self.variant == "destructive"


class Notifier:
    """Collects notifications in the order they were raised."""

    def __init__(self):
        self.history: List[Notification] = []

    def notify(self, title: str, description: Optional[str] = None) -> Notification:
        return self._push(Notification(title, description))

    def error(self, title: str, description: Optional[str] = None) -> Notification:
        return self._push(Notification(title, description, variant="destructive"))

    def _push(self, notification: Notification) -> Notification:
        if notification.is_error:
            logger.warning("%s: %s", notification.title, notification.description)
        else:
            logger.info("%s: %s", notification.title, notification.description)
        self.history.append(notification)
        return notification

    @property
    def last(self) -> Optional[Notification]:
        return self.history[-1] if self.history else None
