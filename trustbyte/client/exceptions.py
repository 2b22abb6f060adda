"""Client-side errors."""

from typing import Optional


class TrustByteClientError(Exception):
    """Base client error"""

    pass


class SyncError(TrustByteClientError):
    """A request to the task API failed or was rejected."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
