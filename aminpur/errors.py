# aminpur/errors.py
from __future__ import annotations


class PortalError(Exception):
    """Base class for dataset sync/load failures."""


class ConfigurationIncomplete(PortalError):
    """Sync or load attempted without the required GitHub settings."""


class RemoteNotFound(PortalError):
    """Remote file does not exist yet. Only used internally for the create path."""


class SyncFailed(PortalError):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class FetchFailed(PortalError):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ParseFailed(PortalError):
    """Content is not JSON or lacks the categories/items collections."""
