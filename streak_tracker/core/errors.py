# streak_tracker/core/errors.py
from typing import Optional


class StreakTrackerError(Exception):
    status_code = 500
    code = "error"

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail or self.__class__.__doc__ or self.code
        super().__init__(self.detail)


class ValidationError(StreakTrackerError):
    """Invalid input."""
    status_code = 400
    code = "validation_error"


class NotFoundError(StreakTrackerError):
    """Record not found."""
    status_code = 404
    code = "not_found"


class AlreadyCompletedError(StreakTrackerError):
    """Already completed today."""
    status_code = 400
    code = "already_completed"


class StorageError(StreakTrackerError):
    """Storage is unavailable."""
    status_code = 500
    code = "storage_error"
