"""
Exercise Tracker API - Custom Exception Classes.

Exception hierarchy for application error handling.
"""

from typing import Optional


class TrackerException(Exception):
    """
    Base exception class for the exercise tracker.

    All custom exceptions should inherit from this class.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code for the error.
        detail: Additional error details.
    """

    def __init__(
        self,
        message: str = "An error occurred",
        status_code: int = 500,
        detail: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.detail = detail or message
        super().__init__(self.message)


class ValidationError(TrackerException):
    """
    Exception raised for input validation failures.

    Used when:
    - Missing required fields
    - Unparseable dates
    - Non-integer or negative limits
    """

    def __init__(
        self,
        message: str = "Validation error",
        detail: Optional[str] = None
    ):
        super().__init__(
            message=message,
            status_code=400,
            detail=detail
        )


class NotFoundError(TrackerException):
    """
    Exception raised when a referenced user does not exist.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        detail: Optional[str] = None
    ):
        super().__init__(
            message=message,
            status_code=404,
            detail=detail
        )


class PersistenceError(TrackerException):
    """
    Exception raised when the data store rejects a read or write.

    Used when:
    - MongoDB is unreachable
    - A write or query fails server-side
    """

    def __init__(
        self,
        message: str = "Server error",
        detail: Optional[str] = None
    ):
        super().__init__(
            message=message,
            status_code=500,
            detail=detail
        )
