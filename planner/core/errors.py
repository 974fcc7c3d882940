"""
Application errors for the Planner API.

Every error raised by the services is an ``HTTPException`` carrying a stable
``ErrorCode`` so clients can tell failures apart without parsing messages.
The response body looks like::

    {"detail": {"code": "NOT_FOUND", "message": "Trip not found"}}
"""

from enum import Enum

from fastapi import HTTPException, status


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    NOT_FOUND = "NOT_FOUND"
    INVALID_DATE_RANGE = "INVALID_DATE_RANGE"
    MAIL_DISPATCH_FAILED = "MAIL_DISPATCH_FAILED"


class PlannerError(HTTPException):
    """Base exception for all Planner errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: ErrorCode

    def __init__(self, message: str):
        self.message = message
        super().__init__(
            status_code=self.status_code,
            detail={"code": self.code.value, "message": message},
        )


class NotFoundError(PlannerError):
    """Trip or participant does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    code = ErrorCode.NOT_FOUND


class InvalidDateRangeError(PlannerError):
    """Trip dates are in the past or out of order."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = ErrorCode.INVALID_DATE_RANGE


class MailDispatchError(PlannerError):
    """One or more notification emails could not be delivered."""

    status_code = status.HTTP_502_BAD_GATEWAY
    code = ErrorCode.MAIL_DISPATCH_FAILED
