"""
Error taxonomy for the Jobby API.

Every error raised by a route handler or dependency is a JobbyError subclass.
The handlers registered by main.create_app() turn them into JSON bodies of the
form {"error": <message>, "details": <optional>}.
"""

from typing import Any, Optional

from fastapi import status


class JobbyError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Something went wrong"

    def __init__(self, message: Optional[str] = None, details: Any = None):
        self.message = message or self.message
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> dict:
        body = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class BadRequestError(JobbyError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Bad request"


class ConflictError(JobbyError):
    # Duplicate signups are reported as 400, which is what the web client expects
    status_code = status.HTTP_400_BAD_REQUEST
    message = "User already exists"


class InvalidCredentialsError(JobbyError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid credentials"


class TokenMissingError(JobbyError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Token missing"


class InvalidTokenError(JobbyError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid token"


class NotFoundError(JobbyError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class ServerMisconfiguredError(JobbyError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Server is misconfigured"


class InternalError(JobbyError):
    """Wraps an unexpected failure in the store layer."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Something went wrong"
