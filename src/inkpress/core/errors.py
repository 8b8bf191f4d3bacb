"""Error taxonomy shared by services and the HTTP layer."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Tagged failure kinds raised by the blog services."""

    VALIDATION_FAILED = "validation_failed"
    DUPLICATE_SUBMISSION = "duplicate_submission"
    NOT_FOUND = "not_found"
    EXTERNAL_SERVICE_FAILURE = "external_service_failure"
    AUTHORIZATION_FAILED = "authorization_failed"


class BlogError(RuntimeError):
    """Base exception carrying an :class:`ErrorKind` and optional context.

    Subclasses set ``kind``, which the HTTP layer maps to a status code.

    Args:
        message: Human-readable explanation shown to the visitor.
        field: Form field or entity the failure relates to, if any.
    """

    kind: ErrorKind = ErrorKind.VALIDATION_FAILED

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, field={self.field!r})"


class ValidationFailedError(BlogError):
    """Raised when a form field does not match its rule."""

    kind = ErrorKind.VALIDATION_FAILED


class DuplicateSubmissionError(BlogError):
    """Raised when an identical comment or reply already exists in scope."""

    kind = ErrorKind.DUPLICATE_SUBMISSION


class NotFoundError(BlogError):
    """Raised when a post or comment identifier does not resolve."""

    kind = ErrorKind.NOT_FOUND


class ExternalServiceError(BlogError):
    """Raised when the mail relay, verification API or file store fails."""

    kind = ErrorKind.EXTERNAL_SERVICE_FAILURE


class AuthorizationFailedError(BlogError):
    """Raised when the admin credential does not match."""

    kind = ErrorKind.AUTHORIZATION_FAILED
