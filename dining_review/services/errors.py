"""
Domain errors raised by the service layer.

Routers translate these into HTTP responses; they never reach the client
as unhandled exceptions.
"""

from __future__ import annotations


class DiningReviewError(Exception):
    """Base class. `code` is surfaced to clients in the X-Error-Code header."""

    code = "DINING_REVIEW_ERROR"

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class NotFoundError(DiningReviewError):
    """The referenced user, review or restaurant does not exist."""

    code = "NOT_FOUND"


class ConflictError(DiningReviewError):
    """
    The request conflicts with stored state: duplicate key, author mismatch,
    dangling reference, or moderating an already-moderated review.
    """

    code = "CONFLICT"
