"""Translation of service-layer errors into HTTP responses."""

from __future__ import annotations

from fastapi import HTTPException, status

from dining_review.services.errors import DiningReviewError, NotFoundError


def http_error(exc: DiningReviewError) -> HTTPException:
    """NotFoundError → 404; every other domain error → 400."""
    code = (
        status.HTTP_404_NOT_FOUND
        if isinstance(exc, NotFoundError)
        else status.HTTP_400_BAD_REQUEST
    )
    return HTTPException(
        status_code=code,
        detail=exc.message,
        headers={"X-Error-Code": exc.code},
    )
