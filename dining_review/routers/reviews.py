"""
Review endpoints.

  GET /reviews/{id}                          — any review, any status
  GET /admin/reviews                         — moderation queue (PENDING only)
  PUT /admin/reviews/{id}/status/{approve}   — approve (true) or reject (false)
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from dining_review.database import SQL_INT_MAX, SQL_INT_MIN, get_db
from dining_review.routers.errors import http_error
from dining_review.schemas.review import ReviewRead
from dining_review.services import moderation
from dining_review.services.errors import DiningReviewError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reviews", tags=["reviews"])
admin_router = APIRouter(prefix="/admin/reviews", tags=["admin"])


@router.get("/{review_id}", response_model=ReviewRead)
async def get_review(
    review_id: int = Path(..., ge=SQL_INT_MIN, le=SQL_INT_MAX),
    db: AsyncSession = Depends(get_db),
) -> ReviewRead:
    try:
        review = await moderation.get_review(db, review_id)
    except DiningReviewError as exc:
        raise http_error(exc) from exc
    return ReviewRead.model_validate(review)


@admin_router.get("", response_model=list[ReviewRead])
async def list_pending_reviews(db: AsyncSession = Depends(get_db)) -> list[ReviewRead]:
    """Every review awaiting moderation."""
    return [ReviewRead.model_validate(r) for r in await moderation.list_pending(db)]


@admin_router.put("/{review_id}/status/{approve}", response_model=ReviewRead)
async def moderate_review(
    review_id: int = Path(..., ge=SQL_INT_MIN, le=SQL_INT_MAX),
    approve: bool = Path(...),
    db: AsyncSession = Depends(get_db),
) -> ReviewRead:
    """
    Move a PENDING review to APPROVED or REJECTED.
    Approval recomputes the restaurant's ratings in the same transaction.
    404 if the review does not exist, 400 if it was already moderated.
    """
    try:
        review = await moderation.moderate_review(db, review_id, approve)
    except DiningReviewError as exc:
        raise http_error(exc) from exc
    return ReviewRead.model_validate(review)
