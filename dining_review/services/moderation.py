"""
Review submission and moderation.

State machine:
  PENDING ──approve──▶ APPROVED   (terminal, triggers rating aggregation)
     └─────reject────▶ REJECTED   (terminal)

A review leaves PENDING exactly once; any further moderation attempt is a
conflict and leaves the stored status untouched.
"""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from dining_review.models import Review, ReviewStatus
from dining_review.repositories import (
    RestaurantRepository,
    ReviewRepository,
    UserRepository,
)
from dining_review.schemas.review import ReviewCreate
from dining_review.services.errors import ConflictError, NotFoundError
from dining_review.services.rating_aggregator import update_restaurant_rating

logger = logging.getLogger(__name__)


async def submit_review(db: AsyncSession, user_name: str, body: ReviewCreate) -> Review:
    """
    Store a new PENDING review on behalf of `user_name`.

    Checked in order, each failure a ConflictError:
      1. the user exists
      2. the user is the review's author
      3. the reviewed restaurant exists
    Ratings are not recomputed here; only approved reviews count.
    """
    user = await UserRepository(db).find_by_name(user_name)
    if user is None:
        logger.warning("Review rejected: user %r does not exist", user_name)
        raise ConflictError(f"User {user_name!r} does not exist", code="UNKNOWN_USER")

    if user.name != body.author:
        logger.warning(
            "Review rejected: user %r is not the author %r", user.name, body.author
        )
        raise ConflictError(
            f"User {user.name!r} cannot submit a review authored by {body.author!r}",
            code="AUTHOR_MISMATCH",
        )

    if await RestaurantRepository(db).find_by_id(body.restaurant_id) is None:
        logger.warning(
            "Review rejected: restaurant %s does not exist", body.restaurant_id
        )
        raise ConflictError(
            f"Restaurant {body.restaurant_id} does not exist",
            code="UNKNOWN_RESTAURANT",
        )

    review = Review(
        author=body.author,
        restaurant_id=body.restaurant_id,
        comment=body.comment,
        rating_peanut=body.rating_peanut,
        rating_egg=body.rating_egg,
        rating_dairy=body.rating_dairy,
        status=ReviewStatus.PENDING,
    )
    review = await ReviewRepository(db).save(review)
    await db.commit()
    logger.info(
        "Review %s submitted by %r for restaurant %s",
        review.id, review.author, review.restaurant_id,
    )
    return review


async def get_review(db: AsyncSession, review_id: int) -> Review:
    review = await ReviewRepository(db).find_by_id(review_id)
    if review is None:
        logger.warning("Review %s not found", review_id)
        raise NotFoundError(f"Review {review_id} not found", code="REVIEW_NOT_FOUND")
    return review


async def list_pending(db: AsyncSession) -> list[Review]:
    """Every review still awaiting moderation, in storage order."""
    return await ReviewRepository(db).find_by_status(ReviewStatus.PENDING)


async def moderate_review(db: AsyncSession, review_id: int, approve: bool) -> Review:
    """
    Approve or reject a PENDING review.

    The status change and, on approval, the restaurant's re-aggregation are
    committed together, so the published ratings never lag an approval.
    """
    reviews = ReviewRepository(db)
    review = await reviews.find_by_id(review_id)
    if review is None:
        logger.warning("Moderation rejected: review %s not found", review_id)
        raise NotFoundError(f"Review {review_id} not found", code="REVIEW_NOT_FOUND")

    if review.status != ReviewStatus.PENDING:
        logger.warning(
            "Moderation rejected: review %s is already %s", review_id, review.status.value
        )
        raise ConflictError(
            f"Review {review_id} is no longer pending", code="REVIEW_NOT_PENDING"
        )

    review.status = ReviewStatus.APPROVED if approve else ReviewStatus.REJECTED
    review = await reviews.save(review)

    if approve:
        await update_restaurant_rating(db, review.restaurant_id)

    await db.commit()
    logger.info("Review %s %s", review_id, review.status.value.lower())
    return review
