"""Review repository — lookups by moderation status."""

from __future__ import annotations

from sqlalchemy import select

from dining_review.models import Review, ReviewStatus
from dining_review.repositories.base import BaseRepository


class ReviewRepository(BaseRepository[Review]):
    model = Review

    async def find_by_status(self, status: ReviewStatus) -> list[Review]:
        result = await self.db.execute(
            select(Review).where(Review.status == status).order_by(Review.id)
        )
        return list(result.scalars().all())

    async def find_by_restaurant_and_status(
        self,
        restaurant_id: int,
        status: ReviewStatus,
    ) -> list[Review]:
        result = await self.db.execute(
            select(Review)
            .where(Review.restaurant_id == restaurant_id, Review.status == status)
            .order_by(Review.id)
        )
        return list(result.scalars().all())
