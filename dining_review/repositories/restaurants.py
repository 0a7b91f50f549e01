"""Restaurant repository — uniqueness check and allergen-filtered listing."""

from __future__ import annotations

from sqlalchemy import func, nulls_last, select

from dining_review.models import Restaurant
from dining_review.repositories.base import BaseRepository
from dining_review.utils.allergens import Allergen


class RestaurantRepository(BaseRepository[Restaurant]):
    model = Restaurant

    async def count_by_name_and_zipcode(self, name: str, zipcode: int) -> int:
        """Number of restaurants sharing this (name, zipcode) pair: 0 or 1."""
        result = await self.db.execute(
            select(func.count())
            .select_from(Restaurant)
            .where(Restaurant.name == name, Restaurant.zipcode == zipcode)
        )
        return result.scalar() or 0

    async def find_by_zipcode_with_rating(
        self,
        zipcode: int,
        allergen: Allergen,
    ) -> list[Restaurant]:
        """
        Restaurants in `zipcode` that have a rating for `allergen`,
        best overall rating first.
        """
        rating_col = getattr(Restaurant, allergen.rating_attr)
        result = await self.db.execute(
            select(Restaurant)
            .where(Restaurant.zipcode == zipcode, rating_col.is_not(None))
            .order_by(nulls_last(Restaurant.overall_rating.desc()), Restaurant.id)
        )
        return list(result.scalars().all())
