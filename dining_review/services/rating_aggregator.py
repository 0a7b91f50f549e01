"""
Rating aggregator — recomputes a restaurant's published ratings from scratch
out of its APPROVED reviews.

Algorithm:
  1. Per allergen: sum the non-null ratings and count the contributors
  2. Average = sum / max(count, 1), so an allergen nobody rated becomes 0.0
  3. Round each average to 2 dp, half-up
  4. Overall = sum of the rounded averages / number of rated allergens,
     rounded the same way; None when no allergen was rated at all

Runs after every approval (inside the approval transaction) and, when
REAGGREGATE_ON_READ is on, on every restaurant fetch.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from dining_review.models import Restaurant, Review, ReviewStatus
from dining_review.repositories import RestaurantRepository, ReviewRepository
from dining_review.utils.allergens import Allergen

logger = logging.getLogger(__name__)

_TWO_PLACES = Decimal("0.01")


def round_rating(value: float) -> float:
    """Round to two decimal places, half-up, independent of locale."""
    return float(Decimal(repr(value)).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class RatingSummary:
    """The four derived rating fields of a restaurant."""

    rating_peanut: float
    rating_egg: float
    rating_dairy: float
    overall_rating: Optional[float]


def compute_ratings(reviews: Iterable[Review]) -> RatingSummary:
    """
    Aggregate approved reviews into per-allergen and overall ratings.

    Pure function: callers are responsible for passing only APPROVED reviews
    of a single restaurant.
    """
    totals = {allergen: 0 for allergen in Allergen}
    counts = {allergen: 0 for allergen in Allergen}

    for review in reviews:
        for allergen in Allergen:
            rating = getattr(review, allergen.rating_attr)
            if rating is not None:
                totals[allergen] += rating
                counts[allergen] += 1

    averages = {
        allergen: round_rating(totals[allergen] / (counts[allergen] or 1))
        for allergen in Allergen
    }

    rated = sum(1 for allergen in Allergen if counts[allergen] > 0)
    overall: Optional[float] = None
    if rated:
        overall = round_rating(sum(averages.values()) / rated)

    return RatingSummary(
        rating_peanut=averages[Allergen.PEANUT],
        rating_egg=averages[Allergen.EGG],
        rating_dairy=averages[Allergen.DAIRY],
        overall_rating=overall,
    )


def apply_ratings(restaurant: Restaurant, summary: RatingSummary) -> None:
    """Copy a RatingSummary onto the restaurant's derived columns."""
    restaurant.rating_peanut = summary.rating_peanut
    restaurant.rating_egg = summary.rating_egg
    restaurant.rating_dairy = summary.rating_dairy
    restaurant.overall_rating = summary.overall_rating


async def update_restaurant_rating(
    db: AsyncSession,
    restaurant_id: int,
) -> Optional[Restaurant]:
    """
    Recompute and flush the ratings of one restaurant.

    Returns the updated restaurant, or None if it does not exist.
    Does not commit.
    """
    restaurants = RestaurantRepository(db)
    restaurant = await restaurants.find_by_id(restaurant_id)
    if restaurant is None:
        logger.warning("Rating update skipped: restaurant %s not found", restaurant_id)
        return None

    approved = await ReviewRepository(db).find_by_restaurant_and_status(
        restaurant_id, ReviewStatus.APPROVED
    )
    summary = compute_ratings(approved)
    apply_ratings(restaurant, summary)

    logger.debug(
        "Restaurant %s re-aggregated from %d approved review(s): %s",
        restaurant_id, len(approved), summary,
    )
    return await restaurants.save(restaurant)
