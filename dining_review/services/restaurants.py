"""Restaurant service — creation, lookup with re-aggregation, filtered listing."""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from dining_review.config import settings
from dining_review.models import Restaurant
from dining_review.repositories import RestaurantRepository
from dining_review.schemas.restaurant import RestaurantCreate
from dining_review.services.errors import ConflictError, NotFoundError
from dining_review.services.rating_aggregator import update_restaurant_rating
from dining_review.utils.allergens import Allergen

logger = logging.getLogger(__name__)


async def create_restaurant(db: AsyncSession, body: RestaurantCreate) -> Restaurant:
    """Create a restaurant with unset ratings; (name, zipcode) must be new."""
    restaurants = RestaurantRepository(db)
    if await restaurants.count_by_name_and_zipcode(body.name, body.zipcode) != 0:
        logger.warning(
            "Restaurant %r in %s already exists", body.name, body.zipcode
        )
        raise ConflictError(
            f"Restaurant {body.name!r} already exists in zipcode {body.zipcode}",
            code="RESTAURANT_EXISTS",
        )

    try:
        restaurant = await restaurants.save(
            Restaurant(name=body.name, zipcode=body.zipcode)
        )
        await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        logger.warning(
            "Restaurant %r in %s already exists", body.name, body.zipcode
        )
        raise ConflictError(
            f"Restaurant {body.name!r} already exists in zipcode {body.zipcode}",
            code="RESTAURANT_EXISTS",
        ) from exc
    logger.info("Created restaurant %r (id=%s)", restaurant.name, restaurant.id)
    return restaurant


async def get_restaurant(db: AsyncSession, restaurant_id: int) -> Restaurant:
    """
    Return a restaurant by id.
    With REAGGREGATE_ON_READ enabled its ratings are recomputed first, so a
    missed approval-time update heals itself on the next read.
    """
    restaurant = await RestaurantRepository(db).find_by_id(restaurant_id)
    if restaurant is None:
        logger.warning("Restaurant %s not found", restaurant_id)
        raise NotFoundError(
            f"Restaurant {restaurant_id} not found", code="RESTAURANT_NOT_FOUND"
        )

    if settings.reaggregate_on_read:
        restaurant = await update_restaurant_rating(db, restaurant_id)
        await db.commit()

    return restaurant


async def list_by_zipcode_and_allergy(
    db: AsyncSession,
    zipcode: int,
    allergy: str,
) -> list[Restaurant]:
    """
    Restaurants in `zipcode` rated for `allergy`, best overall first.
    An unknown allergy label yields an empty list rather than an error.
    """
    allergen = Allergen.from_label(allergy)
    if allergen is None:
        logger.warning("Unknown allergy filter %r", allergy)
        return []

    return await RestaurantRepository(db).find_by_zipcode_with_rating(zipcode, allergen)
