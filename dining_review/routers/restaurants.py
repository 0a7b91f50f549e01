"""
Restaurant endpoints.

  POST /restaurant                              — create
  GET  /restaurant/{id}                         — fetch (ratings re-aggregated first)
  GET  /restaurant/{zipcode}/allergy/{allergy}  — rated for an allergen, best first
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from dining_review.database import SQL_INT_MAX, SQL_INT_MIN, get_db
from dining_review.routers.errors import http_error
from dining_review.schemas.restaurant import RestaurantCreate, RestaurantRead
from dining_review.services import restaurants
from dining_review.services.errors import DiningReviewError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/restaurant", tags=["restaurants"])


@router.post("", response_model=RestaurantRead, status_code=status.HTTP_201_CREATED)
async def create_restaurant(
    body: RestaurantCreate,
    response: Response,
    db: AsyncSession = Depends(get_db),
) -> RestaurantRead:
    """Create a restaurant. 400 if one with the same name and zipcode exists."""
    try:
        restaurant = await restaurants.create_restaurant(db, body)
    except DiningReviewError as exc:
        raise http_error(exc) from exc

    response.headers["Location"] = f"/restaurant/{restaurant.id}"
    return RestaurantRead.model_validate(restaurant)


@router.get("/{restaurant_id}", response_model=RestaurantRead)
async def get_restaurant(
    restaurant_id: int = Path(..., ge=SQL_INT_MIN, le=SQL_INT_MAX),
    db: AsyncSession = Depends(get_db),
) -> RestaurantRead:
    try:
        restaurant = await restaurants.get_restaurant(db, restaurant_id)
    except DiningReviewError as exc:
        raise http_error(exc) from exc
    return RestaurantRead.model_validate(restaurant)


@router.get("/{zipcode}/allergy/{allergy}", response_model=list[RestaurantRead])
async def list_by_zipcode_and_allergy(
    zipcode: int = Path(..., ge=SQL_INT_MIN, le=SQL_INT_MAX),
    allergy: str = Path(...),
    db: AsyncSession = Depends(get_db),
) -> list[RestaurantRead]:
    """
    `allergy` is one of Peanut, Egg, Diary (case-sensitive).
    Any other value returns an empty list.
    """
    found = await restaurants.list_by_zipcode_and_allergy(db, zipcode, allergy)
    return [RestaurantRead.model_validate(r) for r in found]
