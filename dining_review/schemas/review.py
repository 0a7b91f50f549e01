"""
Pydantic schemas for reviews.

Wire names keep the public camelCase spelling (restaurantID, ratingPeanut,
ratingEgg, ratingDiary); request bodies also accept the snake_case names.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from dining_review.database import SQL_INT_MAX, SQL_INT_MIN
from dining_review.models.review import ReviewStatus


def _wire(name: str, attr: str, **bounds) -> dict:
    """Field kwargs: read either spelling, always write the wire spelling."""
    return {
        "validation_alias": AliasChoices(name, attr),
        "serialization_alias": name,
        **bounds,
    }


_SQL_INT = {"ge": SQL_INT_MIN, "le": SQL_INT_MAX}


class ReviewCreate(BaseModel):
    """
    Body for POST /users/{name}/review.
    Any client-supplied `status` is accepted and discarded — new reviews are
    always PENDING.
    """

    author: str
    restaurant_id: int = Field(..., **_wire("restaurantID", "restaurant_id", **_SQL_INT))
    comment: Optional[str] = None

    rating_peanut: Optional[int] = Field(None, **_wire("ratingPeanut", "rating_peanut", **_SQL_INT))
    rating_egg: Optional[int] = Field(None, **_wire("ratingEgg", "rating_egg", **_SQL_INT))
    rating_dairy: Optional[int] = Field(None, **_wire("ratingDiary", "rating_dairy", **_SQL_INT))

    status: Optional[ReviewStatus] = None


class ReviewRead(BaseModel):
    """A stored review, as returned by every review endpoint."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    author: str
    restaurant_id: int = Field(..., **_wire("restaurantID", "restaurant_id"))
    comment: Optional[str] = None

    rating_peanut: Optional[int] = Field(None, **_wire("ratingPeanut", "rating_peanut"))
    rating_egg: Optional[int] = Field(None, **_wire("ratingEgg", "rating_egg"))
    rating_dairy: Optional[int] = Field(None, **_wire("ratingDiary", "rating_dairy"))

    status: ReviewStatus
    created_at: Optional[datetime] = None
