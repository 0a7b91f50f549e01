"""Pydantic schemas for restaurants and their derived ratings."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from dining_review.database import SQL_INT_MAX, SQL_INT_MIN


class RestaurantCreate(BaseModel):
    """
    Body for POST /restaurant.
    Rating fields are derived state; if a client sends them they are dropped.
    """

    name: str = Field(..., min_length=1)
    zipcode: int = Field(..., ge=SQL_INT_MIN, le=SQL_INT_MAX)


class RestaurantRead(BaseModel):
    """
    A restaurant with its published ratings.
    Each rating is null until aggregation has run for the restaurant.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    zipcode: int

    rating_peanut: Optional[float] = Field(
        None,
        validation_alias=AliasChoices("ratingPeanut", "rating_peanut"),
        serialization_alias="ratingPeanut",
    )
    rating_egg: Optional[float] = Field(
        None,
        validation_alias=AliasChoices("ratingEgg", "rating_egg"),
        serialization_alias="ratingEgg",
    )
    rating_dairy: Optional[float] = Field(
        None,
        validation_alias=AliasChoices("ratingDiary", "rating_dairy"),
        serialization_alias="ratingDiary",
    )
    overall_rating: Optional[float] = Field(
        None,
        validation_alias=AliasChoices("overallRating", "overall_rating"),
        serialization_alias="overallRating",
    )

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
