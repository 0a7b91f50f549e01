"""Pydantic schemas package."""

from dining_review.schemas.user import (
    UserCreate,
    UserRead,
    UserUpdate,
)
from dining_review.schemas.review import ReviewCreate, ReviewRead
from dining_review.schemas.restaurant import RestaurantCreate, RestaurantRead

__all__ = [
    "UserCreate", "UserRead", "UserUpdate",
    "ReviewCreate", "ReviewRead",
    "RestaurantCreate", "RestaurantRead",
]
