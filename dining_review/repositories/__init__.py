"""Async repositories over the ORM models."""

from dining_review.repositories.base import BaseRepository
from dining_review.repositories.users import UserRepository
from dining_review.repositories.restaurants import RestaurantRepository
from dining_review.repositories.reviews import ReviewRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "RestaurantRepository",
    "ReviewRepository",
]
