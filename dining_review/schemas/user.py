"""Pydantic schemas for user management endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from dining_review.database import SQL_INT_MAX, SQL_INT_MIN


class UserBase(BaseModel):
    """Mutable profile fields shared by create, update and read."""

    city: str
    state: str
    zipcode: int = Field(..., ge=SQL_INT_MIN, le=SQL_INT_MAX)
    has_peanut_allergy: bool
    has_egg_allergy: bool
    has_diary_allergy: bool


class UserCreate(UserBase):
    """Body for POST /users."""

    name: str = Field(..., min_length=1)


class UserUpdate(UserBase):
    """
    Body for PUT /users/{name}.
    `name` is accepted for symmetry with UserCreate but is never applied —
    a user's name is immutable once registered.
    """

    name: Optional[str] = None


class UserRead(UserBase):
    """User profile returned by GET /users and GET /users/{name}."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
