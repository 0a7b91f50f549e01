"""
User endpoints — registration, profile lookup/update, and review submission.
Users are addressed by their unique name, never by database id.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from dining_review.database import get_db
from dining_review.routers.errors import http_error
from dining_review.schemas.review import ReviewCreate, ReviewRead
from dining_review.schemas.user import UserCreate, UserRead, UserUpdate
from dining_review.services import moderation, users
from dining_review.services.errors import DiningReviewError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def register_user(
    body: UserCreate,
    response: Response,
    db: AsyncSession = Depends(get_db),
) -> UserRead:
    """Register a new user. 400 if the name is already taken."""
    try:
        user = await users.register_user(db, body)
    except DiningReviewError as exc:
        raise http_error(exc) from exc

    response.headers["Location"] = f"/users/{user.name}"
    return UserRead.model_validate(user)


@router.get("", response_model=list[UserRead])
async def list_users(db: AsyncSession = Depends(get_db)) -> list[UserRead]:
    """Return every registered user."""
    return [UserRead.model_validate(u) for u in await users.list_users(db)]


@router.get("/{name}", response_model=UserRead)
async def get_user(name: str, db: AsyncSession = Depends(get_db)) -> UserRead:
    """Return a single user by name."""
    try:
        user = await users.get_user(db, name)
    except DiningReviewError as exc:
        raise http_error(exc) from exc
    return UserRead.model_validate(user)


@router.put("/{name}", response_model=UserRead)
async def update_user(
    name: str,
    body: UserUpdate,
    db: AsyncSession = Depends(get_db),
) -> UserRead:
    """
    Replace the user's address and allergy flags.
    The name itself cannot change; a different name in the body is ignored.
    """
    try:
        user = await users.update_user(db, name, body)
    except DiningReviewError as exc:
        raise http_error(exc) from exc
    return UserRead.model_validate(user)


@router.post(
    "/{name}/review",
    response_model=ReviewRead,
    status_code=status.HTTP_201_CREATED,
)
async def submit_review(
    name: str,
    body: ReviewCreate,
    response: Response,
    db: AsyncSession = Depends(get_db),
) -> ReviewRead:
    """
    Submit a review as user `name`. The review starts PENDING and does not
    affect ratings until an administrator approves it.
    400 if the user is unknown, is not the author, or the restaurant is unknown.
    """
    try:
        review = await moderation.submit_review(db, name, body)
    except DiningReviewError as exc:
        raise http_error(exc) from exc

    response.headers["Location"] = f"/reviews/{review.id}"
    return ReviewRead.model_validate(review)
