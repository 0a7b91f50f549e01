"""User service — registration, lookup and profile updates."""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from dining_review.models import User
from dining_review.repositories import UserRepository
from dining_review.schemas.user import UserCreate, UserUpdate
from dining_review.services.errors import ConflictError, NotFoundError

logger = logging.getLogger(__name__)


async def register_user(db: AsyncSession, body: UserCreate) -> User:
    """Create a user. A name that is already registered is rejected."""
    users = UserRepository(db)
    if await users.find_by_name(body.name) is not None:
        logger.warning("Registration rejected: user %r already exists", body.name)
        raise ConflictError(f"User {body.name!r} already exists", code="USER_EXISTS")

    try:
        user = await users.save(User(**body.model_dump()))
        await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        logger.warning("Registration rejected: user %r already exists", body.name)
        raise ConflictError(
            f"User {body.name!r} already exists", code="USER_EXISTS"
        ) from exc
    logger.info("Registered user %r (id=%s)", user.name, user.id)
    return user


async def list_users(db: AsyncSession) -> list[User]:
    return await UserRepository(db).find_all()


async def get_user(db: AsyncSession, name: str) -> User:
    user = await UserRepository(db).find_by_name(name)
    if user is None:
        raise NotFoundError(f"User {name!r} not found", code="USER_NOT_FOUND")
    return user


async def update_user(db: AsyncSession, name: str, body: UserUpdate) -> User:
    """
    Overwrite every profile field except `name`.
    A differing name in the body is ignored with a warning.
    """
    users = UserRepository(db)
    user = await users.find_by_name(name)
    if user is None:
        logger.warning("Update rejected: user %r not found", name)
        raise NotFoundError(f"User {name!r} not found", code="USER_NOT_FOUND")

    if body.name is not None and body.name != user.name:
        logger.warning(
            "User name is immutable; ignoring rename of %r to %r", user.name, body.name
        )

    for field, value in body.model_dump(exclude={"name"}).items():
        setattr(user, field, value)

    user = await users.save(user)
    await db.commit()
    return user
