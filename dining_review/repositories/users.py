"""User repository."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import select

from dining_review.models import User
from dining_review.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    model = User

    async def find_by_name(self, name: str) -> Optional[User]:
        """Look a user up by their unique name."""
        result = await self.db.execute(select(User).where(User.name == name))
        return result.scalar_one_or_none()
