"""SQLAlchemy ORM models package."""

from dining_review.database import Base
from dining_review.models.user import User
from dining_review.models.restaurant import Restaurant
from dining_review.models.review import Review, ReviewStatus

__all__ = ["Base", "User", "Restaurant", "Review", "ReviewStatus"]
