"""Review ORM model — allergen ratings plus moderation status."""

import enum

from sqlalchemy import Column, Integer, Text, TIMESTAMP, ForeignKey, Enum, func

from dining_review.database import Base


class ReviewStatus(str, enum.Enum):
    """Moderation state. PENDING is initial; APPROVED and REJECTED are terminal."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class Review(Base):
    """
    A user's allergy-specific review of a restaurant.
    Only APPROVED reviews feed the restaurant's published ratings.
    """

    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # User.name of the submitter; validated on submission
    author = Column(Text, nullable=False, index=True)
    restaurant_id = Column(
        Integer,
        ForeignKey("restaurants.id"),
        nullable=False,
        index=True,
    )
    comment = Column(Text, nullable=True)

    # Any subset may be present
    rating_peanut = Column(Integer, nullable=True)
    rating_egg = Column(Integer, nullable=True)
    rating_dairy = Column(Integer, nullable=True)

    status = Column(
        Enum(ReviewStatus, name="review_status"),
        nullable=False,
        default=ReviewStatus.PENDING,
        index=True,
    )

    created_at = Column(
        TIMESTAMP(timezone=True), nullable=False, server_default=func.now()
    )
