"""Restaurant ORM model with derived allergen ratings."""

from sqlalchemy import (
    Column, Integer, Text, TIMESTAMP, Double, UniqueConstraint, func,
)

from dining_review.database import Base


class Restaurant(Base):
    """
    A reviewed restaurant, unique per (name, zipcode).

    The four rating columns are derived state: they stay NULL until the
    rating aggregator writes them and are never set from a request body.
    """

    __tablename__ = "restaurants"
    __table_args__ = (
        UniqueConstraint("name", "zipcode", name="uq_restaurants_name_zipcode"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    zipcode = Column(Integer, nullable=False, index=True)

    # Derived ratings (see services.rating_aggregator)
    rating_peanut = Column(Double, nullable=True)
    rating_egg = Column(Double, nullable=True)
    rating_dairy = Column(Double, nullable=True)
    overall_rating = Column(Double, nullable=True)

    created_at = Column(
        TIMESTAMP(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at = Column(
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
