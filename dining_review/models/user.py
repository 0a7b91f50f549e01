"""User ORM model — registered reviewer with allergy flags."""

from sqlalchemy import Column, Integer, Text, Boolean, TIMESTAMP, func

from dining_review.database import Base


class User(Base):
    """
    A registered user. `name` is the external reference key: reviews point at
    it via Review.author and it never changes after registration.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False, unique=True, index=True)

    city = Column(Text, nullable=False)
    state = Column(Text, nullable=False)
    zipcode = Column(Integer, nullable=False)

    has_peanut_allergy = Column(Boolean, nullable=False, default=False)
    has_egg_allergy = Column(Boolean, nullable=False, default=False)
    has_diary_allergy = Column(Boolean, nullable=False, default=False)

    created_at = Column(
        TIMESTAMP(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at = Column(
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
