"""SQLAlchemy models for the ratings tables."""
from sqlalchemy import (
    Column,
    BigInteger,
    String,
    Boolean,
    Integer,
    Text,
    ForeignKey,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from ratings.infrastructure.persistence.db import Base

UQ_TARGET_USER = "uq_ratings_target_user_id"
FK_USER = "fk_ratings_user_id"


class User(Base):
    """Author of ratings. Owned by the users service; only the key matters here."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False)
    first_name = Column(String(255))
    last_name = Column(String(255))
    active = Column(Boolean, nullable=False, default=True)

    ratings = relationship("Rating", back_populates="user")


class Rating(Base):
    __tablename__ = "ratings"
    __table_args__ = (
        UniqueConstraint("target", "user_id", name=UQ_TARGET_USER),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    target = Column(BigInteger, nullable=False, index=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", name=FK_USER),
        nullable=False,
        index=True,
    )
    score = Column(Integer, nullable=False)
    comment = Column(String(512), nullable=False, default="")
    extra = Column(Text, nullable=False, default="{}")
    active = Column(Boolean, nullable=False, default=True)
    anonymous = Column(Boolean, nullable=False, default=True)
    date = Column(BigInteger, nullable=False)

    user = relationship("User", back_populates="ratings")
