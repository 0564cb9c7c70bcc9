"""Dependency injection for FastAPI routes.
Routes depend on the RatingRepository abstraction, never on a store."""
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from ratings.application.services.rating_validator import RatingValidator
from ratings.config import settings
from ratings.domain.repositories.rating_repository import RatingRepository
from ratings.infrastructure.persistence.db import get_db
from ratings.infrastructure.persistence.repositories.in_memory_rating_repository import (
    InMemoryRatingRepository,
)
from ratings.infrastructure.persistence.repositories.sqlalchemy_rating_repository import (
    SQLAlchemyRatingRepository,
)


def build_rating_service(session: Session) -> RatingRepository:
    """Validator wrapping the SQLAlchemy store for one session."""
    return RatingValidator(SQLAlchemyRatingRepository(session))


@lru_cache()
def get_in_memory_rating_service() -> RatingRepository:
    """Process-wide in-memory service for local development."""
    return RatingValidator(InMemoryRatingRepository())


def get_rating_service(db: Session = Depends(get_db)) -> RatingRepository:
    """Get the rating service for a request.

    - Default: SQLAlchemy store bound to the request session
    - If USE_DB_REPOS=false: shared in-memory store
    """
    if settings.USE_DB_REPOS:
        return build_rating_service(db)
    return get_in_memory_rating_service()
