"""SQLAlchemy implementation of RatingRepository.

Maps Rating entities to rows of the ``ratings`` table and translates database
failures into domain errors: constraint violations become ValidationError,
missing rows become NotFoundError, anything else becomes InternalError.
"""
import logging
from contextlib import contextmanager
from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ratings.domain.entities.rating import Rating as RatingEntity
from ratings.domain.errors import (
    ErrorCode,
    InternalError,
    NotFoundError,
    RatingError,
    ValidationError,
)
from ratings.domain.repositories.rating_repository import RatingRepository
from ratings.infrastructure.persistence import models

logger = logging.getLogger(__name__)

# Markers found in driver messages, lowercased.
# SQLite reports columns, PostgreSQL and MySQL report constraint names.
_FOREIGN_KEY_MARKERS = ("foreign key", models.FK_USER)
_TARGET_USER_MARKERS = (models.UQ_TARGET_USER, "ratings.target, ratings.user_id")
_PRIMARY_KEY_MARKERS = ("ratings_pkey", "ratings.id", "ratings.primary", "for key 'primary'")


def _to_entity(row: models.Rating) -> RatingEntity:
    return RatingEntity(
        id=row.id,
        target=row.target,
        user_id=row.user_id,
        score=row.score,
        comment=row.comment,
        extra=row.extra,
        active=row.active,
        anonymous=row.anonymous,
        date=row.date,
    )


def _apply(row: models.Rating, rating: RatingEntity) -> None:
    """Copy every field, zero values included."""
    row.target = rating.target
    row.user_id = rating.user_id
    row.score = rating.score
    row.comment = rating.comment
    row.extra = rating.extra
    row.active = rating.active
    row.anonymous = rating.anonymous
    row.date = rating.date


def classify_integrity_error(exc: IntegrityError) -> Optional[ValidationError]:
    """Map a constraint violation to a domain error, None when unrecognised."""
    message = str(exc.orig).lower()
    diag = getattr(exc.orig, "diag", None)
    constraint = getattr(diag, "constraint_name", None)

    if constraint == models.FK_USER or any(m in message for m in _FOREIGN_KEY_MARKERS):
        return ValidationError({"user_id": ErrorCode.REF_NOT_FOUND})
    if constraint == models.UQ_TARGET_USER or any(m in message for m in _TARGET_USER_MARKERS):
        return ValidationError({"target": ErrorCode.DUPLICATE})
    if any(m in message for m in _PRIMARY_KEY_MARKERS):
        return ValidationError({"id": ErrorCode.ID_TAKEN})
    return None


class SQLAlchemyRatingRepository(RatingRepository):
    """Rating repository using SQLAlchemy."""

    def __init__(self, session: Session):
        self.session = session

    @contextmanager
    def _translate_errors(self, operation: str):
        try:
            yield
        except RatingError:
            raise
        except IntegrityError as e:
            self.session.rollback()
            error = classify_integrity_error(e)
            if error is None:
                logger.error(f"Unrecognised constraint violation during {operation}: {e.orig}")
                raise InternalError(operation) from e
            logger.warning(f"Rejected rating {operation}: {error}")
            raise error from e
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Database error during {operation}: {e}", exc_info=True)
            raise InternalError(operation) from e
        except Exception as e:
            # Driver errors SQLAlchemy doesn't wrap, e.g. sqlite3 OverflowError
            self.session.rollback()
            logger.error(f"Unexpected error during {operation}: {e!r}", exc_info=True)
            raise InternalError(operation) from e

    def create(self, rating: RatingEntity) -> RatingEntity:
        row = models.Rating(id=rating.id or None)
        _apply(row, rating)
        with self._translate_errors("create"):
            # A row already loaded in this session would fail the flush before
            # reaching the primary key constraint
            if row.id is not None and self.session.get(models.Rating, row.id) is not None:
                logger.warning(f"Rejected rating create: id {row.id} is already taken")
                raise ValidationError({"id": ErrorCode.ID_TAKEN})
            self.session.add(row)
            self.session.commit()
            new_id = row.id
        rating.id = new_id
        logger.info(f"Created rating {new_id} for target {rating.target}")
        return rating

    def update(self, rating: RatingEntity) -> RatingEntity:
        with self._translate_errors("update"):
            row = self.session.get(models.Rating, rating.id) if rating.id else None
            if row is None:
                raise NotFoundError(rating.id)
            _apply(row, rating)
            self.session.commit()
        logger.debug(f"Updated rating {rating.id}")
        return rating

    def delete(self, rating_id: int) -> None:
        with self._translate_errors("delete"):
            row = self.session.get(models.Rating, rating_id) if rating_id else None
            if row is None:
                raise NotFoundError(rating_id)
            self.session.delete(row)
            self.session.commit()
        logger.info(f"Deleted rating {rating_id}")

    def get_by_id(self, rating_id: int) -> RatingEntity:
        with self._translate_errors("get_by_id"):
            row = self.session.get(models.Rating, rating_id) if rating_id else None
            if row is None:
                raise NotFoundError(rating_id)
            return _to_entity(row)

    def list_by_target(self, target: int) -> List[RatingEntity]:
        """Ratings of ``target`` ordered by id, not by insertion order.

        A rating stored with an explicit lower id sorts before older rows.
        """
        with self._translate_errors("list_by_target"):
            rows = (
                self.session.query(models.Rating)
                .filter(models.Rating.target == target)
                .order_by(models.Rating.id)
                .all()
            )
            return [_to_entity(r) for r in rows]
