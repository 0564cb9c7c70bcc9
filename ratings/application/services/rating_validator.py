"""Validation layer for ratings.

RatingValidator implements RatingRepository by wrapping another repository:
it checks the business rules on create and delegates everything else as-is.
"""
import json
import logging
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from ratings.config import settings
from ratings.domain.entities.rating import Rating
from ratings.domain.errors import ErrorCode, ValidationError
from ratings.domain.repositories.rating_repository import RatingRepository

logger = logging.getLogger(__name__)


def now_millis() -> int:
    """Current time as epoch milliseconds."""
    return int(datetime.now(timezone.utc).timestamp() * 1000)


def _is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class RatingValidator(RatingRepository):
    """Checks ratings before they reach the wrapped repository.

    Args:
        repository: Store to delegate to once checks pass
        comment_max_length: Longest accepted comment
        extra_max_length: Longest accepted serialized metadata
        clock: Returns the creation timestamp in epoch milliseconds
    """

    def __init__(
        self,
        repository: RatingRepository,
        comment_max_length: Optional[int] = None,
        extra_max_length: Optional[int] = None,
        clock: Callable[[], int] = now_millis,
    ):
        self._repository = repository
        self._comment_max_length = (
            settings.COMMENT_MAX_LENGTH if comment_max_length is None else comment_max_length
        )
        self._extra_max_length = (
            settings.EXTRA_MAX_LENGTH if extra_max_length is None else extra_max_length
        )
        self._clock = clock

    def validate_new(self, rating: Rating) -> Dict[str, ErrorCode]:
        """Collect field errors for a rating about to be created."""
        errors: Dict[str, ErrorCode] = {}

        for field in ("target", "score", "user_id"):
            if not getattr(rating, field):
                errors[field] = ErrorCode.REQUIRED

        for field in ("target", "user_id"):
            if field not in errors and not _is_positive_int(getattr(rating, field)):
                errors[field] = ErrorCode.INVALID

        if len(rating.comment or "") > self._comment_max_length:
            errors["comment"] = ErrorCode.TOO_LONG

        if rating.extra:
            if len(rating.extra) > self._extra_max_length:
                errors["extra"] = ErrorCode.TOO_LONG
            else:
                try:
                    json.loads(rating.extra)
                except ValueError:
                    errors["extra"] = ErrorCode.INVALID

        return errors

    def create(self, rating: Rating) -> Rating:
        errors = self.validate_new(rating)
        if errors:
            logger.debug(f"Rejected rating for target {rating.target}: {errors}")
            raise ValidationError(errors)

        rating.comment = rating.comment or ""
        if not rating.extra:
            rating.extra = settings.DEFAULT_EXTRA
        if not rating.date:
            rating.date = self._clock()
        rating.active = True
        rating.anonymous = True

        return self._repository.create(rating)

    def update(self, rating: Rating) -> Rating:
        return self._repository.update(rating)

    def delete(self, rating_id: int) -> None:
        self._repository.delete(rating_id)

    def get_by_id(self, rating_id: int) -> Rating:
        return self._repository.get_by_id(rating_id)

    def list_by_target(self, target: int) -> List[Rating]:
        return self._repository.list_by_target(target)
