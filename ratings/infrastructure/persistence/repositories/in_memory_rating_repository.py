"""In-memory implementation of RatingRepository for testing.
Can replace any RatingRepository, including the error translation."""
from dataclasses import replace
from typing import Dict, Iterable, List, Optional, Tuple
from ratings.domain.entities.rating import Rating
from ratings.domain.errors import ErrorCode, NotFoundError, ValidationError
from ratings.domain.repositories.rating_repository import RatingRepository


class InMemoryRatingRepository(RatingRepository):
    """In-memory implementation for testing.

    Mirrors the table constraints: unique id, unique (target, user_id) pair
    and, when ``user_ids`` is given, a reference check on ``user_id``.
    Stored records are copies, so callers can't mutate them behind its back.
    """

    def __init__(self, user_ids: Optional[Iterable[int]] = None):
        self._ratings: Dict[int, Rating] = {}
        self._user_ids = set(user_ids) if user_ids is not None else None
        self._next_id = 1

    def add_user(self, user_id: int):
        """Register a known author."""
        if self._user_ids is None:
            self._user_ids = set()
        self._user_ids.add(user_id)

    def _check_constraints(self, rating: Rating, exclude_id: Optional[int] = None):
        if self._user_ids is not None and rating.user_id not in self._user_ids:
            raise ValidationError({"user_id": ErrorCode.REF_NOT_FOUND})

        pair: Tuple[int, int] = (rating.target, rating.user_id)
        for stored in self._ratings.values():
            if stored.id != exclude_id and (stored.target, stored.user_id) == pair:
                raise ValidationError({"target": ErrorCode.DUPLICATE})

    def create(self, rating: Rating) -> Rating:
        """Create new rating."""
        if rating.id and rating.id in self._ratings:
            raise ValidationError({"id": ErrorCode.ID_TAKEN})
        self._check_constraints(rating)

        # Assign ID if not set
        if not rating.id:
            while self._next_id in self._ratings:
                self._next_id += 1
            rating.id = self._next_id
            self._next_id += 1

        self._ratings[rating.id] = replace(rating)
        return rating

    def update(self, rating: Rating) -> Rating:
        """Update existing rating."""
        if rating.id not in self._ratings:
            raise NotFoundError(rating.id)
        self._check_constraints(rating, exclude_id=rating.id)
        self._ratings[rating.id] = replace(rating)
        return rating

    def delete(self, rating_id: int) -> None:
        """Delete rating by ID."""
        if rating_id not in self._ratings:
            raise NotFoundError(rating_id)
        del self._ratings[rating_id]

    def get_by_id(self, rating_id: int) -> Rating:
        """Get rating by ID."""
        if rating_id not in self._ratings:
            raise NotFoundError(rating_id)
        return replace(self._ratings[rating_id])

    def list_by_target(self, target: int) -> List[Rating]:
        """List ratings for a target, ordered by ID."""
        return [
            replace(r)
            for _, r in sorted(self._ratings.items())
            if r.target == target
        ]
