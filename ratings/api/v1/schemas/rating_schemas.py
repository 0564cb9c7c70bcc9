"""Schemas for rating endpoints."""
import json
from typing import Any, Dict, List, Optional
from pydantic import BaseModel

from ratings.domain.entities.rating import Rating


def _dump_extra(extra: Optional[Dict[str, Any]]) -> str:
    if extra is None:
        return ""
    return json.dumps(extra, separators=(",", ":"))


class RatingCreateSchema(BaseModel):
    """Body for creating a rating. Missing numbers are reported as required."""
    id: Optional[int] = None
    target: int = 0
    user_id: int = 0
    score: int = 0
    comment: str = ""
    extra: Optional[Dict[str, Any]] = None
    date: int = 0

    def to_entity(self) -> Rating:
        return Rating(
            id=self.id,
            target=self.target,
            user_id=self.user_id,
            score=self.score,
            comment=self.comment,
            extra=_dump_extra(self.extra),
            date=self.date,
        )


class RatingUpdateSchema(BaseModel):
    """Full replacement of a rating; omitted fields are reset."""
    target: int = 0
    user_id: int = 0
    score: int = 0
    comment: str = ""
    extra: Optional[Dict[str, Any]] = None
    active: bool = False
    anonymous: bool = False
    date: int = 0

    def to_entity(self, rating_id: int) -> Rating:
        return Rating(
            id=rating_id,
            target=self.target,
            user_id=self.user_id,
            score=self.score,
            comment=self.comment,
            extra=_dump_extra(self.extra) or "{}",
            active=self.active,
            anonymous=self.anonymous,
            date=self.date,
        )


class RatingSchema(BaseModel):
    """A stored rating."""
    id: int
    target: int
    user_id: int
    score: int
    comment: str
    extra: Any
    active: bool
    anonymous: bool
    date: int

    @classmethod
    def from_entity(cls, rating: Rating) -> "RatingSchema":
        return cls(
            id=rating.id,
            target=rating.target,
            user_id=rating.user_id,
            score=rating.score,
            comment=rating.comment,
            extra=rating.extra_data(),
            active=rating.active,
            anonymous=rating.anonymous,
            date=rating.date,
        )


class RatingListResponseSchema(BaseModel):
    """Ratings for one target."""
    target: int
    ratings: List[RatingSchema]
