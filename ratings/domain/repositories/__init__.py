"""Repository interfaces."""
from ratings.domain.repositories.rating_repository import RatingRepository

__all__ = [
    "RatingRepository",
]
