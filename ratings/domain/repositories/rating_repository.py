"""Rating repository interface - abstraction for data access."""
from abc import ABC, abstractmethod
from typing import List
from ratings.domain.entities.rating import Rating


class RatingRepository(ABC):
    """Repository interface for Rating entity.

    The validator and the stores all implement this contract, so a validator
    can wrap any store.
    """

    @abstractmethod
    def create(self, rating: Rating) -> Rating:
        """Create new rating, setting ``rating.id``."""
        pass

    @abstractmethod
    def update(self, rating: Rating) -> Rating:
        """Overwrite every field of an existing rating."""
        pass

    @abstractmethod
    def delete(self, rating_id: int) -> None:
        """Delete rating by ID."""
        pass

    @abstractmethod
    def get_by_id(self, rating_id: int) -> Rating:
        """Get rating by ID."""
        pass

    @abstractmethod
    def list_by_target(self, target: int) -> List[Rating]:
        """List ratings for a target, ordered by ID."""
        pass
