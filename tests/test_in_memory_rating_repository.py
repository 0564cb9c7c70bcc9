"""Tests for the in-memory rating store."""
import pytest

from ratings.domain.entities.rating import Rating
from ratings.domain.errors import ErrorCode, NotFoundError, ValidationError
from ratings.infrastructure.persistence.repositories.in_memory_rating_repository import (
    InMemoryRatingRepository,
)


@pytest.fixture
def repo():
    return InMemoryRatingRepository(user_ids=[1, 2])


class TestInMemoryRatingRepository:

    def test_create_assigns_sequential_ids(self, repo):
        first = repo.create(Rating.new(target=1, user_id=1, score=5))
        second = repo.create(Rating.new(target=2, user_id=1, score=5))

        assert (first.id, second.id) == (1, 2)

    def test_create_skips_taken_ids(self, repo):
        repo.create(Rating.new(id=1, target=1, user_id=1, score=5))
        created = repo.create(Rating.new(target=2, user_id=1, score=5))

        assert created.id == 2

    def test_repeated_id(self, repo):
        repo.create(Rating.new(id=9, target=1, user_id=1, score=5))

        with pytest.raises(ValidationError) as exc_info:
            repo.create(Rating.new(id=9, target=2, user_id=1, score=5))

        assert exc_info.value.has("id", ErrorCode.ID_TAKEN)

    def test_unknown_user(self, repo):
        with pytest.raises(ValidationError) as exc_info:
            repo.create(Rating.new(target=1, user_id=3, score=5))

        assert exc_info.value.has("user_id", ErrorCode.REF_NOT_FOUND)

    def test_any_user_accepted_without_user_list(self):
        repo = InMemoryRatingRepository()
        assert repo.create(Rating.new(target=1, user_id=12345, score=5)).id == 1

    def test_add_user(self):
        repo = InMemoryRatingRepository(user_ids=[])
        repo.add_user(7)
        assert repo.create(Rating.new(target=1, user_id=7, score=5)).id == 1

    def test_stored_copy_is_isolated(self, repo):
        rating = repo.create(Rating.new(target=1, user_id=1, score=5))
        rating.score = 1

        assert repo.get_by_id(rating.id).score == 5

    def test_update_overwrites_everything(self, repo):
        rating = repo.create(Rating.new(target=1, user_id=1, score=5, comment="Nice"))

        repo.update(Rating(id=rating.id, target=1, user_id=1, score=5))

        assert repo.get_by_id(rating.id) == Rating(id=rating.id, target=1, user_id=1, score=5)

    def test_update_missing(self, repo):
        with pytest.raises(NotFoundError):
            repo.update(Rating(id=42))

    def test_update_to_taken_pair(self, repo):
        repo.create(Rating.new(target=1, user_id=1, score=5))
        other = repo.create(Rating.new(target=2, user_id=1, score=5))
        other.target = 1

        with pytest.raises(ValidationError) as exc_info:
            repo.update(other)

        assert exc_info.value.has("target", ErrorCode.DUPLICATE)

    def test_delete(self, repo):
        rating = repo.create(Rating.new(target=1, user_id=1, score=5))

        repo.delete(rating.id)

        with pytest.raises(NotFoundError):
            repo.get_by_id(rating.id)
        with pytest.raises(NotFoundError):
            repo.delete(rating.id)

    def test_list_by_target(self, repo):
        repo.create(Rating.new(id=5, target=1, user_id=2, score=5))
        repo.create(Rating.new(id=3, target=1, user_id=1, score=4))
        repo.create(Rating.new(id=4, target=2, user_id=1, score=3))

        assert [r.id for r in repo.list_by_target(1)] == [3, 5]
        assert repo.list_by_target(99) == []
