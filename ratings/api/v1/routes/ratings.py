"""Rating API routes - thin layer delegating to the rating service.
Domain errors are turned into responses by the handlers in ratings.api.errors."""
from fastapi import APIRouter, Depends, Response, status

from ratings.api.v1.schemas.rating_schemas import (
    RatingCreateSchema,
    RatingListResponseSchema,
    RatingSchema,
    RatingUpdateSchema,
)
from ratings.core.dependencies import get_rating_service
from ratings.domain.repositories.rating_repository import RatingRepository

router = APIRouter(tags=["ratings"])


@router.post("/ratings", response_model=RatingSchema, status_code=status.HTTP_201_CREATED)
def create_rating(
    body: RatingCreateSchema,
    service: RatingRepository = Depends(get_rating_service),
):
    """Create a rating; date, flags and metadata get their defaults."""
    rating = service.create(body.to_entity())
    return RatingSchema.from_entity(rating)


@router.get("/ratings/{rating_id}", response_model=RatingSchema)
def get_rating(
    rating_id: int,
    service: RatingRepository = Depends(get_rating_service),
):
    return RatingSchema.from_entity(service.get_by_id(rating_id))


@router.put("/ratings/{rating_id}", response_model=RatingSchema)
def update_rating(
    rating_id: int,
    body: RatingUpdateSchema,
    service: RatingRepository = Depends(get_rating_service),
):
    """Replace every field of a rating."""
    rating = service.update(body.to_entity(rating_id))
    return RatingSchema.from_entity(rating)


@router.delete("/ratings/{rating_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_rating(
    rating_id: int,
    service: RatingRepository = Depends(get_rating_service),
):
    service.delete(rating_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/targets/{target}/ratings", response_model=RatingListResponseSchema)
def list_target_ratings(
    target: int,
    service: RatingRepository = Depends(get_rating_service),
):
    """List every rating of a target, oldest id first. Empty when none."""
    ratings = service.list_by_target(target)
    return RatingListResponseSchema(
        target=target,
        ratings=[RatingSchema.from_entity(r) for r in ratings],
    )
