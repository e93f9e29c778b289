"""Movie Routes: CRUD endpoints for /movies.

Invariants:
    - Path id and request body validated by FastAPI/Pydantic before the handler runs
    - Each handler makes one repository call, then a presence check
    - Missing rows raise MovieNotFoundError -> 404 {"error": "Movie not found"},
      logged once by the error handler
    - PUT is a full replacement; DELETE returns 204 with an empty body
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from movie_api.core.errors import MovieNotFoundError
from movie_api.infrastructure.database import get_db
from movie_api.infrastructure.movie_repository import MovieRepository
from movie_api.schemas.movie import ErrorResponse, MovieBody, MovieResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/movies", tags=["movies"])

MovieId = Annotated[int, Path(ge=1, description="Positive movie id")]
NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


def get_movie_repository(
    db: AsyncSession = Depends(get_db),
) -> MovieRepository:
    return MovieRepository(db)


Repository = Annotated[MovieRepository, Depends(get_movie_repository)]


@router.get("", response_model=list[MovieResponse])
async def list_movies(repo: Repository):
    """All movies in creation order."""
    return await repo.list_all()


@router.get("/{movie_id}", response_model=MovieResponse, responses=NOT_FOUND)
async def get_movie(movie_id: MovieId, repo: Repository):
    movie = await repo.get_by_id(movie_id)
    if not movie:
        raise MovieNotFoundError(movie_id)
    return movie


@router.post(
    "", response_model=MovieResponse, status_code=status.HTTP_201_CREATED,
)
async def create_movie(body: MovieBody, repo: Repository):
    movie = await repo.create(body)
    logger.info(
        f"Created movie {movie.id}: {movie.title}",
        extra={"movie_id": movie.id},
    )
    return movie


@router.put("/{movie_id}", response_model=MovieResponse, responses=NOT_FOUND)
async def update_movie(movie_id: MovieId, body: MovieBody, repo: Repository):
    """Replace all fields of a movie."""
    movie = await repo.update(movie_id, body)
    if not movie:
        raise MovieNotFoundError(movie_id)
    logger.info(f"Updated movie {movie_id}", extra={"movie_id": movie_id})
    return movie


@router.delete(
    "/{movie_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
)
async def delete_movie(movie_id: MovieId, repo: Repository):
    if not await repo.delete(movie_id):
        raise MovieNotFoundError(movie_id)
    logger.info(f"Deleted movie {movie_id}", extra={"movie_id": movie_id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
