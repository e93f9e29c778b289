"""Movie Repository: one parameterized SQL statement per CRUD operation.

Invariants:
    - Each method issues at most one statement against the movies table
    - Values are always bound parameters, never interpolated into SQL
    - Absence is signalled with None (get/update) or False (delete); no HTTP semantics here
    - Ids above the INTEGER column range are absent without querying
    - Ratings are rounded half-up to one decimal before binding, as NUMERIC(3,1) does on PostgreSQL
    - Writes commit immediately after their single statement

Design Decisions:
    - SQLAlchemy Core statements over ORM unit-of-work: INSERT/UPDATE ... RETURNING
      hands back the persisted row in the same round trip
    - Rating bound as Decimal so NUMERIC(3,1) receives an exact value
"""

from decimal import Decimal, ROUND_HALF_UP

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Row
from sqlalchemy.ext.asyncio import AsyncSession

from movie_api.models.movie import Movie
from movie_api.schemas.movie import MovieBody, MovieResponse

movies = Movie.__table__
_COLUMNS = (movies.c.id, movies.c.title, movies.c.rating, movies.c.is_scary)

# movies.id is a 32-bit INTEGER (SERIAL)
MAX_MOVIE_ID = 2_147_483_647
RATING_STEP = Decimal("0.1")


def row_to_movie(row: Row) -> MovieResponse:
    """Map a snake_case row with a decimal rating to the API representation."""
    return MovieResponse(
        id=row.id,
        title=row.title,
        rating=float(row.rating),
        is_scary=row.is_scary,
    )


def to_stored_rating(rating: float) -> Decimal:
    return Decimal(str(rating)).quantize(RATING_STEP, rounding=ROUND_HALF_UP)


def _values(body: MovieBody) -> dict:
    return {
        "title": body.title,
        "rating": to_stored_rating(body.rating),
        "is_scary": body.is_scary,
    }


def _storable_id(movie_id: int) -> bool:
    return movie_id <= MAX_MOVIE_ID


class MovieRepository:
    """Data access for the movies table, bound to one request's session."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def list_all(self) -> list[MovieResponse]:
        result = await self._db.execute(
            select(*_COLUMNS).order_by(movies.c.id),
        )
        return [row_to_movie(row) for row in result]

    async def get_by_id(self, movie_id: int) -> MovieResponse | None:
        if not _storable_id(movie_id):
            return None
        result = await self._db.execute(
            select(*_COLUMNS).where(movies.c.id == movie_id),
        )
        row = result.first()
        return row_to_movie(row) if row else None

    async def create(self, body: MovieBody) -> MovieResponse:
        result = await self._db.execute(
            insert(movies).values(**_values(body)).returning(*_COLUMNS),
        )
        row = result.one()
        await self._db.commit()
        return row_to_movie(row)

    async def update(
        self, movie_id: int, body: MovieBody,
    ) -> MovieResponse | None:
        """Replace every field of an existing movie."""
        if not _storable_id(movie_id):
            return None
        result = await self._db.execute(
            update(movies)
            .where(movies.c.id == movie_id)
            .values(**_values(body))
            .returning(*_COLUMNS),
        )
        row = result.first()
        await self._db.commit()
        return row_to_movie(row) if row else None

    async def delete(self, movie_id: int) -> bool:
        """Delete a movie. True when a row was removed."""
        if not _storable_id(movie_id):
            return False
        result = await self._db.execute(
            delete(movies).where(movies.c.id == movie_id),
        )
        await self._db.commit()
        return result.rowcount > 0
