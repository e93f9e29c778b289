"""ORM Models: SQLAlchemy declarative table definitions.

Invariants:
    - All models imported here so Base.metadata is complete before create_all()
"""

from movie_api.models.movie import Movie  # noqa: F401
