"""Movie ORM: the single persisted table.

Invariants:
    - id is an auto-assigned integer primary key (SERIAL on PostgreSQL)
    - title, rating, is_scary are NOT NULL
    - rating is NUMERIC(3,1): the driver returns Decimal, the repository converts
"""

from decimal import Decimal

from sqlalchemy import Boolean, Integer, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column

from movie_api.db.base import Base


class Movie(Base):
    """A movie row, stored with snake_case column names."""
    __tablename__ = "movies"
    # Ids are never reused after a delete, matching SERIAL on PostgreSQL
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    rating: Mapped[Decimal] = mapped_column(
        Numeric(3, 1), nullable=False,
    )
    is_scary: Mapped[bool] = mapped_column(Boolean, nullable=False)
