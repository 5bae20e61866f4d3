"""
SQLAlchemy ORM models for the movies database.

This module defines the single Movie table. Field constraints on title and
duration are enforced by the validation rule table before rows reach the
store; the column definitions only mirror their shape.
"""

from typing import Optional
from sqlalchemy import Integer, String, Index
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


class Movie(Base):
    """
    Movie table storing one record per film.

    Attributes:
        id: Primary key, assigned by the store on insert
        title: Movie title (required, at most 50 characters)
        duration: Running time in minutes (required, 1 to 360)
        director: Director name (optional)
        genre: Genre label (optional)
    """
    __tablename__ = 'movies'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(50), nullable=False)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)
    director: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    genre: Mapped[Optional[str]] = mapped_column(String, nullable=True)

    __table_args__ = (
        Index('idx_movies_title', 'title'),
    )

    def __repr__(self) -> str:
        return f"<Movie(id={self.id}, title='{self.title}', duration={self.duration})>"
