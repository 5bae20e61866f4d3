"""
CRUD operations for the Movie model.

This module provides Create, Read, Update, Delete operations over the
movies table. Every function takes an open session and commits its own
write.
"""

import logging
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.database.models import Movie

logger = logging.getLogger(__name__)

# Columns a caller may overwrite; the primary key is never among them.
MUTABLE_FIELDS = ('title', 'duration', 'director', 'genre')


def create_movie(
    session: Session,
    title: str,
    duration: int,
    director: Optional[str] = None,
    genre: Optional[str] = None
) -> Movie:
    """
    Create a new movie.

    Args:
        session: Database session
        title: Movie title
        duration: Running time in minutes
        director: Director name (optional)
        genre: Genre label (optional)

    Returns:
        Created Movie object with its assigned ID
    """
    movie = Movie(
        title=title,
        duration=duration,
        director=director,
        genre=genre
    )
    session.add(movie)
    session.commit()
    session.refresh(movie)
    logger.info("Created movie %s (%r)", movie.id, movie.title)
    return movie


def get_movie(session: Session, movie_id: int) -> Optional[Movie]:
    """
    Get a movie by ID.

    Args:
        session: Database session
        movie_id: Movie ID

    Returns:
        Movie object or None if not found
    """
    return session.query(Movie).filter(Movie.id == movie_id).first()


def get_movies(
    session: Session,
    skip: int = 0,
    take: int = 50
) -> List[Movie]:
    """
    Get a page of movies ordered by ID.

    Args:
        session: Database session
        skip: Number of records to skip
        take: Maximum number of records to return

    Returns:
        List of Movie objects
    """
    return (
        session.query(Movie)
        .order_by(Movie.id)
        .offset(skip)
        .limit(take)
        .all()
    )


def get_movie_count(session: Session) -> int:
    """Get total count of movies."""
    return session.query(func.count(Movie.id)).scalar()


def update_movie(
    session: Session,
    movie_id: int,
    **kwargs
) -> Optional[Movie]:
    """
    Overwrite the mutable fields of a movie.

    Args:
        session: Database session
        movie_id: Movie ID
        **kwargs: Fields to update (title, duration, director, genre)

    Returns:
        Updated Movie object or None if not found

    Raises:
        ValueError: If a key is not a mutable movie field
    """
    unknown = set(kwargs) - set(MUTABLE_FIELDS)
    if unknown:
        raise ValueError(f"Cannot update movie fields: {', '.join(sorted(unknown))}")

    movie = get_movie(session, movie_id)
    if movie:
        for key, value in kwargs.items():
            setattr(movie, key, value)
        session.commit()
        session.refresh(movie)
        logger.info("Updated movie %s", movie_id)
    return movie


def delete_movie(session: Session, movie_id: int) -> bool:
    """
    Delete a movie.

    Args:
        session: Database session
        movie_id: Movie ID

    Returns:
        True if movie was deleted, False if not found
    """
    movie = get_movie(session, movie_id)
    if movie:
        session.delete(movie)
        session.commit()
        logger.info("Deleted movie %s", movie_id)
        return True
    return False
