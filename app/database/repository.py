"""
Repository interface over movie storage.

The API talks to a ``MovieRepository`` rather than to a session, so the
store behind it can be the SQLAlchemy table or a plain in-memory map.
"""

import itertools
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from app.database import crud
from app.database.crud import MUTABLE_FIELDS
from app.database.models import Movie


class MovieRepository(ABC):
    @abstractmethod
    def create(self, movie: Movie) -> Movie:
        """Persist a new movie and return it with its assigned ID."""

    @abstractmethod
    def list(self, skip: int = 0, take: int = 50) -> List[Movie]:
        """Return up to ``take`` movies in ID order, after skipping ``skip``."""

    @abstractmethod
    def get(self, movie_id: int) -> Optional[Movie]:
        """Return the movie or None."""

    @abstractmethod
    def update(self, movie_id: int, movie: Movie) -> Optional[Movie]:
        """Replace the mutable fields of the stored movie; None if absent."""

    @abstractmethod
    def delete(self, movie_id: int) -> bool:
        """Remove the movie; False if absent."""


def _mutable_fields(movie: Movie) -> dict:
    return {name: getattr(movie, name) for name in MUTABLE_FIELDS}


class SqlMovieRepository(MovieRepository):
    """Repository backed by a SQLAlchemy session."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, movie: Movie) -> Movie:
        return crud.create_movie(self.session, **_mutable_fields(movie))

    def list(self, skip: int = 0, take: int = 50) -> List[Movie]:
        return crud.get_movies(self.session, skip=skip, take=take)

    def get(self, movie_id: int) -> Optional[Movie]:
        return crud.get_movie(self.session, movie_id)

    def update(self, movie_id: int, movie: Movie) -> Optional[Movie]:
        return crud.update_movie(self.session, movie_id, **_mutable_fields(movie))

    def delete(self, movie_id: int) -> bool:
        return crud.delete_movie(self.session, movie_id)


class InMemoryMovieRepository(MovieRepository):
    """
    Repository backed by a dict keyed by ID.

    Reads hand out copies, so callers mutating a returned movie never touch
    the stored one until they call ``update``.
    """

    def __init__(self):
        self._rows: Dict[int, Movie] = {}
        self._ids = itertools.count(1)

    @staticmethod
    def _detach(movie: Movie) -> Movie:
        clone = Movie(**_mutable_fields(movie))
        clone.id = movie.id
        return clone

    def create(self, movie: Movie) -> Movie:
        stored = Movie(**_mutable_fields(movie))
        stored.id = next(self._ids)
        self._rows[stored.id] = stored
        return self._detach(stored)

    def list(self, skip: int = 0, take: int = 50) -> List[Movie]:
        ordered = [self._rows[movie_id] for movie_id in sorted(self._rows)]
        return [self._detach(m) for m in ordered[skip:skip + take]]

    def get(self, movie_id: int) -> Optional[Movie]:
        movie = self._rows.get(movie_id)
        return self._detach(movie) if movie is not None else None

    def update(self, movie_id: int, movie: Movie) -> Optional[Movie]:
        stored = self._rows.get(movie_id)
        if stored is None:
            return None
        for name, value in _mutable_fields(movie).items():
            setattr(stored, name, value)
        return self._detach(stored)

    def delete(self, movie_id: int) -> bool:
        return self._rows.pop(movie_id, None) is not None
