"""
Conversions between the API schemas and the Movie entity.

Each function lists the fields it carries. Fields missing from the target
shape are dropped: ``id`` never flows into an update document or a read
response.
"""

from datetime import datetime

from app.api.models.movie import CreateMovie, UpdateMovie, ReadMovie, MovieResponse
from app.database.models import Movie

UPDATE_FIELDS = ("title", "duration", "director", "genre")


def create_to_entity(movie_in: CreateMovie) -> Movie:
    """Build a new, unsaved entity; the store assigns its ID."""
    return Movie(
        title=movie_in.title,
        duration=movie_in.duration,
        director=movie_in.director,
        genre=movie_in.genre,
    )


def apply_update(movie_in: UpdateMovie, movie: Movie) -> Movie:
    """Overwrite the mutable fields of ``movie`` in place."""
    movie.title = movie_in.title
    movie.duration = movie_in.duration
    movie.director = movie_in.director
    movie.genre = movie_in.genre
    return movie


def entity_to_update(movie: Movie) -> UpdateMovie:
    """Snapshot an entity as the document a partial update is applied to."""
    return UpdateMovie(
        title=movie.title,
        duration=movie.duration,
        director=movie.director,
        genre=movie.genre,
    )


def entity_to_read(movie: Movie, query_time: datetime | None = None) -> ReadMovie:
    """Render an entity for reading, stamped with the time of the read."""
    return ReadMovie(
        title=movie.title,
        duration=movie.duration,
        director=movie.director,
        genre=movie.genre,
        query_time=query_time or datetime.now(),
    )


def entity_to_response(movie: Movie) -> MovieResponse:
    """Render a freshly created entity, ID included."""
    return MovieResponse(
        id=movie.id,
        title=movie.title,
        duration=movie.duration,
        director=movie.director,
        genre=movie.genre,
    )
