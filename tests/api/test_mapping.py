"""
Unit tests for schema/entity conversions.
"""

from datetime import datetime

from app.api import mapping
from app.api.models.movie import CreateMovie, UpdateMovie
from app.database.models import Movie


def stored_movie():
    movie = Movie(title="Inception", duration=148, director="Christopher Nolan", genre="Sci-Fi")
    movie.id = 7
    return movie


class TestMapping:
    """Tests for each conversion direction."""

    def test_create_to_entity_leaves_id_unset(self):
        """Test that a new entity has no ID yet."""
        movie = mapping.create_to_entity(CreateMovie(title="Heat", duration=170))

        assert movie.id is None
        assert movie.title == "Heat"
        assert movie.duration == 170
        assert movie.director is None

    def test_apply_update_overwrites_in_place(self):
        """Test that an update overwrites every field of the entity."""
        movie = stored_movie()

        result = mapping.apply_update(UpdateMovie(title="Tenet", duration=150), movie)

        assert result is movie
        assert movie.id == 7
        assert movie.title == "Tenet"
        assert movie.duration == 150
        assert movie.director is None
        assert movie.genre is None

    def test_entity_to_update_drops_id(self):
        """Test that the update shape carries no ID."""
        update = mapping.entity_to_update(stored_movie())

        assert update.model_dump() == {
            "title": "Inception",
            "duration": 148,
            "director": "Christopher Nolan",
            "genre": "Sci-Fi",
        }

    def test_entity_to_read_stamps_time(self):
        """Test that the read shape gets the current time."""
        before = datetime.now()
        read = mapping.entity_to_read(stored_movie())

        assert read.title == "Inception"
        assert before <= read.query_time <= datetime.now()
        assert "id" not in read.model_dump()

    def test_entity_to_read_explicit_time(self):
        """Test that a given query time is kept."""
        at = datetime(2024, 1, 1, 12, 0, 0)
        assert mapping.entity_to_read(stored_movie(), query_time=at).query_time == at

    def test_entity_to_response_keeps_id(self):
        """Test that the create response includes the ID."""
        response = mapping.entity_to_response(stored_movie())

        assert response.id == 7
        assert response.genre == "Sci-Fi"

    def test_update_fields_match_schema(self):
        """Test that the update field list matches UpdateMovie."""
        assert set(mapping.UPDATE_FIELDS) == set(UpdateMovie.model_fields)
