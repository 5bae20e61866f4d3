"""
Pydantic schemas for API request/response validation.
"""

from app.api.models.movie import CreateMovie, UpdateMovie, ReadMovie, MovieResponse

__all__ = [
    "CreateMovie",
    "UpdateMovie",
    "ReadMovie",
    "MovieResponse",
]
