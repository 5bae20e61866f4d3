"""
Pydantic schemas for Movie API.

Constraints on title and duration come from the rule table in
``app.core.validation``.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from app.core.validation import field_constraints


class CreateMovie(BaseModel):
    """Request body for creating a movie."""

    title: str = Field(**field_constraints("title"))
    duration: int = Field(strict=True, **field_constraints("duration"))
    director: str | None = None
    genre: str | None = None


class UpdateMovie(BaseModel):
    """Request body for replacing a movie; also the document a patch edits."""

    title: str = Field(**field_constraints("title"))
    duration: int = Field(strict=True, **field_constraints("duration"))
    director: str | None = None
    genre: str | None = None


class ReadMovie(BaseModel):
    """Response model for reading a movie."""

    title: str
    duration: int
    director: str | None
    genre: str | None
    query_time: datetime


class MovieResponse(BaseModel):
    """Response model for a newly created movie."""

    id: int
    title: str
    duration: int
    director: str | None
    genre: str | None

    class Config:
        from_attributes = True
