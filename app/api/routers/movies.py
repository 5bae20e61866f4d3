"""
Movie API endpoints.
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, HTTPException, Path, Query, Request, Response, status
from pydantic import ValidationError

from app.api import mapping
from app.api.dependencies import get_repository
from app.api.errors import validation_problem
from app.api.models.movie import CreateMovie, UpdateMovie, ReadMovie, MovieResponse
from app.core.json_patch import JsonPatchError, apply_patch
from app.core.validation import describe_errors
from app.database.repository import MovieRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/movie", tags=["movie"])

NOT_FOUND = "Movie not found"

# Range SQLite stores in an INTEGER column
MIN_INT = -2**63
MAX_INT = 2**63 - 1


def _require_movie(repo: MovieRepository, movie_id: int):
    movie = repo.get(movie_id)
    if movie is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return movie


@router.post("", response_model=MovieResponse, status_code=status.HTTP_201_CREATED)
def create_movie(
    movie_in: CreateMovie,
    request: Request,
    response: Response,
    repo: MovieRepository = Depends(get_repository),
):
    """Add a movie; the response points at its GET location."""
    movie = repo.create(mapping.create_to_entity(movie_in))
    response.headers["Location"] = str(request.url_for("get_movie", movie_id=movie.id))
    return mapping.entity_to_response(movie)


@router.get("", response_model=List[ReadMovie])
def list_movies(
    skip: int = Query(0, ge=0, le=MAX_INT),
    take: int = Query(50, ge=0, le=MAX_INT),
    repo: MovieRepository = Depends(get_repository),
):
    """List movies in ID order with skip/take pagination."""
    return [mapping.entity_to_read(m) for m in repo.list(skip=skip, take=take)]


@router.get("/{movie_id}", response_model=ReadMovie)
def get_movie(
    movie_id: int = Path(..., ge=MIN_INT, le=MAX_INT),
    repo: MovieRepository = Depends(get_repository),
):
    """Get movie details by ID."""
    return mapping.entity_to_read(_require_movie(repo, movie_id))


@router.put("/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_movie(
    movie_in: UpdateMovie,
    movie_id: int = Path(..., ge=MIN_INT, le=MAX_INT),
    repo: MovieRepository = Depends(get_repository),
):
    """Replace every mutable field of a movie."""
    movie = _require_movie(repo, movie_id)
    repo.update(movie_id, mapping.apply_update(movie_in, movie))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
def partial_update_movie(
    movie_id: int = Path(..., ge=MIN_INT, le=MAX_INT),
    patch: List[Dict[str, Any]] = Body(...),
    repo: MovieRepository = Depends(get_repository),
):
    """
    Apply a JSON Patch document to a movie.

    The patch runs against the movie's current update shape; the merged
    result is validated before anything is written.
    """
    movie = _require_movie(repo, movie_id)
    patched = apply_patch(mapping.entity_to_update(movie).model_dump(), patch)

    if not isinstance(patched, dict):
        raise JsonPatchError("Patched document must remain an object")
    unknown = sorted(set(patched) - set(mapping.UPDATE_FIELDS))
    if unknown:
        raise JsonPatchError(f"Unknown movie fields: {', '.join(unknown)}")

    try:
        movie_in = UpdateMovie.model_validate(patched)
    except ValidationError as exc:
        errors = describe_errors(exc.errors())
        logger.warning("Patch on movie %s rejected: %s", movie_id, errors)
        return validation_problem(errors, status.HTTP_422_UNPROCESSABLE_ENTITY)

    repo.update(movie_id, mapping.apply_update(movie_in, movie))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_movie(
    movie_id: int = Path(..., ge=MIN_INT, le=MAX_INT),
    repo: MovieRepository = Depends(get_repository),
):
    """Delete a movie permanently."""
    if not repo.delete(movie_id):
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
