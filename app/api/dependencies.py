"""
FastAPI dependency injection for database session and movie repository.
"""

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from app.api.config import get_database_path, get_sql_echo
from app.database.connection import get_db_manager
from app.database.repository import MovieRepository, SqlMovieRepository


def get_db() -> Generator[Session, None, None]:
    """Yield database session for FastAPI Depends()."""
    db_manager = get_db_manager(db_path=get_database_path(), echo=get_sql_echo())
    with db_manager.session_scope() as session:
        yield session


def get_repository(db: Session = Depends(get_db)) -> MovieRepository:
    """Movie repository bound to the request's session."""
    return SqlMovieRepository(db)
