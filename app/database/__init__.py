"""
Database module for the movies service.

This module provides the Movie model, connection management, CRUD operations
and the repository interface for the SQLite database using SQLAlchemy ORM.
"""

from app.database.models import Base, Movie
from app.database.connection import DatabaseManager, get_db_manager
from app.database.init_db import init_database, verify_schema
from app.database import crud
from app.database.repository import (
    MovieRepository,
    SqlMovieRepository,
    InMemoryMovieRepository,
)

__all__ = [
    # Models
    'Base',
    'Movie',
    # Connection
    'DatabaseManager',
    'get_db_manager',
    # Initialization
    'init_database',
    'verify_schema',
    # CRUD module
    'crud',
    # Repositories
    'MovieRepository',
    'SqlMovieRepository',
    'InMemoryMovieRepository',
]
