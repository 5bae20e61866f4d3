"""
Database initialization and schema creation.

This module provides functions to initialize the database schema and
check that it is in place.
"""

import logging

from sqlalchemy import inspect

from app.database.connection import DatabaseManager, DEFAULT_DB_PATH, get_db_manager

logger = logging.getLogger(__name__)

EXPECTED_TABLES = {'movies'}


def init_database(db_path: str = DEFAULT_DB_PATH, reset: bool = False) -> DatabaseManager:
    """
    Initialize the database and create all tables.

    Args:
        db_path: Path to SQLite database file
        reset: If True, drop existing tables before creating new ones

    Returns:
        DatabaseManager instance
    """
    db_manager = get_db_manager(db_path=db_path)

    if reset:
        db_manager.reset_database()
        logger.info("Database reset complete.")
    else:
        db_manager.create_tables()
        logger.info("Database tables created.")

    return db_manager


def verify_schema(db_manager: DatabaseManager) -> bool:
    """
    Verify that all tables exist in the database.

    Args:
        db_manager: DatabaseManager instance

    Returns:
        True if all tables exist, False otherwise
    """
    existing_tables = set(inspect(db_manager.engine).get_table_names())
    missing_tables = EXPECTED_TABLES - existing_tables

    if missing_tables:
        logger.error("Missing tables: %s", missing_tables)
        return False

    logger.info("All tables exist: %s", existing_tables)
    return True
