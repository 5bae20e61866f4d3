"""
API configuration loaded from environment or defaults.
"""

import os
from pathlib import Path


def get_database_path() -> str:
    """Get database file path from env or default."""
    url = os.getenv("DATABASE_URL", "")
    if url.startswith("sqlite:///"):
        url = url[len("sqlite:///"):]
    return url or str(Path(__file__).resolve().parents[2] / "data" / "movies.db")


def get_sql_echo() -> bool:
    """Whether SQLAlchemy should log every statement."""
    return os.getenv("SQL_ECHO", "false").lower() in ("1", "true", "yes")


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_file() -> str | None:
    """Get log file name from env; None logs to console only."""
    return os.getenv("LOG_FILE") or None


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("API_PORT", "8000"))
