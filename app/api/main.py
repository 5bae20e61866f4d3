"""
FastAPI application entry point for the Movies API.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app import __version__
from app.api.config import (
    get_api_host,
    get_api_port,
    get_database_path,
    get_log_file,
    get_log_level,
    get_sql_echo,
)
from app.api.errors import register_exception_handlers
from app.api.routers import movies, system
from app.database.connection import get_db_manager
from app.utils.logging_config import configure_api_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_api_logging(level=get_log_level(), log_file=get_log_file())
    db_manager = get_db_manager(db_path=get_database_path(), echo=get_sql_echo())
    db_manager.create_tables()
    logger.info("Movies API ready (database %s)", db_manager.db_path)
    yield


app = FastAPI(
    title="Movies API",
    description="REST API for creating, listing, updating and deleting movies",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(movies.router)
app.include_router(system.router)


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "Movies API",
        "docs": "/docs",
        "health": "/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.api.main:app", host=get_api_host(), port=get_api_port())
