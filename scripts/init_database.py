#!/usr/bin/env python
"""
Database initialization script for the Movies API.

Creates the movies table and optionally seeds a handful of sample records.

Usage:
    # Create tables, keeping any existing data
    python scripts/init_database.py

    # Drop and recreate tables, then add sample movies
    python scripts/init_database.py --reset --seed
"""

import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.api.models.movie import CreateMovie
from app.database import init_database, verify_schema, crud

SAMPLE_MOVIES = [
    {"title": "Inception", "duration": 148, "director": "Christopher Nolan", "genre": "Sci-Fi"},
    {"title": "Spirited Away", "duration": 125, "director": "Hayao Miyazaki", "genre": "Animation"},
    {"title": "City of God", "duration": 130, "director": "Fernando Meirelles", "genre": "Crime"},
    {"title": "Parasite", "duration": 132, "director": "Bong Joon-ho", "genre": "Thriller"},
]


def print_section(title):
    """Print a formatted section header."""
    print(f"\n{'='*60}")
    print(f"{title}")
    print('='*60)


def seed_movies(db_manager, verbose=True):
    """
    Insert the sample movies.

    Args:
        db_manager: DatabaseManager instance
        verbose: Print progress information

    Returns:
        Number of movies inserted
    """
    with db_manager.session_scope() as session:
        for data in SAMPLE_MOVIES:
            movie_in = CreateMovie.model_validate(data)
            movie = crud.create_movie(session, **movie_in.model_dump())
            if verbose:
                print(f"  [{movie.id}] {movie.title} ({movie.duration} min)")
    return len(SAMPLE_MOVIES)


def main():
    """Main entry point for database initialization."""

    parser = argparse.ArgumentParser(
        description="Initialize the Movies API database",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        '--reset',
        action='store_true',
        help='Drop and recreate database tables (WARNING: deletes all data)'
    )
    parser.add_argument(
        '--seed',
        action='store_true',
        help='Insert sample movies after creating tables'
    )
    parser.add_argument(
        '--db-path',
        type=str,
        default='data/movies.db',
        help='Path to SQLite database file (default: data/movies.db)'
    )
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Suppress verbose output'
    )

    args = parser.parse_args()
    verbose = not args.quiet

    if verbose:
        print_section("Movies API Database Initialization")
        print(f"\nDatabase: {args.db_path}")
        print(f"Mode: {'Reset' if args.reset else 'Keep existing'}")

    db_manager = init_database(db_path=args.db_path, reset=args.reset)

    if args.seed:
        if verbose:
            print_section("Seeding sample movies")
        count = seed_movies(db_manager, verbose=verbose)
        if verbose:
            print(f"\nInserted {count} movies")

    if not verify_schema(db_manager):
        print("\n[ERROR] Database initialization failed!")
        sys.exit(1)

    if verbose:
        with db_manager.session_scope() as session:
            print(f"\nDatabase ready: {crud.get_movie_count(session)} movies")


if __name__ == "__main__":
    main()
