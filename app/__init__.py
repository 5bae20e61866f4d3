"""
Movies API application package.

This package contains the HTTP API, the movie validation and JSON Patch
logic, database operations, and utilities.
"""

__version__ = "1.0.0"
