"""
Core movie logic: field validation rules and the JSON Patch interpreter.
"""

from app.core.json_patch import JsonPatchError, apply_patch
from app.core.validation import MOVIE_RULES, describe_errors, field_constraints

__all__ = [
    'JsonPatchError',
    'apply_patch',
    'MOVIE_RULES',
    'describe_errors',
    'field_constraints',
]
