"""
Field-level validation rules for movie payloads.

The rules are plain data. ``field_constraints`` turns them into keyword
arguments for pydantic's ``Field`` so the schemas enforce them, and
``describe_errors`` maps pydantic's error entries back to each rule's
message.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Sequence

REQUIRED = "required"
MAX_LENGTH = "max_length"
RANGE = "range"

# pydantic error types raised by the constraint each rule kind installs
ERROR_TYPES = {
    REQUIRED: {"missing", "string_pattern_mismatch"},
    MAX_LENGTH: {"string_too_long"},
    RANGE: {"greater_than_equal", "less_than_equal"},
}


@dataclass(frozen=True)
class FieldRule:
    """One declarative constraint on one field."""

    field: str
    kind: str
    message: str
    params: Dict[str, Any] = field(default_factory=dict)


MOVIE_RULES: Sequence[FieldRule] = (
    # A title made only of whitespace counts as missing
    FieldRule("title", REQUIRED, "The movie title is required.", {"pattern": r"^\s*\S"}),
    FieldRule(
        "title", MAX_LENGTH,
        "The movie title cannot be longer than 50 characters",
        {"max": 50},
    ),
    FieldRule("duration", REQUIRED, "The duration field is required"),
    FieldRule(
        "duration", RANGE,
        "The duration should have at least 1 minute and at most 360 minutes",
        {"min": 1, "max": 360},
    ),
)


def field_constraints(name: str, rules: Sequence[FieldRule] = MOVIE_RULES) -> Dict[str, Any]:
    """
    Build pydantic ``Field`` keyword arguments for one field.

    A field with a ``required`` rule gets no default; any other field
    defaults to None.

    Args:
        name: Field name
        rules: Rule table to read

    Returns:
        Keyword arguments for ``pydantic.Field``
    """
    kwargs: Dict[str, Any] = {"default": None}
    for rule in rules:
        if rule.field != name:
            continue
        if rule.kind == REQUIRED:
            kwargs.pop("default", None)
            if "pattern" in rule.params:
                kwargs["pattern"] = rule.params["pattern"]
        elif rule.kind == MAX_LENGTH:
            kwargs["max_length"] = rule.params["max"]
        elif rule.kind == RANGE:
            kwargs["ge"] = rule.params["min"]
            kwargs["le"] = rule.params["max"]
        else:
            raise ValueError(f"Unknown rule kind: {rule.kind}")
    return kwargs


def _rule_for(name: str, error: Dict[str, Any], rules: Sequence[FieldRule]) -> FieldRule | None:
    for rule in rules:
        if rule.field != name:
            continue
        if error.get("type") in ERROR_TYPES[rule.kind]:
            return rule
        # An explicit null on a required field reads as missing
        if rule.kind == REQUIRED and "input" in error and error["input"] is None:
            return rule
    return None


def describe_errors(
    errors: Iterable[Dict[str, Any]],
    rules: Sequence[FieldRule] = MOVIE_RULES,
) -> Dict[str, List[str]]:
    """
    Group pydantic error entries by field, using rule messages where a
    rule explains the error.

    The location prefix (``body``, ``query``, ``path``) is dropped so a
    body error on ``duration`` and a patched-document error on ``duration``
    land under the same key.

    Args:
        errors: Entries from ``ValidationError.errors()``
        rules: Rule table supplying messages

    Returns:
        Field name to list of messages
    """
    grouped: Dict[str, List[str]] = {}
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in ("body", "query", "path"):
            loc = loc[1:]
        name = ".".join(loc) or "body"

        rule = _rule_for(name, error, rules)
        message = rule.message if rule else error.get("msg", "Invalid value")
        messages = grouped.setdefault(name, [])
        if message not in messages:
            messages.append(message)
    return grouped
