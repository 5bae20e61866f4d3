"""
JSON Patch (RFC 6902) interpreter.

Applies ``add``, ``remove``, ``replace``, ``move``, ``copy`` and ``test``
operations, addressed by JSON Pointers (RFC 6901), to a deep copy of a plain
JSON-like document. The input document is never modified.
"""

import copy
from typing import Any, Dict, List, Sequence, Tuple

OPERATIONS = ("add", "remove", "replace", "move", "copy", "test")


class JsonPatchError(ValueError):
    """Raised when a patch document is malformed or an operation fails."""

    def __init__(self, message: str, index: int | None = None):
        self.index = index
        if index is not None:
            message = f"Operation {index}: {message}"
        super().__init__(message)


def parse_pointer(pointer: str) -> List[str]:
    """
    Split a JSON Pointer into its unescaped reference tokens.

    ``""`` addresses the whole document; ``"/a~1b/~0c"`` yields
    ``["a/b", "~c"]``.
    """
    if not isinstance(pointer, str):
        raise JsonPatchError(f"Path must be a string, got {type(pointer).__name__}")
    if pointer == "":
        return []
    if not pointer.startswith("/"):
        raise JsonPatchError(f"Path '{pointer}' must start with '/'")
    return [token.replace("~1", "/").replace("~0", "~") for token in pointer[1:].split("/")]


def _array_index(token: str, array: list, allow_end: bool) -> int:
    if token == "-" and allow_end:
        return len(array)
    if not (token.isascii() and token.isdigit()) or (len(token) > 1 and token.startswith("0")):
        raise JsonPatchError(f"Invalid array index '{token}'")
    index = int(token)
    upper = len(array) if allow_end else len(array) - 1
    if index > upper:
        raise JsonPatchError(f"Array index {index} out of range")
    return index


def _resolve_parent(doc: Any, tokens: List[str]) -> Tuple[Any, str]:
    """Walk to the container holding the last token."""
    target = doc
    for token in tokens[:-1]:
        if isinstance(target, dict):
            if token not in target:
                raise JsonPatchError(f"Path segment '{token}' does not exist")
            target = target[token]
        elif isinstance(target, list):
            target = target[_array_index(token, target, allow_end=False)]
        else:
            raise JsonPatchError(f"Cannot traverse into scalar at '{token}'")
    return target, tokens[-1]


def _get(doc: Any, tokens: List[str]) -> Any:
    if not tokens:
        return doc
    parent, key = _resolve_parent(doc, tokens)
    if isinstance(parent, dict):
        if key not in parent:
            raise JsonPatchError(f"Member '{key}' does not exist")
        return parent[key]
    if isinstance(parent, list):
        return parent[_array_index(key, parent, allow_end=False)]
    raise JsonPatchError(f"Cannot read '{key}' from a scalar")


def _add(doc: Any, tokens: List[str], value: Any) -> Any:
    if not tokens:
        return value
    parent, key = _resolve_parent(doc, tokens)
    if isinstance(parent, dict):
        parent[key] = value
    elif isinstance(parent, list):
        parent.insert(_array_index(key, parent, allow_end=True), value)
    else:
        raise JsonPatchError(f"Cannot add '{key}' to a scalar")
    return doc


def _remove(doc: Any, tokens: List[str]) -> Tuple[Any, Any]:
    if not tokens:
        raise JsonPatchError("Cannot remove the document root")
    parent, key = _resolve_parent(doc, tokens)
    if isinstance(parent, dict):
        if key not in parent:
            raise JsonPatchError(f"Member '{key}' does not exist")
        return doc, parent.pop(key)
    if isinstance(parent, list):
        return doc, parent.pop(_array_index(key, parent, allow_end=False))
    raise JsonPatchError(f"Cannot remove '{key}' from a scalar")


def _require(operation: Dict[str, Any], member: str) -> Any:
    if member not in operation:
        raise JsonPatchError(f"'{operation['op']}' requires '{member}'")
    return operation[member]


def apply_operation(doc: Any, operation: Dict[str, Any]) -> Any:
    """Apply one operation in place and return the (possibly new) root."""
    if not isinstance(operation, dict):
        raise JsonPatchError("Operation must be an object")
    op = operation.get("op")
    if op not in OPERATIONS:
        raise JsonPatchError(f"Unknown operation '{op}'")
    path = parse_pointer(_require(operation, "path"))

    if op == "add":
        return _add(doc, path, copy.deepcopy(_require(operation, "value")))

    if op == "remove":
        doc, _ = _remove(doc, path)
        return doc

    if op == "replace":
        value = copy.deepcopy(_require(operation, "value"))
        _get(doc, path)
        if not path:
            return value
        doc, _ = _remove(doc, path)
        return _add(doc, path, value)

    if op == "test":
        expected = _require(operation, "value")
        actual = _get(doc, path)
        if actual != expected:
            raise JsonPatchError(
                f"Test failed at '{operation['path']}': expected {expected!r}, got {actual!r}"
            )
        return doc

    from_path = parse_pointer(_require(operation, "from"))

    if op == "move":
        if path[:len(from_path)] == from_path and len(path) > len(from_path):
            raise JsonPatchError("Cannot move a value into one of its own children")
        doc, value = _remove(doc, from_path)
        return _add(doc, path, value)

    # copy
    return _add(doc, path, copy.deepcopy(_get(doc, from_path)))


def apply_patch(doc: Any, patch: Sequence[Dict[str, Any]]) -> Any:
    """
    Apply a patch document to a copy of ``doc``.

    Operations run in order; the first failure aborts the whole patch.

    Args:
        doc: JSON-like document (dicts, lists, scalars)
        patch: Sequence of operation objects

    Returns:
        The patched copy

    Raises:
        JsonPatchError: If the patch is malformed or any operation fails
    """
    if not isinstance(patch, (list, tuple)):
        raise JsonPatchError("Patch document must be an array of operations")

    result = copy.deepcopy(doc)
    for index, operation in enumerate(patch):
        try:
            result = apply_operation(result, operation)
        except JsonPatchError as exc:
            if exc.index is not None:
                raise
            raise JsonPatchError(str(exc), index=index) from None
    return result
