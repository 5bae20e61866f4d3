"""
Exception handlers turning validation and patch failures into responses.
"""

import logging
from typing import Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.json_patch import JsonPatchError
from app.core.validation import describe_errors

logger = logging.getLogger(__name__)

VALIDATION_DETAIL = "One or more validation errors occurred."
PATCH_DETAIL = "Invalid patch document."


def validation_problem(
    errors: Dict[str, List[str]],
    status_code: int = status.HTTP_400_BAD_REQUEST,
) -> JSONResponse:
    """Build the field-error response body."""
    return JSONResponse(
        status_code=status_code,
        content={"detail": VALIDATION_DETAIL, "errors": errors},
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = describe_errors(exc.errors())
    logger.warning("%s %s rejected: %s", request.method, request.url.path, errors)
    return validation_problem(errors)


async def patch_error_handler(request: Request, exc: JsonPatchError) -> JSONResponse:
    logger.warning("%s %s bad patch: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": PATCH_DETAIL, "errors": {"patch": [str(exc)]}},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(JsonPatchError, patch_error_handler)
