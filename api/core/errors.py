"""
Error envelope shared by every endpoint: `{"error": ..., "details": ...}`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import asyncpg
from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

logger = logging.getLogger(__name__)


class ApiError(Exception):
    def __init__(self, status_code: int, error: str, details: Any = None) -> None:
        super().__init__(error)
        self.status_code = status_code
        self.error = error
        self.details = details


def error_details(exc: BaseException) -> dict[str, Any]:
    """
    Raw information about a failure, safe to serialize into a response.
    """
    details: dict[str, Any] = {
        "type": exc.__class__.__name__,
        "message": str(exc),
    }
    if isinstance(exc, ValidationError):
        details["errors"] = exc.errors(include_url=False, include_context=False)
    if isinstance(exc, asyncpg.PostgresError):
        for attr in ("sqlstate", "constraint_name", "table_name", "column_name", "detail"):
            value = getattr(exc, attr, None)
            if value is not None:
                details[attr] = value
    return details


@contextmanager
def reported_as(message: str) -> Iterator[None]:
    """
    Turn any failure inside the block into a 400 with `message`.

    ApiError raised inside the block passes through untouched.
    """
    try:
        yield
    except ApiError:
        raise
    except Exception as exc:
        logger.warning("request_failed error=%r", message, exc_info=True)
        raise ApiError(status.HTTP_400_BAD_REQUEST, message, details=error_details(exc)) from exc


def _envelope(error: str, details: Any = None) -> dict[str, Any]:
    body: dict[str, Any] = {"error": error}
    if details is not None:
        body["details"] = details
    return body


async def api_error_handler(_: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(_envelope(exc.error, exc.details)),
    )


async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder(_envelope("Requisição inválida", exc.errors())),
    )


def missing_row(error: str, row_id: int) -> ApiError:
    return ApiError(
        status.HTTP_400_BAD_REQUEST,
        error,
        details={"message": "Registro não encontrado", "id": row_id},
    )
