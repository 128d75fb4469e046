# catalog_service/errors.py

"""
HTTP translation of the Catalog Service errors.
`register_exception_handlers` maps domain errors to client-visible responses
so route functions never build error bodies.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .exceptions import InvalidRequestError, NotFoundError

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."


def _validation_body(errors):
    return {"detail": "Validation failed", "errors": errors}


def _field_name(loc) -> str:
    # loc looks like ("body", "price") or ("query", "min_price")
    parts = [str(part) for part in loc if part not in ("body", "query", "path")]
    return ".".join(parts) or "request"


async def not_found_handler(request: Request, exc: NotFoundError):
    logger.warning(f"{request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"field": _field_name(err.get("loc", ())), "message": err.get("msg", "")}
        for err in exc.errors()
    ]
    logger.warning(f"{request.method} {request.url.path}: validation failed: {errors}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=_validation_body(errors))


async def invalid_request_handler(request: Request, exc: InvalidRequestError):
    errors = [{"field": exc.field, "message": exc.message}]
    logger.warning(f"{request.method} {request.url.path}: validation failed: {errors}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=_validation_body(errors))


async def unexpected_error_handler(request: Request, exc: Exception):
    logger.error(f"Unexpected error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": UNEXPECTED_ERROR_MESSAGE},
    )


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(InvalidRequestError, invalid_request_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
