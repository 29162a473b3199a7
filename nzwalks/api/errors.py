"""
Exception handlers translating service errors into HTTP responses.

- Request validation failures become 400 with a field-level error list.
- Unknown region/difficulty references become 422.
- Storage failures become a generic 500; details only go to the log.
"""
import logging

from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.requests import Request
from starlette.responses import JSONResponse

from nzwalks.errors import ReferentialIntegrityError, StorageError

logger = logging.getLogger(__name__)

_INTERNAL_ERROR_BODY = {"detail": "Internal server error"}


def _field_name(loc) -> str:
    # loc looks like ("body", "name") or ("path", "id"); a bare ("body",) means the body itself
    parts = [str(p) for p in loc if p not in ("body", "path", "query")]
    return ".".join(parts) if parts else (str(loc[0]) if loc else "")


def validation_errors(exc: RequestValidationError) -> list:
    errors = []
    for err in exc.errors():
        # unparseable JSON reports a character offset as its location
        if err.get("type") == "json_invalid":
            field = "body"
        else:
            field = _field_name(err.get("loc", ()))
        errors.append({"field": field, "message": err.get("msg", "")})
    return errors


async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = validation_errors(exc)
    logger.info("request_invalid: %s %s errors=%s", request.method, request.url.path, errors)
    return JSONResponse({"errors": errors}, status_code=status.HTTP_400_BAD_REQUEST)


async def referential_integrity_handler(request: Request, exc: ReferentialIntegrityError):
    logger.info("reference_missing: %s %s field=%s", request.method, request.url.path, exc.field)
    return JSONResponse(
        {"detail": str(exc), "field": exc.field},
        status_code=422,
    )


async def storage_error_handler(request: Request, exc: Exception):
    logger.error("storage_error: %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(_INTERNAL_ERROR_BODY, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ReferentialIntegrityError, referential_integrity_handler)
    app.add_exception_handler(StorageError, storage_error_handler)
    # Reads are not wrapped by the repositories; treat raw driver failures the same way
    app.add_exception_handler(SQLAlchemyError, storage_error_handler)
