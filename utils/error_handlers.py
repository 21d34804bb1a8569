from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from interfaces.validators import REQUIRED_MESSAGES
from logger_manager import log_error, log_warning
from utils.exceptions import AppError


def validation_messages(errors) -> list:
    """One readable message per failed field."""
    messages = []
    for error in errors:
        loc = [part for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = str(loc[-1]) if loc else None
        if error.get("type") == "missing":
            if field is None:
                messages.append("Request body is required")
            else:
                messages.append(REQUIRED_MESSAGES.get(field, f"{field} is required"))
        elif field is not None and error.get("type") != "value_error":
            messages.append(f"{field}: {error.get('msg')}")
        else:
            messages.append(error.get("msg"))
    return messages


async def app_error_handler(request: Request, exc: AppError):
    log_warning(f"{request.method} {request.url.path} failed with {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError):
    messages = validation_messages(exc.errors())
    log_warning(f"Validation failed for {request.method} {request.url.path}: {messages}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": messages})


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    message = exc.detail
    if exc.status_code == status.HTTP_404_NOT_FOUND and message == "Not Found":
        message = f"Not Found - {request.url.path}"
    return JSONResponse(status_code=exc.status_code, content={"message": message}, headers=exc.headers)


async def integrity_error_handler(request: Request, exc: IntegrityError):
    log_error(f"Integrity error on {request.method} {request.url.path}: {exc.orig}", exc)
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"message": "Record already exists"})


async def unhandled_error_handler(request: Request, exc: Exception):
    log_error(f"Unhandled error on {request.method} {request.url.path}: {str(exc)}", exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"message": str(exc)})


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
