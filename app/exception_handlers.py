import structlog
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.exceptions import AppError, ConflictError, NotFoundError, StorageError, ValidationError

logger = structlog.get_logger()


def _error_response(status_code: int, exc: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": exc.message, "code": exc.code},
    )


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    logger.error("unhandled_app_error", path=request.url.path, error=exc.message)
    return _error_response(500, exc)


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return _error_response(404, exc)


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return _error_response(400, exc)


async def conflict_handler(request: Request, exc: ConflictError) -> JSONResponse:
    return _error_response(400, exc)


async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error("storage_failure", path=request.url.path, error=exc.message)
    return _error_response(500, exc)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    messages = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{field}: {error.get('msg')}" if field else str(error.get("msg")))
    return _error_response(400, ValidationError("; ".join(messages) or "Invalid request"))


def register_exception_handlers(app):
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(ConflictError, conflict_handler)
    app.add_exception_handler(StorageError, storage_error_handler)
    app.add_exception_handler(AppError, app_error_handler)
