"""Exception handlers rendering domain failures as JSON error responses."""

import structlog
from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError

from storefront.errors import InvalidQuantity, StorefrontError

logger = structlog.get_logger(__name__)


def error_response(code: str, message: str, details: object, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "code": code,
            "message": message,
            "details": details,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StorefrontError)
    async def storefront_error_handler(request: Request, exc: StorefrontError):
        logger.info(
            "Operation failed",
            path=request.url.path,
            code=exc.code,
            message=exc.message,
        )
        return error_response(exc.code, exc.message, exc.details, exc.status_code)

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        messages = exc.messages if isinstance(exc.messages, dict) else {"_entity": [str(exc.messages)]}
        return error_response("ValidationError", "Invalid data", messages, 400)

    @app.exception_handler(ObjectNotFoundError)
    async def not_found_handler(request: Request, exc: ObjectNotFoundError):
        return error_response("ObjectNotFound", str(exc), None, 404)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # A present but non-integer qty is a domain quantity failure
        for error in exc.errors():
            if tuple(error.get("loc", ()))[-1:] == ("qty",) and error.get("type") != "missing":
                failure = InvalidQuantity(error.get("input"))
                return error_response(failure.code, failure.message, failure.details, failure.status_code)
        return await request_validation_exception_handler(request, exc)
