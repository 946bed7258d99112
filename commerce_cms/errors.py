import logging
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from typing import Optional

logger = logging.getLogger(__name__)

class ApiError(Exception):
    """Base class for errors rendered as {"success": false, "message": ...}"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal Server Error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

class BadRequest(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Bad Request"

class Unauthorized(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"

class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not Found"

class InternalError(ApiError):
    pass

async def api_error_handler(request: Request, exc: ApiError):
    if exc.status_code >= 500:
        logger.error(f"[{request.method} {request.url.path}] Error: {exc.message}")
        content = {"success": False, "error": exc.message}
    else:
        content = {"success": False, "message": exc.message}
    return JSONResponse(status_code=exc.status_code, content=content)

async def validation_error_handler(request: Request, exc: RequestValidationError):
    # Missing or empty required fields are a plain 400, like any other bad input
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "success": False,
            "message": "Bad Request",
            "errors": jsonable_encoder(exc.errors(), custom_encoder={Exception: str}),
        },
    )

async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"[{request.method} {request.url.path}] Error: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "error": str(exc)},
    )

def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
