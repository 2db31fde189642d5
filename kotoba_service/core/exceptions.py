from typing import Any

from fastapi import Request, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

logger = logging.getLogger(__name__)

GENERIC_SERVER_ERROR = "服务器错误"
INVALID_REQUEST_MESSAGE = "请求格式错误"


def describe_validation_error(exc: RequestValidationError) -> str:
    """First parser complaint, e.g. ``JSON decode error: Expecting value``."""
    errors = exc.errors()
    if not errors:
        return INVALID_REQUEST_MESSAGE
    first = errors[0]
    message = first.get("msg") or INVALID_REQUEST_MESSAGE
    detail = (first.get("ctx") or {}).get("error")
    return f"{message}: {detail}" if detail else message


class ServiceError(Exception):
    """Base exception for service-related errors."""
    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

    def to_payload(self) -> dict:
        return {"error": {"message": self.message}}


class MissingCredentialError(ServiceError):
    """Raised when neither the caller nor the server supplies an API key."""
    def __init__(self, message: str = "未提供API密钥，请在设置中配置API密钥或联系管理员配置服务器密钥"):
        super().__init__(message, status_code=500)


class MissingRequiredFieldError(ServiceError):
    """Raised when word, pos or sentence is absent."""
    def __init__(self, message: str = "缺少必要的参数"):
        super().__init__(message, status_code=400)


class UpstreamError(ServiceError):
    """The upstream API answered with a non-2xx status.

    ``error`` is relayed to the caller as-is, whatever shape the upstream used.
    """
    def __init__(self, status_code: int, error: Any):
        self.error = error
        message = error.get("message") if isinstance(error, dict) else None
        super().__init__(str(message or error), status_code=status_code)

    def to_payload(self) -> dict:
        return {"error": self.error}


class UpstreamRequestError(ServiceError):
    """The upstream call failed in transport or returned an unreadable body."""
    def __init__(self, message: str = ""):
        super().__init__(message or GENERIC_SERVER_ERROR, status_code=500)


def setup_exception_handlers(app: FastAPI):
    """Add custom exception handlers to the FastAPI app."""

    @app.exception_handler(ServiceError)
    async def handle_service_error(request: Request, exc: ServiceError):
        logger.warning(f"Service error occurred: {exc.message}", extra={"error_type": type(exc).__name__})
        return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": {"message": str(exc.detail)}},
            headers=getattr(exc, "headers", None),
        )

    # An unreadable body fails like the upstream call would: 500 with the parser message
    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        message = describe_validation_error(exc)
        logger.warning(f"Rejected unreadable request body: {message}")
        return JSONResponse(status_code=500, content={"error": {"message": message}})

    @app.exception_handler(Exception)
    async def handle_generic_exception(request: Request, exc: Exception):
        logger.error(f"An unexpected error occurred: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": {"message": str(exc) or GENERIC_SERVER_ERROR}},
        )

    logger.info("Exception handlers configured.")
