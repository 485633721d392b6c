import logging

from fastapi import HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from ewallet.core.request_id import request_id_ctx


logger = logging.getLogger(__name__)


class AppError(Exception):
    """Error de dominio con código y mensaje fijo para el cliente"""

    status_code: int = 400
    code: str = "APP_ERROR"
    message: str = "Solicitud inválida"

    def __init__(self, message: str = None):
        self.message = message or self.message
        super().__init__(self.message)


class InvalidCredentials(AppError):
    code = "INVALID_CREDENTIALS"
    message = "Incorrect email/password combination"


class PasswordMismatch(AppError):
    code = "PASSWORD_MISMATCH"
    message = "Password and password confirmation do not match"


class InvalidResetToken(AppError):
    code = "INVALID_RESET_TOKEN"
    message = "Invalid reset password token"


class ExpiredResetToken(AppError):
    code = "EXPIRED_RESET_TOKEN"
    message = "Reset password token is expired"


class DuplicateEmail(AppError):
    code = "DUPLICATE_EMAIL"

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"The provided email [{email}] is already in use")


class NotFound(AppError):
    status_code = 404
    code = "NOT_FOUND"
    message = "Resource not found"


class UserNotFound(NotFound):
    code = "USER_NOT_FOUND"
    message = "User not found"


class MailDeliveryError(AppError):
    status_code = 502
    code = "MAIL_DELIVERY_FAILED"
    message = "Could not send email"


def _get_request_id(request: Request) -> str:
    header_request_id = request.headers.get("X-Request-ID")
    if header_request_id:
        return header_request_id
    ctx_request_id = request_id_ctx.get()
    return ctx_request_id or ""


def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "detail": exc.message,
            "code": exc.code,
            "request_id": _get_request_id(request),
        },
    )


def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "detail": exc.detail,
            "code": "HTTP_EXCEPTION",
            "request_id": _get_request_id(request),
        },
        headers=getattr(exc, "headers", None),
    )


def starlette_http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "detail": exc.detail,
            "code": "HTTP_EXCEPTION",
            "request_id": _get_request_id(request),
        },
    )


def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={
            "detail": jsonable_encoder(exc.errors()),
            "code": "VALIDATION_ERROR",
            "request_id": _get_request_id(request),
        },
    )


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    return JSONResponse(
        status_code=429,
        content={
            "detail": "Too many requests",
            "code": "RATE_LIMIT_EXCEEDED",
            "request_id": _get_request_id(request),
        },
        headers={"Retry-After": str(getattr(exc, "retry_after", ""))} if getattr(exc, "retry_after", None) else None,
    )


def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", extra={"request_id": _get_request_id(request)})
    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "code": "INTERNAL_ERROR",
            "request_id": _get_request_id(request),
        },
    )
