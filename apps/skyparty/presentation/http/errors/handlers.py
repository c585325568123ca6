"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
응답 형식: {"success": false, "error": <message>, "code": <CODE>}
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from apps.skyparty.application.common.exceptions import (
    ApplicationError,
    CharacterNotFoundError,
    DuplicateUserError,
    GiftNotFoundError,
    InvalidActivationCodeError,
    InvalidCredentialsError,
    InvalidPartyError,
    InvalidUserIdFormatError,
    MissingUserIdError,
    UnauthorizedInternalCallError,
    UserNotFoundError,
    ValidationError,
)
from apps.skyparty.domain.exceptions import (
    CharacterNotOwnedError,
    DomainError,
    GiftAlreadyProcessedError,
    InsufficientFundsError,
    InvalidGiftTransitionError,
)

logger = logging.getLogger(__name__)

# 예외 클래스 → (HTTP status, code). 하위 클래스가 먼저 매칭됩니다 (MRO).
ERROR_MAPPING: dict[type[Exception], tuple[int, str]] = {
    MissingUserIdError: (401, "MISSING_USER_ID"),
    InvalidUserIdFormatError: (401, "INVALID_USER_ID_FORMAT"),
    InvalidCredentialsError: (401, "INVALID_CREDENTIALS"),
    UnauthorizedInternalCallError: (401, "UNAUTHORIZED_INTERNAL_CALL"),
    InvalidActivationCodeError: (400, "INVALID_ACTIVATION_CODE"),
    ValidationError: (400, "VALIDATION_ERROR"),
    UserNotFoundError: (404, "USER_NOT_FOUND"),
    InvalidPartyError: (404, "INVALID_PARTY"),
    GiftNotFoundError: (404, "GIFT_NOT_FOUND"),
    CharacterNotFoundError: (404, "CHARACTER_NOT_FOUND"),
    DuplicateUserError: (409, "DUPLICATE_USER"),
    InsufficientFundsError: (400, "INSUFFICIENT_FUNDS"),
    GiftAlreadyProcessedError: (400, "GIFT_ALREADY_PROCESSED"),
    InvalidGiftTransitionError: (400, "INVALID_STATE"),
    CharacterNotOwnedError: (400, "CHARACTER_NOT_OWNED"),
    DomainError: (400, "DOMAIN_ERROR"),
    ApplicationError: (400, "APPLICATION_ERROR"),
}


def error_response(status_code: int, message: str, code: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message, "code": code},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    async def mapped_error_handler(request: Request, exc: Exception) -> JSONResponse:
        for exc_type in type(exc).__mro__:
            if exc_type in ERROR_MAPPING:
                status_code, code = ERROR_MAPPING[exc_type]
                break
        else:
            status_code, code = 400, "APPLICATION_ERROR"
        return error_response(status_code, getattr(exc, "message", str(exc)), code)

    for exc_type in ERROR_MAPPING:
        app.add_exception_handler(exc_type, mapped_error_handler)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
        return error_response(400, message, "VALIDATION_ERROR")

    @app.exception_handler(SQLAlchemyError)
    async def storage_error_handler(request: Request, exc: SQLAlchemyError):
        logger.exception(
            "Storage failure",
            exc_info=exc,
            extra={"path": request.url.path, "method": request.method},
        )
        return error_response(500, "Storage failure", "STORAGE_ERROR")
