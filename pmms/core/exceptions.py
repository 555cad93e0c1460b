# pmms/core/exceptions.py

"""
애플리케이션 예외 분류와 전역 예외 핸들러를 정의하는 모듈입니다.

모든 예외는 FastAPI의 HTTPException 을 상속하므로 CRUD/라우터 어디에서 발생하든
그대로 HTTP 응답으로 변환됩니다.

| 클래스                  | 상태 코드 |
|-------------------------|-----------|
| ValidationError         | 400       |
| InsufficientStockError  | 400       |
| AuthenticationError     | 401       |
| PermissionDeniedError   | 403       |
| NotFoundError           | 404       |
| ConflictError           | 409       |
"""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from pmms.core.config import settings

logger = logging.getLogger(__name__)


class AppError(HTTPException):
    """애플리케이션 예외의 공통 부모 클래스입니다."""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Internal server error"

    def __init__(self, detail: Optional[Any] = None, headers: Optional[Dict[str, str]] = None):
        super().__init__(
            status_code=self.status_code,
            detail=detail if detail is not None else self.default_detail,
            headers=headers,
        )


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Validation error"


class InsufficientStockError(ValidationError):
    default_detail = "Not enough inventory available"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"


class AuthenticationError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Could not validate credentials"

    def __init__(self, detail: Optional[Any] = None):
        super().__init__(detail, headers={"WWW-Authenticate": "Bearer"})


class PermissionDeniedError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Not enough permissions"


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Resource already exists"


# =============================================================================
# 전역 예외 핸들러
# =============================================================================
async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """요청 본문/쿼리 검증 실패를 필드별 상세 정보와 함께 400 으로 반환합니다."""
    errors = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        errors.append({"field": ".".join(loc), "message": error.get("msg", "")})
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Validation error", "errors": errors},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    처리되지 않은 예외를 500 으로 변환합니다.
    내부 메시지는 개발 환경 또는 디버그 모드에서만 응답에 포함됩니다.
    """
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    content: Dict[str, Any] = {"detail": "Internal server error"}
    if settings.expose_error_details:
        content["message"] = str(exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
