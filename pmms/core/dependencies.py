# pmms/core/dependencies.py

"""
FastAPI 애플리케이션의 의존성 주입(Dependency Injection)을 정의하는 모듈입니다.

- 현재 인증된 사용자 정보 획득 (get_current_user).
- 역할 기반 권한 검사 의존성 팩토리 (require_permission).
"""

import logging
from typing import Callable

from fastapi import Depends

from pmms.core.authz import authorize
from pmms.core.exceptions import PermissionDeniedError
# flake8: noqa
from pmms.core.security import (
    create_access_token,
    create_user_token,
    get_password_hash,
    verify_password,
    oauth2_scheme,
    get_current_user,
)
from pmms.domains.usr.models import User as UsrUser

logger = logging.getLogger(__name__)


def require_permission(resource: str, action: str) -> Callable:
    """
    authorize(role, resource, action) 정책을 검사하는 의존성을 생성합니다.
    인증되지 않은 경우 401, 역할이 허용되지 않은 경우 403을 발생시킵니다.

    사용 예:
        current_user: UsrUser = Depends(deps.require_permission("plants", "create"))
    """
    async def _check_permission(current_user: UsrUser = Depends(get_current_user)) -> UsrUser:
        if not authorize(current_user.role, resource, action):
            logger.warning(
                "권한 거부: user=%s role=%s resource=%s action=%s",
                current_user.id, current_user.role.value, resource, action,
            )
            raise PermissionDeniedError(f"Role '{current_user.role.value}' is not allowed to {action} {resource}")
        return current_user

    return _check_permission
