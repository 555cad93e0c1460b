# pmms/core/authz.py

"""
역할(role) 기반 접근 제어 정책을 정의하는 모듈입니다.

authorize(role, resource, action) 는 프레임워크에 의존하지 않는 순수 함수이며,
FastAPI 라우터는 pmms.core.dependencies.require_permission 을 통해 이 함수를 사용합니다.
"""

from typing import Dict, FrozenSet, Union

from pmms.domains.usr.models import UserRole

ADMIN = UserRole.ADMIN
MANAGER = UserRole.MANAGER
TECHNICIAN = UserRole.TECHNICIAN

ALL_ROLES: FrozenSet[UserRole] = frozenset({ADMIN, MANAGER, TECHNICIAN})
ADMIN_ONLY: FrozenSet[UserRole] = frozenset({ADMIN})
ADMIN_MANAGER: FrozenSet[UserRole] = frozenset({ADMIN, MANAGER})
ADMIN_TECHNICIAN: FrozenSet[UserRole] = frozenset({ADMIN, TECHNICIAN})

ACTIONS = ("read", "create", "update", "delete")


def _policy(read, create, update, delete) -> Dict[str, FrozenSet[UserRole]]:
    return {"read": read, "create": create, "update": update, "delete": delete}


# 리소스 -> 액션 -> 허용 역할
POLICY: Dict[str, Dict[str, FrozenSet[UserRole]]] = {
    "plants": _policy(ADMIN_MANAGER, ADMIN_ONLY, ADMIN_ONLY, ADMIN_ONLY),
    "vendors": _policy(ALL_ROLES, ADMIN_ONLY, ADMIN_ONLY, ADMIN_ONLY),
    "machines": _policy(ALL_ROLES, ADMIN_ONLY, ADMIN_ONLY, ADMIN_ONLY),
    "inventory": _policy(ALL_ROLES, ADMIN_MANAGER, ADMIN_MANAGER, ADMIN_ONLY),
    "work_orders": _policy(ALL_ROLES, ADMIN_MANAGER, ADMIN_MANAGER, ADMIN_MANAGER),
    "calls": _policy(ALL_ROLES, ADMIN_TECHNICIAN, ADMIN_TECHNICIAN, ADMIN_ONLY),
    "users": _policy(ADMIN_MANAGER, ADMIN_ONLY, ADMIN_ONLY, ADMIN_ONLY),
    # 인증된 사용자라면 누구나 사용할 수 있는 리소스
    "work_order_parts": _policy(ALL_ROLES, ALL_ROLES, ALL_ROLES, ALL_ROLES),
    "work_order_labor": _policy(ALL_ROLES, ALL_ROLES, ALL_ROLES, ALL_ROLES),
    "maintenance_schedules": _policy(ALL_ROLES, ALL_ROLES, ALL_ROLES, ALL_ROLES),
    "reports": _policy(ALL_ROLES, frozenset(), frozenset(), frozenset()),
}


def authorize(role: Union[UserRole, str], resource: str, action: str) -> bool:
    """
    역할이 리소스에 대해 액션을 수행할 수 있는지 반환합니다.
    알 수 없는 역할, 리소스, 액션은 모두 거부됩니다.
    """
    try:
        role = UserRole(role)
    except ValueError:
        return False
    return role in POLICY.get(resource, {}).get(action, frozenset())
