# pmms/domains/wo/models.py

"""
'wo' 도메인 (작업지시 관리)의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

이 모듈은 work_orders, work_order_parts, work_order_labor 테이블에 대한 SQLModel 클래스를 포함합니다.
work_order_parts 의 각 행은 자재 재고를 차감한 한 번의 사용 기록이며,
행이 삭제되면 사용 수량이 재고로 복원됩니다 (소프트 삭제 대상 아님).
"""

from typing import Optional, TYPE_CHECKING
from datetime import date, datetime
from enum import Enum

from sqlmodel import Field, Relationship, SQLModel
from sqlalchemy.types import TIMESTAMP

from pmms.core.database_base import TimestampMixin, SoftDeleteMixin

# 다른 도메인의 모델을 참조해야 할 경우
# TYPE_CHECKING을 사용하여 순환 임포트 문제를 방지합니다.
if TYPE_CHECKING:
    from pmms.domains.inv.models import Inventory
    from pmms.domains.usr.models import User


class WorkOrderStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class WorkOrderPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


# 허용되는 상태 전이 (같은 상태로의 재요청은 항상 허용)
WORK_ORDER_TRANSITIONS = {
    WorkOrderStatus.PENDING: {WorkOrderStatus.IN_PROGRESS, WorkOrderStatus.CANCELLED},
    WorkOrderStatus.IN_PROGRESS: {WorkOrderStatus.COMPLETED, WorkOrderStatus.CANCELLED},
    WorkOrderStatus.COMPLETED: set(),
    WorkOrderStatus.CANCELLED: set(),
}


def can_transition(current: WorkOrderStatus, target: WorkOrderStatus) -> bool:
    return current == target or target in WORK_ORDER_TRANSITIONS[current]


# =============================================================================
# 1. work_orders 테이블 모델
# =============================================================================
class WorkOrderBase(SQLModel):
    """
    work_orders 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    title: str = Field(max_length=100, description="작업지시 제목")
    description: str = Field(description="작업 내용")
    status: WorkOrderStatus = Field(default=WorkOrderStatus.PENDING, description="진행 상태")
    priority: WorkOrderPriority = Field(default=WorkOrderPriority.MEDIUM, description="우선순위")
    machine_id: Optional[int] = Field(default=None, foreign_key="machines.id", description="대상 설비 ID (FK)")
    plant_id: Optional[int] = Field(default=None, foreign_key="plants.id", description="공장 ID (FK)")
    assigned_to: Optional[int] = Field(default=None, foreign_key="users.id", description="담당자 사용자 ID (FK)")
    due_date: Optional[date] = Field(default=None, description="완료 기한")
    completed_date: Optional[datetime] = Field(default=None, sa_type=TIMESTAMP(timezone=True), description="완료 일시")


class WorkOrder(WorkOrderBase, TimestampMixin, SoftDeleteMixin, table=True):
    """
    work_orders 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "work_orders"

    id: Optional[int] = Field(default=None, primary_key=True, description="작업지시 고유 ID")


# =============================================================================
# 2. work_order_parts 테이블 모델 (자재 사용 원장)
# =============================================================================
class WorkOrderPartBase(SQLModel):
    work_order_id: int = Field(foreign_key="work_orders.id", description="작업지시 ID (FK)")
    inventory_id: int = Field(foreign_key="inventory.id", description="사용 자재 ID (FK)")
    quantity_used: int = Field(gt=0, description="사용 수량")


class WorkOrderPart(WorkOrderPartBase, TimestampMixin, table=True):
    __tablename__ = "work_order_parts"

    id: Optional[int] = Field(default=None, primary_key=True, description="자재 사용 기록 고유 ID")

    # 조회 시 selectinload 로 함께 로드합니다.
    inventory: Optional["Inventory"] = Relationship()


# =============================================================================
# 3. work_order_labor 테이블 모델
# =============================================================================
class WorkOrderLaborBase(SQLModel):
    work_order_id: int = Field(foreign_key="work_orders.id", description="작업지시 ID (FK)")
    user_id: int = Field(foreign_key="users.id", description="작업자 사용자 ID (FK)")
    hours_worked: float = Field(ge=0, description="투입 시간")
    labor_date: date = Field(description="작업일")
    notes: Optional[str] = Field(default=None, description="비고")


class WorkOrderLabor(WorkOrderLaborBase, TimestampMixin, table=True):
    __tablename__ = "work_order_labor"

    id: Optional[int] = Field(default=None, primary_key=True, description="인력 투입 기록 고유 ID")

    user: Optional["User"] = Relationship()
