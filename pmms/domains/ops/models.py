# pmms/domains/ops/models.py

"""
'ops' 도메인 (운영 정보 관리)의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

이 모듈은 현장 운전원이 접수한 설비 고장 호출(calls) 테이블에 대한 SQLModel 클래스를 포함합니다.
호출은 필요 시 작업지시(work_orders)로 연결됩니다.
"""

from typing import Optional
from datetime import datetime, UTC
from enum import Enum

from sqlmodel import Field, SQLModel
from sqlalchemy.types import TIMESTAMP

from pmms.core.database_base import TimestampMixin, SoftDeleteMixin


class CallStatus(str, Enum):
    REPORTED = "reported"
    ASSIGNED = "assigned"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


# =============================================================================
# 1. calls 테이블 모델
# =============================================================================
class CallBase(SQLModel):
    """
    calls 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    shift: int = Field(ge=1, le=3, description="근무조 (1, 2, 3)")
    line: str = Field(max_length=50, description="생산 라인")
    machine_id: Optional[int] = Field(default=None, foreign_key="machines.id", description="고장 설비 ID (FK)")
    issue: str = Field(description="고장 내용")
    resolution: Optional[str] = Field(default=None, description="조치 내용")
    work_order_id: Optional[int] = Field(default=None, foreign_key="work_orders.id", description="연결된 작업지시 ID (FK)")
    reporter_id: Optional[int] = Field(default=None, foreign_key="users.id", description="접수자 사용자 ID (FK)")
    status: CallStatus = Field(default=CallStatus.REPORTED, description="처리 상태")


class Call(CallBase, TimestampMixin, SoftDeleteMixin, table=True):
    """
    calls 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "calls"

    id: Optional[int] = Field(default=None, primary_key=True, description="호출 고유 ID")
    reported_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_type=TIMESTAMP(timezone=True),
        description="접수 일시"
    )
    completed_at: Optional[datetime] = Field(default=None, sa_type=TIMESTAMP(timezone=True), description="완료 일시")
