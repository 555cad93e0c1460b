# pmms/domains/rpt/schemas.py

"""
'rpt' 도메인 (보고서)의 응답 스키마를 정의하는 모듈입니다.
보고서는 테이블이 없으므로 SQLModel 대신 Pydantic BaseModel 을 사용합니다.
"""

from typing import List
from decimal import Decimal

from pydantic import BaseModel, Field

from pmms.domains.wo.models import WorkOrderStatus, WorkOrderPriority


# =============================================================================
# 1. 작업지시 현황 보고서
# =============================================================================
class StatusCount(BaseModel):
    status: WorkOrderStatus
    count: int


class PriorityCount(BaseModel):
    priority: WorkOrderPriority
    count: int


class WorkOrderReport(BaseModel):
    """
    작업지시 상태별/우선순위별 건수와 평균 완료 소요 시간을 담는 응답 모델입니다.
    """
    status_counts: List[StatusCount] = Field(default_factory=list)
    priority_counts: List[PriorityCount] = Field(default_factory=list)
    avg_completion_time: float = Field(0, description="완료된 작업지시의 평균 소요 시간 (시간 단위)")


# =============================================================================
# 2. 설비 정지 시간 보고서
# =============================================================================
class MachineDowntime(BaseModel):
    machine_id: int
    machine_name: str
    serial_number: str
    total_downtime_hours: float = Field(..., description="완료된 작업지시의 생성~완료 시간 합계")


# =============================================================================
# 3. 자재 사용량 보고서
# =============================================================================
class InventoryUsage(BaseModel):
    inventory_id: int
    name: str
    unit_price: Decimal
    total_quantity_used: int


# =============================================================================
# 4. 인력 투입 시간 보고서
# =============================================================================
class LaborHours(BaseModel):
    user_id: int
    username: str
    total_hours: float
