# pmms/domains/wo/schemas.py

"""
'wo' 도메인 (작업지시 관리)의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

from typing import Optional
from datetime import date, datetime
from sqlmodel import SQLModel, Field

from pmms.domains.inv.schemas import InventoryRead
from pmms.domains.usr.schemas import UserSummary
from . import models as wo_models


# =============================================================================
# 1. 작업지시 (WorkOrder) 스키마
# =============================================================================
class WorkOrderBase(SQLModel):
    title: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1)
    status: wo_models.WorkOrderStatus = wo_models.WorkOrderStatus.PENDING
    priority: wo_models.WorkOrderPriority = wo_models.WorkOrderPriority.MEDIUM
    machine_id: Optional[int] = None
    plant_id: Optional[int] = None
    assigned_to: Optional[int] = None
    due_date: Optional[date] = None
    completed_date: Optional[datetime] = None


class WorkOrderCreate(WorkOrderBase):
    pass


class WorkOrderUpdate(SQLModel):
    title: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, min_length=1)
    status: Optional[wo_models.WorkOrderStatus] = None
    priority: Optional[wo_models.WorkOrderPriority] = None
    machine_id: Optional[int] = None
    plant_id: Optional[int] = None
    assigned_to: Optional[int] = None
    due_date: Optional[date] = None
    completed_date: Optional[datetime] = None


class WorkOrderRead(WorkOrderBase):
    id: int
    created_at: datetime
    updated_at: datetime


# =============================================================================
# 2. 작업지시 자재 사용 (WorkOrderPart) 스키마
# =============================================================================
class WorkOrderPartCreate(SQLModel):
    """작업지시 ID는 경로에서 받습니다."""
    inventory_id: int
    quantity_used: int = Field(..., gt=0, description="사용 수량 (1 이상)")


class WorkOrderPartUpdate(SQLModel):
    quantity_used: int = Field(..., gt=0)


class WorkOrderPartRead(SQLModel):
    id: int
    work_order_id: int
    inventory_id: int
    quantity_used: int
    created_at: datetime
    updated_at: datetime


class WorkOrderPartReadWithInventory(WorkOrderPartRead):
    inventory: Optional[InventoryRead] = None


# =============================================================================
# 3. 작업지시 인력 투입 (WorkOrderLabor) 스키마
# =============================================================================
class WorkOrderLaborCreate(SQLModel):
    """작업지시 ID는 경로에서 받습니다."""
    user_id: int
    hours_worked: float = Field(..., ge=0, description="투입 시간 (0 이상)")
    labor_date: date
    notes: Optional[str] = None


class WorkOrderLaborUpdate(SQLModel):
    hours_worked: Optional[float] = Field(None, ge=0)
    labor_date: Optional[date] = None
    notes: Optional[str] = None


class WorkOrderLaborRead(SQLModel):
    id: int
    work_order_id: int
    user_id: int
    hours_worked: float
    labor_date: date
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class WorkOrderLaborReadWithUser(WorkOrderLaborRead):
    user: Optional[UserSummary] = None
