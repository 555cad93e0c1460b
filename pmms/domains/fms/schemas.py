# pmms/domains/fms/schemas.py

"""
'fms' 도메인 (설비 및 예방정비 관리)의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

from typing import Optional
from datetime import date, datetime
from sqlmodel import SQLModel, Field

from . import models as fms_models


# =============================================================================
# 1. 설비 (Machine) 스키마
# =============================================================================
class MachineBase(SQLModel):
    plant_id: Optional[int] = Field(None, description="설치 공장 ID (미배정 시 null)")
    name: str = Field(..., min_length=1, max_length=100)
    model: str = Field(..., min_length=1, max_length=100)
    manufacturer: str = Field(..., min_length=1, max_length=100)
    serial_number: str = Field(..., min_length=1, max_length=100)
    installation_date: Optional[date] = None
    last_maintenance_date: Optional[date] = None
    next_maintenance_date: Optional[date] = None
    status: fms_models.MachineStatus = fms_models.MachineStatus.ACTIVE


class MachineCreate(MachineBase):
    pass


class MachineUpdate(SQLModel):
    plant_id: Optional[int] = None
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    model: Optional[str] = Field(None, min_length=1, max_length=100)
    manufacturer: Optional[str] = Field(None, min_length=1, max_length=100)
    serial_number: Optional[str] = Field(None, min_length=1, max_length=100)
    installation_date: Optional[date] = None
    last_maintenance_date: Optional[date] = None
    next_maintenance_date: Optional[date] = None
    status: Optional[fms_models.MachineStatus] = None


class MachineRead(MachineBase):
    id: int
    created_at: datetime
    updated_at: datetime


# =============================================================================
# 2. 정비 일정 (MaintenanceSchedule) 스키마
# =============================================================================
class MaintenanceScheduleBase(SQLModel):
    machine_id: int
    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1)
    frequency_days: int = Field(..., gt=0, description="정비 주기 (일, 1 이상)")
    last_completed: Optional[date] = None
    next_due: date


class MaintenanceScheduleCreate(MaintenanceScheduleBase):
    pass


class MaintenanceScheduleUpdate(SQLModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, min_length=1)
    frequency_days: Optional[int] = Field(None, gt=0)
    next_due: Optional[date] = None


class MaintenanceScheduleRead(MaintenanceScheduleBase):
    id: int
    created_at: datetime
    updated_at: datetime


class MaintenanceCompleteRequest(SQLModel):
    """정비 완료 요청. completion_date 를 생략하면 오늘 날짜로 기록합니다."""
    completion_date: Optional[date] = None
