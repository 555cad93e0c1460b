# pmms/domains/fms/models.py

"""
'fms' 도메인 (설비 및 예방정비 관리)의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

이 모듈은 machines, maintenance_schedules 테이블에 대한 SQLModel 클래스를 포함합니다.
정비 일정이 완료되면 일정의 next_due 와 설비의 next_maintenance_date 가 함께 갱신됩니다.
"""

from typing import Optional
from datetime import date
from enum import Enum

from sqlmodel import Field, SQLModel

from pmms.core.database_base import TimestampMixin, SoftDeleteMixin


class MachineStatus(str, Enum):
    """설비 운전 상태."""
    ACTIVE = "active"
    INACTIVE = "inactive"
    MAINTENANCE = "maintenance"


# =============================================================================
# 1. machines 테이블 모델
# =============================================================================
class MachineBase(SQLModel):
    """
    machines 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    plant_id: Optional[int] = Field(default=None, foreign_key="plants.id", description="설치 공장 ID (FK, 미배정 허용)")
    name: str = Field(max_length=100, description="설비명")
    model: str = Field(max_length=100, description="모델명")
    manufacturer: str = Field(max_length=100, description="제조사")
    serial_number: str = Field(max_length=100, sa_column_kwargs={"unique": True}, description="시리얼 번호 (전체 고유)")
    installation_date: Optional[date] = Field(default=None, description="설치일")
    last_maintenance_date: Optional[date] = Field(default=None, description="최근 정비일")
    next_maintenance_date: Optional[date] = Field(default=None, description="다음 정비 예정일")
    status: MachineStatus = Field(default=MachineStatus.ACTIVE, description="설비 상태")


class Machine(MachineBase, TimestampMixin, SoftDeleteMixin, table=True):
    """
    machines 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "machines"

    id: Optional[int] = Field(default=None, primary_key=True, description="설비 고유 ID")


# =============================================================================
# 2. maintenance_schedules 테이블 모델
# =============================================================================
class MaintenanceScheduleBase(SQLModel):
    machine_id: int = Field(foreign_key="machines.id", description="대상 설비 ID (FK)")
    name: str = Field(max_length=100, description="정비 일정명")
    description: str = Field(description="정비 내용")
    frequency_days: int = Field(gt=0, description="정비 주기 (일)")
    last_completed: Optional[date] = Field(default=None, description="최근 완료일")
    next_due: date = Field(description="다음 정비 예정일")


class MaintenanceSchedule(MaintenanceScheduleBase, TimestampMixin, SoftDeleteMixin, table=True):
    """
    maintenance_schedules 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    완료가 기록된 뒤에는 항상 next_due == last_completed + frequency_days 입니다.
    """
    __tablename__ = "maintenance_schedules"

    id: Optional[int] = Field(default=None, primary_key=True, description="정비 일정 고유 ID")
