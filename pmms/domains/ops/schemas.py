# pmms/domains/ops/schemas.py

"""
'ops' 도메인 (설비 고장 호출)의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

from typing import Optional
from datetime import datetime
from sqlmodel import SQLModel, Field

from . import models as ops_models


# =============================================================================
# 1. 고장 호출 (Call) 스키마
# =============================================================================
class CallBase(SQLModel):
    shift: int = Field(..., ge=1, le=3, description="근무조 (1, 2, 3)")
    line: str = Field(..., min_length=1, max_length=50)
    machine_id: Optional[int] = None
    issue: str = Field(..., min_length=1)
    resolution: Optional[str] = None
    work_order_id: Optional[int] = None
    reporter_id: Optional[int] = None
    status: ops_models.CallStatus = ops_models.CallStatus.REPORTED


class CallCreate(CallBase):
    reported_at: Optional[datetime] = None


class CallUpdate(SQLModel):
    shift: Optional[int] = Field(None, ge=1, le=3)
    line: Optional[str] = Field(None, min_length=1, max_length=50)
    machine_id: Optional[int] = None
    issue: Optional[str] = Field(None, min_length=1)
    resolution: Optional[str] = None
    work_order_id: Optional[int] = None
    reporter_id: Optional[int] = None
    status: Optional[ops_models.CallStatus] = None
    completed_at: Optional[datetime] = None


class CallRead(CallBase):
    id: int
    reported_at: datetime
    completed_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
