# pmms/domains/plt/schemas.py

"""
'plt' 도메인 (공장 관리)의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

from typing import Optional
from datetime import datetime
from sqlmodel import SQLModel, Field
from pydantic import EmailStr


# =============================================================================
# 1. 공장 (Plant) 스키마
# =============================================================================
class PlantBase(SQLModel):
    name: str = Field(..., min_length=1, max_length=100)
    location: str = Field(..., min_length=1, max_length=255)
    contact_email: Optional[EmailStr] = Field(None, max_length=100)
    contact_phone: Optional[str] = Field(None, max_length=20)


class PlantCreate(PlantBase):
    pass


class PlantUpdate(SQLModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    location: Optional[str] = Field(None, min_length=1, max_length=255)
    contact_email: Optional[EmailStr] = None
    contact_phone: Optional[str] = Field(None, max_length=20)


class PlantRead(PlantBase):
    id: int
    created_at: datetime
    updated_at: datetime
