# pmms/domains/ven/schemas.py

"""
'ven' 도메인 (공급업체 관리)의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
응답 스키마는 다른 도메인과의 일관성을 위해 '...Read' 패턴을 사용합니다.
"""

from typing import Optional
from datetime import datetime
from sqlmodel import SQLModel, Field
from pydantic import EmailStr


# =============================================================================
# 1. 공급업체 (Vendor) 스키마
# =============================================================================
class VendorBase(SQLModel):
    name: str = Field(..., min_length=1, max_length=100)
    contact_email: Optional[EmailStr] = Field(None, max_length=100)
    contact_phone: Optional[str] = Field(None, max_length=20)


class VendorCreate(VendorBase):
    pass


class VendorUpdate(SQLModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    contact_email: Optional[EmailStr] = None
    contact_phone: Optional[str] = Field(None, max_length=20)


class VendorRead(VendorBase):
    id: int
    created_at: datetime
    updated_at: datetime
