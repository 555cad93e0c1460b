# pmms/domains/inv/schemas.py

"""
'inv' 도메인 (자재 관리)의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

from typing import Optional
from datetime import datetime
from decimal import Decimal
from sqlmodel import SQLModel, Field


# =============================================================================
# 1. 자재 (Inventory) 스키마
# =============================================================================
class InventoryBase(SQLModel):
    plant_id: Optional[int] = None
    vendor_id: Optional[int] = None
    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=0, description="재고 수량 (0 이상)")
    unit_price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2, description="단가 (0 이상)")


class InventoryCreate(InventoryBase):
    pass


class InventoryUpdate(SQLModel):
    plant_id: Optional[int] = None
    vendor_id: Optional[int] = None
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, min_length=1)
    quantity: Optional[int] = Field(None, ge=0)
    unit_price: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)


class InventoryRead(InventoryBase):
    id: int
    created_at: datetime
    updated_at: datetime
