# pmms/domains/inv/models.py

"""
'inv' 도메인 (자재 관리)의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
"""

from typing import Optional
from decimal import Decimal

from sqlmodel import Field, SQLModel

from pmms.core.database_base import TimestampMixin, SoftDeleteMixin


# =============================================================================
# 1. inventory 테이블 모델
# =============================================================================
class InventoryBase(SQLModel):
    """
    inventory 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    plant_id: Optional[int] = Field(default=None, foreign_key="plants.id", description="보관 공장 ID (FK)")
    vendor_id: Optional[int] = Field(default=None, foreign_key="vendors.id", description="공급업체 ID (FK)")
    name: str = Field(max_length=100, description="자재명")
    description: str = Field(description="자재 설명")
    quantity: int = Field(default=0, ge=0, description="현재 재고 수량 (음수 불가)")
    unit_price: Decimal = Field(default=Decimal("0"), ge=0, max_digits=10, decimal_places=2, description="단가")


class Inventory(InventoryBase, TimestampMixin, SoftDeleteMixin, table=True):
    """
    inventory 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    quantity 는 입고 시 직접 수정되고, 작업지시 자재 사용('wo' 도메인)에 의해 차감/복원됩니다.
    """
    __tablename__ = "inventory"

    id: Optional[int] = Field(default=None, primary_key=True, description="자재 고유 ID")
