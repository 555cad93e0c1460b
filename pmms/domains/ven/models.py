# pmms/domains/ven/models.py

"""
'ven' 도메인 (공급업체 관리)의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
"""

from typing import Optional

from sqlmodel import Field, SQLModel

from pmms.core.database_base import TimestampMixin, SoftDeleteMixin


# =============================================================================
# 1. vendors 테이블 모델
# =============================================================================
class VendorBase(SQLModel):
    name: str = Field(max_length=100, description="공급업체명")
    contact_email: Optional[str] = Field(default=None, max_length=100, description="공급업체 이메일")
    contact_phone: Optional[str] = Field(default=None, max_length=20, description="공급업체 연락처")


class Vendor(VendorBase, TimestampMixin, SoftDeleteMixin, table=True):
    """
    vendors 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    자재(Inventory)의 공급처로 참조됩니다.
    """
    __tablename__ = "vendors"

    id: Optional[int] = Field(default=None, primary_key=True, description="공급업체 고유 ID")
