# pmms/domains/plt/models.py

"""
'plt' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
"""

from typing import Optional

from sqlmodel import Field, SQLModel

from pmms.core.database_base import TimestampMixin, SoftDeleteMixin


# =============================================================================
# 1. plants 테이블 모델
# =============================================================================
class PlantBase(SQLModel):
    """
    plants 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    name: str = Field(max_length=100, description="공장명")
    location: str = Field(max_length=255, description="공장 위치")
    contact_email: Optional[str] = Field(default=None, max_length=100, description="담당자 이메일")
    contact_phone: Optional[str] = Field(default=None, max_length=20, description="담당자 연락처")


class Plant(PlantBase, TimestampMixin, SoftDeleteMixin, table=True):
    """
    plants 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "plants"

    id: Optional[int] = Field(default=None, primary_key=True, description="공장 고유 ID")
