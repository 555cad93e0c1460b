# pmms/domains/usr/models.py

"""
'usr' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

이 모듈은 users 테이블에 대한 SQLModel 클래스와 사용자 역할(UserRole) Enum을 포함합니다.
"""

from typing import Optional
from enum import Enum

from sqlmodel import Field, SQLModel

from pmms.core.database_base import TimestampMixin, SoftDeleteMixin


# =============================================================================
# 사용자 역할(RBAC) Enum
# =============================================================================
class UserRole(str, Enum):
    """
    사용자 역할을 정의하는 문자열 Enum 클래스입니다.
    권한 정책(pmms.core.authz)은 이 값을 기준으로 평가됩니다.
    """
    ADMIN = "admin"            # 시스템 관리자
    MANAGER = "manager"        # 공장/정비 관리자
    TECHNICIAN = "technician"  # 정비 기술자


# =============================================================================
# 1. users 테이블 모델
# =============================================================================
class UserBase(SQLModel):
    """
    users 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    username: str = Field(max_length=50, sa_column_kwargs={"unique": True}, description="로그인 사용자명")
    email: str = Field(max_length=100, sa_column_kwargs={"unique": True}, description="이메일 주소")
    role: UserRole = Field(default=UserRole.TECHNICIAN, description="사용자 역할")
    plant_id: Optional[int] = Field(default=None, foreign_key="plants.id", description="소속 공장 ID (FK)")


class User(UserBase, TimestampMixin, SoftDeleteMixin, table=True):
    """
    users 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True, description="사용자 고유 ID")
    password_hash: str = Field(max_length=255, description="bcrypt 해시된 비밀번호")
