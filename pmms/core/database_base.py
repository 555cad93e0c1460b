# pmms/core/database_base.py

"""
여러 테이블 모델이 공통으로 사용하는 컬럼 믹스인을 정의합니다.

sa_column=Column(...) 객체는 하나의 테이블에만 붙을 수 있으므로,
공유 필드는 sa_type/sa_column_kwargs 로 선언하여 테이블마다 별도의 Column이 생성되게 합니다.
"""

from typing import Optional
from datetime import datetime, UTC

from sqlmodel import Field, SQLModel
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP


class TimestampMixin(SQLModel):
    """레코드 생성/수정 일시 컬럼."""
    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_type=TIMESTAMP(timezone=True),
        sa_column_kwargs={"server_default": func.now()},
        description="레코드 생성 일시"
    )
    updated_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_type=TIMESTAMP(timezone=True),
        sa_column_kwargs={"server_default": func.now(), "onupdate": func.now()},
        description="레코드 마지막 업데이트 일시"
    )


class SoftDeleteMixin(SQLModel):
    """
    소프트 삭제 컬럼. deleted_at 이 채워진 행은 삭제된 것으로 간주되며,
    CRUDBase 의 조회 메서드는 include_deleted=True 가 아닌 한 이 행들을 제외합니다.
    """
    deleted_at: Optional[datetime] = Field(
        default=None,
        sa_type=TIMESTAMP(timezone=True),
        description="소프트 삭제 일시 (NULL 이면 활성)"
    )

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
