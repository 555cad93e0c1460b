# pmms/core/crud_base.py

"""
공통 CRUD(Create, Read, Update, Delete) 작업을 위한 기본 클래스 모듈입니다.
모든 메서드는 비동기(async) 환경에 맞게 작성되었습니다.

소프트 삭제 컬럼(deleted_at)을 가진 모델의 경우, 모든 조회 메서드는
include_deleted 인자로 삭제된 행의 포함 여부를 명시적으로 받습니다. (기본값: 제외)
"""

import logging
from typing import Generic, List, Optional, Type, TypeVar, Any, Dict
from datetime import date, datetime, timedelta, UTC

from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession
from pydantic import BaseModel

from pmms.core.exceptions import NotFoundError, ValidationError

ModelType = TypeVar("ModelType", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)

logger = logging.getLogger(__name__)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    모든 CRUD 작업에 대한 기본 클래스를 정의합니다.
    """
    def __init__(self, model: Type[ModelType]):
        self.model = model

    @property
    def soft_deletable(self) -> bool:
        return hasattr(self.model, "deleted_at")

    def _exclude_deleted(self, statement, include_deleted: bool):
        """include_deleted 가 False 이면 소프트 삭제된 행을 제외하는 조건을 추가합니다."""
        if not include_deleted and self.soft_deletable:
            statement = statement.where(self.model.deleted_at.is_(None))
        return statement

    async def get(self, db: AsyncSession, id: Any, *, include_deleted: bool = False) -> Optional[ModelType]:
        """
        ID를 기준으로 단일 레코드를 조회합니다.
        """
        statement = self._exclude_deleted(select(self.model).where(self.model.id == id), include_deleted)
        result = await db.execute(statement)
        return result.scalars().first()

    async def get_or_404(
        self, db: AsyncSession, id: Any, *, detail: Optional[str] = None, include_deleted: bool = False
    ) -> ModelType:
        """
        ID로 레코드를 조회하고, 없으면 NotFoundError(404)를 발생시킵니다.
        외래 키로 참조되는 레코드의 존재 확인에도 사용합니다.
        """
        db_obj = await self.get(db, id, include_deleted=include_deleted)
        if db_obj is None:
            raise NotFoundError(detail or f"{self.model.__name__} not found")
        return db_obj

    async def get_multi(
        self, db: AsyncSession, *, skip: int = 0, limit: int = 100, include_deleted: bool = False, **kwargs: Any
    ) -> List[ModelType]:
        """
        여러 레코드를 조회합니다. 필터링을 위한 키워드 인자를 지원합니다.
        """
        query = self._exclude_deleted(select(self.model), include_deleted)

        for field, value in kwargs.items():
            if hasattr(self.model, field):
                query = query.where(getattr(self.model, field) == value)

        query = query.order_by(self.model.id).offset(skip).limit(limit)
        result = await db.execute(query)
        return result.scalars().all()

    async def get_by_attribute(
        self, db: AsyncSession, *, attribute: str, value: Any, include_deleted: bool = False
    ) -> Optional[ModelType]:
        statement = self._exclude_deleted(
            select(self.model).where(getattr(self.model, attribute) == value), include_deleted
        )
        response = await db.execute(statement)
        return response.scalars().first()

    async def get_filtered(
        self,
        db: AsyncSession,
        *,
        filters: Optional[Dict[str, Any]] = None,  # 다중 속성 필터: {"attribute_name": "value"}
        date_range_field: Optional[str] = None,    # 기간 검색을 적용할 날짜 필드 이름 (예: "due_date")
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        order_by_field: Optional[str] = None,
        order_desc: bool = True,
        include_deleted: bool = False,
        skip: int = 0,
        limit: int = 100
    ) -> List[ModelType]:
        """
        다중 속성 및 기간 검색 기능을 포함한 다중 조회.
        값이 None 인 필터는 무시합니다.
        """
        query = self._exclude_deleted(select(self.model), include_deleted)
        conditions = []

        # 1. 다중 속성 필터링
        if filters:
            for attribute, value in filters.items():
                if value is None:
                    continue
                if hasattr(self.model, attribute):
                    conditions.append(getattr(self.model, attribute) == value)
                else:
                    logger.warning("Model %s has no attribute '%s'", self.model.__name__, attribute)

        # 2. 기간 검색 필터링
        if date_range_field and hasattr(self.model, date_range_field):
            date_field = getattr(self.model, date_range_field)
            if start_date is not None:
                conditions.append(date_field >= start_date)
            if end_date is not None:
                # end_date 당일까지 포함하기 위함
                conditions.append(date_field < end_date + timedelta(days=1))
        elif date_range_field:
            logger.warning("Model %s has no attribute '%s' for date range filtering.", self.model.__name__, date_range_field)

        if conditions:
            query = query.where(*conditions)

        # 3. 정렬
        if order_by_field and hasattr(self.model, order_by_field):
            column = getattr(self.model, order_by_field)
            query = query.order_by(column.desc() if order_desc else column)
        else:
            query = query.order_by(self.model.id.desc() if order_desc else self.model.id)

        # 4. 페이징
        query = query.offset(skip).limit(limit)

        result = await db.execute(query)
        return result.scalars().all()

    async def create(self, db: AsyncSession, *, obj_in: CreateSchemaType) -> ModelType:
        """
        새로운 레코드를 생성합니다.
        """
        db_obj = self.model.model_validate(obj_in)
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self, db: AsyncSession, *, db_obj: ModelType, obj_in: UpdateSchemaType
    ) -> ModelType:
        """
        기존 레코드를 업데이트합니다. (요청에 포함된 필드만 반영)
        """
        update_data = obj_in.model_dump(exclude_unset=True)
        for key, value in update_data.items():
            column = self.model.__table__.columns.get(key)
            if value is None and column is not None and not column.nullable:
                raise ValidationError(f"'{key}' cannot be null")
        for key, value in update_data.items():
            setattr(db_obj, key, value)

        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def delete(self, db: AsyncSession, *, id: Any) -> Optional[ModelType]:
        """
        ID를 기준으로 레코드를 물리적으로 삭제합니다.
        """
        db_obj = await db.get(self.model, id)
        if db_obj:
            await db.delete(db_obj)
            await db.commit()
        return db_obj

    async def soft_delete(self, db: AsyncSession, *, db_obj: ModelType) -> ModelType:
        """
        deleted_at 을 기록하여 레코드를 소프트 삭제합니다.
        이후 include_deleted=False 조회에서는 나타나지 않습니다.
        """
        db_obj.deleted_at = datetime.now(UTC)
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        logger.info("%s(id=%s) soft-deleted", self.model.__name__, db_obj.id)
        return db_obj
