# pmms/domains/ops/crud.py

"""
'ops' 도메인의 CRUD 작업을 담당하는 모듈입니다.
"""

from typing import Optional
from datetime import datetime, UTC

from sqlmodel.ext.asyncio.session import AsyncSession

from pmms.core.crud_base import CRUDBase
from pmms.domains.fms.crud import machine as machine_crud
from pmms.domains.usr.crud import user as user_crud
from pmms.domains.wo.crud import work_order as work_order_crud
from . import models as ops_models
from . import schemas as ops_schemas


# =============================================================================
# 1. calls 테이블 CRUD
# =============================================================================
class CRUDCall(CRUDBase[ops_models.Call, ops_schemas.CallCreate, ops_schemas.CallUpdate]):
    def __init__(self):
        super().__init__(model=ops_models.Call)

    async def _check_references(
        self,
        db: AsyncSession,
        machine_id: Optional[int],
        work_order_id: Optional[int],
        reporter_id: Optional[int],
    ) -> None:
        if machine_id is not None:
            await machine_crud.get_or_404(db, machine_id, detail="Machine not found")
        if work_order_id is not None:
            await work_order_crud.get_or_404(db, work_order_id, detail="Work order not found")
        if reporter_id is not None:
            await user_crud.get_or_404(db, reporter_id, detail="Reporter (user) not found")

    async def create(self, db: AsyncSession, *, obj_in: ops_schemas.CallCreate) -> ops_models.Call:
        await self._check_references(db, obj_in.machine_id, obj_in.work_order_id, obj_in.reporter_id)
        call_data = obj_in.model_dump(exclude={"reported_at"})
        db_obj = ops_models.Call(**call_data, reported_at=obj_in.reported_at or datetime.now(UTC))
        if db_obj.status == ops_models.CallStatus.COMPLETED:
            db_obj.completed_at = datetime.now(UTC)
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self, db: AsyncSession, *, db_obj: ops_models.Call, obj_in: ops_schemas.CallUpdate
    ) -> ops_models.Call:
        await self._check_references(db, obj_in.machine_id, obj_in.work_order_id, obj_in.reporter_id)
        if (
            obj_in.status == ops_models.CallStatus.COMPLETED
            and db_obj.completed_at is None
            and "completed_at" not in obj_in.model_fields_set
        ):
            obj_in.completed_at = datetime.now(UTC)
        return await super().update(db, db_obj=db_obj, obj_in=obj_in)


call = CRUDCall()
