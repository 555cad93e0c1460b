# pmms/domains/wo/crud.py

"""
'wo' 도메인 (작업지시 관리)의 CRUD 작업을 담당하는 모듈입니다.

자재 사용(WorkOrderPart) 기록은 재고 원장으로 동작합니다.
- 생성: 재고에서 사용 수량을 차감
- 수량 변경: 변경분(delta)만큼 재고를 조정
- 삭제: 사용 수량을 재고로 복원
재고 행은 SELECT ... FOR UPDATE 로 잠근 뒤 갱신하고, 사용 기록과 함께 한 번에 커밋합니다.
어느 단계에서든 실패하면 전체를 롤백하므로 재고는 절대 음수가 되지 않습니다.
"""

import logging
from typing import List, Optional
from datetime import datetime, UTC

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlalchemy.orm import selectinload

from pmms.core.crud_base import CRUDBase
from pmms.core.exceptions import InsufficientStockError, NotFoundError, ValidationError
from pmms.domains.fms.crud import machine as machine_crud
from pmms.domains.inv.models import Inventory
from pmms.domains.plt.crud import plant as plant_crud
from pmms.domains.usr.crud import user as user_crud
from . import models as wo_models
from . import schemas as wo_schemas

logger = logging.getLogger(__name__)


# =============================================================================
# 1. work_orders 테이블 CRUD
# =============================================================================
class CRUDWorkOrder(CRUDBase[wo_models.WorkOrder, wo_schemas.WorkOrderCreate, wo_schemas.WorkOrderUpdate]):
    def __init__(self):
        super().__init__(model=wo_models.WorkOrder)

    async def _check_references(
        self,
        db: AsyncSession,
        machine_id: Optional[int],
        plant_id: Optional[int],
        assigned_to: Optional[int],
    ) -> None:
        """참조하는 설비, 공장, 담당자가 존재하고 삭제되지 않았는지 확인합니다."""
        if machine_id is not None:
            await machine_crud.get_or_404(db, machine_id, detail="Machine not found")
        if plant_id is not None:
            await plant_crud.get_or_404(db, plant_id, detail="Plant not found")
        if assigned_to is not None:
            await user_crud.get_or_404(db, assigned_to, detail="Assigned user not found")

    async def create(self, db: AsyncSession, *, obj_in: wo_schemas.WorkOrderCreate) -> wo_models.WorkOrder:
        await self._check_references(db, obj_in.machine_id, obj_in.plant_id, obj_in.assigned_to)
        db_obj = wo_models.WorkOrder.model_validate(obj_in)
        if db_obj.status == wo_models.WorkOrderStatus.COMPLETED and db_obj.completed_date is None:
            db_obj.completed_date = datetime.now(UTC)
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self, db: AsyncSession, *, db_obj: wo_models.WorkOrder, obj_in: wo_schemas.WorkOrderUpdate
    ) -> wo_models.WorkOrder:
        """
        작업지시를 수정합니다.
        상태 전이는 pending -> in_progress -> completed, 종료 전 상태 -> cancelled 만 허용됩니다.
        """
        if obj_in.status is not None and not wo_models.can_transition(db_obj.status, obj_in.status):
            raise ValidationError(
                f"Invalid status transition from '{db_obj.status.value}' to '{obj_in.status.value}'"
            )
        await self._check_references(db, obj_in.machine_id, obj_in.plant_id, obj_in.assigned_to)

        if (
            obj_in.status == wo_models.WorkOrderStatus.COMPLETED
            and db_obj.status != wo_models.WorkOrderStatus.COMPLETED
            and "completed_date" not in obj_in.model_fields_set
        ):
            obj_in.completed_date = datetime.now(UTC)

        return await super().update(db, db_obj=db_obj, obj_in=obj_in)


work_order = CRUDWorkOrder()


# =============================================================================
# 2. work_order_parts 테이블 CRUD (재고 원장)
# =============================================================================
class CRUDWorkOrderPart(CRUDBase[wo_models.WorkOrderPart, wo_schemas.WorkOrderPartCreate, wo_schemas.WorkOrderPartUpdate]):
    def __init__(self):
        super().__init__(model=wo_models.WorkOrderPart)

    async def _lock_inventory(self, db: AsyncSession, inventory_id: int, *, include_deleted: bool = False) -> Inventory:
        statement = select(Inventory).where(Inventory.id == inventory_id)
        if not include_deleted:
            statement = statement.where(Inventory.deleted_at.is_(None))
        item = (await db.execute(statement.with_for_update())).scalars().first()
        if item is None:
            raise NotFoundError("Inventory item not found")
        return item

    async def _lock_part(self, db: AsyncSession, part_id: int) -> wo_models.WorkOrderPart:
        statement = select(wo_models.WorkOrderPart).where(wo_models.WorkOrderPart.id == part_id).with_for_update()
        part = (await db.execute(statement)).scalars().first()
        if part is None:
            raise NotFoundError("Work order part not found")
        return part

    async def get_by_work_order(self, db: AsyncSession, *, work_order_id: int) -> List[wo_models.WorkOrderPart]:
        """작업지시의 자재 사용 내역을 자재 정보와 함께 조회합니다."""
        await work_order.get_or_404(db, work_order_id, detail="Work order not found")
        statement = (
            select(wo_models.WorkOrderPart)
            .where(wo_models.WorkOrderPart.work_order_id == work_order_id)
            .options(selectinload(wo_models.WorkOrderPart.inventory))
            .order_by(wo_models.WorkOrderPart.id)
        )
        result = await db.execute(statement)
        return result.scalars().all()

    async def add_part(
        self, db: AsyncSession, *, work_order_id: int, obj_in: wo_schemas.WorkOrderPartCreate
    ) -> wo_models.WorkOrderPart:
        """재고를 quantity_used 만큼 차감하고 사용 기록을 생성합니다."""
        try:
            await work_order.get_or_404(db, work_order_id, detail="Work order not found")
            item = await self._lock_inventory(db, obj_in.inventory_id)
            if item.quantity < obj_in.quantity_used:
                raise InsufficientStockError()

            item.quantity -= obj_in.quantity_used
            part = wo_models.WorkOrderPart(
                work_order_id=work_order_id,
                inventory_id=item.id,
                quantity_used=obj_in.quantity_used,
            )
            db.add(item)
            db.add(part)
            await db.commit()
        except Exception:
            await db.rollback()
            raise

        await db.refresh(part)
        logger.info(
            "자재 사용: work_order=%s inventory=%s used=%s remaining=%s",
            work_order_id, item.id, part.quantity_used, item.quantity,
        )
        return part

    async def update_quantity(
        self, db: AsyncSession, *, id: int, obj_in: wo_schemas.WorkOrderPartUpdate
    ) -> wo_models.WorkOrderPart:
        """사용 수량을 변경하고 변경분(새 수량 - 기존 수량)만큼 재고를 조정합니다."""
        try:
            part = await self._lock_part(db, id)
            item = await self._lock_inventory(db, part.inventory_id, include_deleted=True)

            delta = obj_in.quantity_used - part.quantity_used
            if delta > 0 and item.quantity < delta:
                raise InsufficientStockError()

            item.quantity -= delta
            part.quantity_used = obj_in.quantity_used
            db.add(item)
            db.add(part)
            await db.commit()
        except Exception:
            await db.rollback()
            raise

        await db.refresh(part)
        logger.info(
            "자재 사용 수량 변경: part=%s inventory=%s delta=%s remaining=%s",
            part.id, item.id, delta, item.quantity,
        )
        return part

    async def remove(self, db: AsyncSession, *, id: int) -> wo_models.WorkOrderPart:
        """사용 기록을 삭제하고 사용 수량을 재고로 복원합니다."""
        try:
            part = await self._lock_part(db, id)
            item = await self._lock_inventory(db, part.inventory_id, include_deleted=True)

            item.quantity += part.quantity_used
            db.add(item)
            await db.delete(part)
            await db.commit()
        except Exception:
            await db.rollback()
            raise

        logger.info(
            "자재 사용 취소: part=%s inventory=%s restored=%s remaining=%s",
            id, item.id, part.quantity_used, item.quantity,
        )
        return part


work_order_part = CRUDWorkOrderPart()


# =============================================================================
# 3. work_order_labor 테이블 CRUD
# =============================================================================
class CRUDWorkOrderLabor(CRUDBase[wo_models.WorkOrderLabor, wo_schemas.WorkOrderLaborCreate, wo_schemas.WorkOrderLaborUpdate]):
    def __init__(self):
        super().__init__(model=wo_models.WorkOrderLabor)

    async def get_by_work_order(self, db: AsyncSession, *, work_order_id: int) -> List[wo_models.WorkOrderLabor]:
        """작업지시의 인력 투입 내역을 작업자 정보와 함께 조회합니다."""
        await work_order.get_or_404(db, work_order_id, detail="Work order not found")
        statement = (
            select(wo_models.WorkOrderLabor)
            .where(wo_models.WorkOrderLabor.work_order_id == work_order_id)
            .options(selectinload(wo_models.WorkOrderLabor.user))
            .order_by(wo_models.WorkOrderLabor.id)
        )
        result = await db.execute(statement)
        return result.scalars().all()

    async def add_labor(
        self, db: AsyncSession, *, work_order_id: int, obj_in: wo_schemas.WorkOrderLaborCreate
    ) -> wo_models.WorkOrderLabor:
        await work_order.get_or_404(db, work_order_id, detail="Work order not found")
        await user_crud.get_or_404(db, obj_in.user_id, detail="User not found")

        db_obj = wo_models.WorkOrderLabor(work_order_id=work_order_id, **obj_in.model_dump())
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj


work_order_labor = CRUDWorkOrderLabor()
