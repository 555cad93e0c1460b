# pmms/domains/inv/crud.py

"""
'inv' 도메인의 CRUD 작업을 담당하는 모듈입니다.

재고 수량의 차감/복원(작업지시 자재 사용)은 'wo' 도메인의 원장 로직이 담당하며,
여기서는 자재 품목 자체의 관리와 참조 무결성 확인만 다룹니다.
"""

from typing import Optional
from sqlmodel.ext.asyncio.session import AsyncSession

from pmms.core.crud_base import CRUDBase
from pmms.domains.plt.crud import plant as plant_crud
from pmms.domains.ven.crud import vendor as vendor_crud
from . import models as inv_models
from . import schemas as inv_schemas


# =============================================================================
# 1. inventory 테이블 CRUD
# =============================================================================
class CRUDInventory(CRUDBase[inv_models.Inventory, inv_schemas.InventoryCreate, inv_schemas.InventoryUpdate]):
    def __init__(self):
        super().__init__(model=inv_models.Inventory)

    async def _check_references(self, db: AsyncSession, plant_id: Optional[int], vendor_id: Optional[int]) -> None:
        if plant_id is not None:
            await plant_crud.get_or_404(db, plant_id, detail="Plant not found")
        if vendor_id is not None:
            await vendor_crud.get_or_404(db, vendor_id, detail="Vendor not found")

    async def create(self, db: AsyncSession, *, obj_in: inv_schemas.InventoryCreate) -> inv_models.Inventory:
        await self._check_references(db, obj_in.plant_id, obj_in.vendor_id)
        return await super().create(db, obj_in=obj_in)

    async def update(
        self, db: AsyncSession, *, db_obj: inv_models.Inventory, obj_in: inv_schemas.InventoryUpdate
    ) -> inv_models.Inventory:
        await self._check_references(db, obj_in.plant_id, obj_in.vendor_id)
        return await super().update(db, db_obj=db_obj, obj_in=obj_in)


inventory = CRUDInventory()
