# pmms/domains/inv/routers.py

"""
'inv' 도메인 (자재 관리)과 관련된 API 엔드포인트를 정의하는 모듈입니다.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status, Query
from sqlmodel.ext.asyncio.session import AsyncSession

from pmms.core.database import get_session
from pmms.core import dependencies as deps
from pmms.core.exceptions import NotFoundError
from pmms.domains.usr.models import User as UsrUser

from . import crud as inv_crud
from . import schemas as inv_schemas


router = APIRouter(
    tags=["Inventory Management (자재 관리)"],
    responses={404: {"description": "Not found"}},
)


@router.post("/inventory", response_model=inv_schemas.InventoryRead, status_code=status.HTTP_201_CREATED, summary="새 자재 등록")
async def create_inventory_item(
    item_in: inv_schemas.InventoryCreate,
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("inventory", "create")),
):
    return await inv_crud.inventory.create(db, obj_in=item_in)


@router.get("/inventory", response_model=List[inv_schemas.InventoryRead], summary="자재 목록 조회")
async def read_inventory_items(
    db: AsyncSession = Depends(get_session),
    plant_id: Optional[int] = Query(None, description="공장 ID로 필터링"),
    vendor_id: Optional[int] = Query(None, description="공급업체 ID로 필터링"),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1),
    current_user: UsrUser = Depends(deps.require_permission("inventory", "read")),
):
    return await inv_crud.inventory.get_filtered(
        db,
        filters={"plant_id": plant_id, "vendor_id": vendor_id},
        order_by_field="id",
        order_desc=False,
        skip=skip,
        limit=limit,
    )


@router.get("/inventory/{item_id}", response_model=inv_schemas.InventoryRead, summary="특정 자재 조회")
async def read_inventory_item(
    item_id: int,
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("inventory", "read")),
):
    db_item = await inv_crud.inventory.get(db, id=item_id)
    if not db_item:
        raise NotFoundError("Inventory item not found")
    return db_item


@router.put("/inventory/{item_id}", response_model=inv_schemas.InventoryRead, summary="자재 정보 업데이트")
async def update_inventory_item(
    item_id: int,
    item_in: inv_schemas.InventoryUpdate,
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("inventory", "update")),
):
    db_item = await inv_crud.inventory.get(db, id=item_id)
    if not db_item:
        raise NotFoundError("Inventory item not found")
    return await inv_crud.inventory.update(db, db_obj=db_item, obj_in=item_in)


@router.delete("/inventory/{item_id}", status_code=status.HTTP_204_NO_CONTENT, summary="자재 삭제 (소프트 삭제)")
async def delete_inventory_item(
    item_id: int,
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("inventory", "delete")),
):
    db_item = await inv_crud.inventory.get(db, id=item_id)
    if not db_item:
        raise NotFoundError("Inventory item not found")
    await inv_crud.inventory.soft_delete(db, db_obj=db_item)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
