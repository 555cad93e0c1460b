# pmms/domains/wo/routers.py

"""
'wo' 도메인 (작업지시 관리)과 관련된 API 엔드포인트를 정의하는 모듈입니다.

- /work-orders
- /work-orders/{work_order_id}/parts, /work-order-parts/{part_id}
- /work-orders/{work_order_id}/labor, /work-order-labor/{labor_id}
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status, Query
from sqlmodel.ext.asyncio.session import AsyncSession

from pmms.core.database import get_session
from pmms.core import dependencies as deps
from pmms.domains.usr.models import User as UsrUser

from . import crud as wo_crud
from . import models as wo_models
from . import schemas as wo_schemas


router = APIRouter(
    tags=["Work Order Management (작업지시 관리)"],
    responses={404: {"description": "Not found"}},
)


# =============================================================================
# 1. 작업지시 (WorkOrder) 엔드포인트
# =============================================================================
@router.post("/work-orders", response_model=wo_schemas.WorkOrderRead, status_code=status.HTTP_201_CREATED, summary="새 작업지시 생성")
async def create_work_order(
    work_order_in: wo_schemas.WorkOrderCreate,
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("work_orders", "create")),
):
    return await wo_crud.work_order.create(db, obj_in=work_order_in)


@router.get("/work-orders", response_model=List[wo_schemas.WorkOrderRead], summary="작업지시 목록 조회")
async def read_work_orders(
    db: AsyncSession = Depends(get_session),
    status_filter: Optional[wo_models.WorkOrderStatus] = Query(None, alias="status", description="상태로 필터링"),
    priority: Optional[wo_models.WorkOrderPriority] = Query(None, description="우선순위로 필터링"),
    plant_id: Optional[int] = Query(None),
    machine_id: Optional[int] = Query(None),
    assigned_to: Optional[int] = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1),
    current_user: UsrUser = Depends(deps.require_permission("work_orders", "read")),
):
    return await wo_crud.work_order.get_filtered(
        db,
        filters={
            "status": status_filter,
            "priority": priority,
            "plant_id": plant_id,
            "machine_id": machine_id,
            "assigned_to": assigned_to,
        },
        order_by_field="id",
        order_desc=False,
        skip=skip,
        limit=limit,
    )


@router.get("/work-orders/{work_order_id}", response_model=wo_schemas.WorkOrderRead, summary="특정 작업지시 조회")
async def read_work_order(
    work_order_id: int,
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("work_orders", "read")),
):
    return await wo_crud.work_order.get_or_404(db, work_order_id, detail="Work order not found")


@router.put("/work-orders/{work_order_id}", response_model=wo_schemas.WorkOrderRead, summary="작업지시 업데이트")
async def update_work_order(
    work_order_id: int,
    work_order_in: wo_schemas.WorkOrderUpdate,
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("work_orders", "update")),
):
    db_work_order = await wo_crud.work_order.get_or_404(db, work_order_id, detail="Work order not found")
    return await wo_crud.work_order.update(db, db_obj=db_work_order, obj_in=work_order_in)


@router.delete("/work-orders/{work_order_id}", status_code=status.HTTP_204_NO_CONTENT, summary="작업지시 삭제 (소프트 삭제)")
async def delete_work_order(
    work_order_id: int,
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("work_orders", "delete")),
):
    db_work_order = await wo_crud.work_order.get_or_404(db, work_order_id, detail="Work order not found")
    await wo_crud.work_order.soft_delete(db, db_obj=db_work_order)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =============================================================================
# 2. 작업지시 자재 사용 (WorkOrderPart) 엔드포인트
# =============================================================================
@router.get(
    "/work-orders/{work_order_id}/parts",
    response_model=List[wo_schemas.WorkOrderPartReadWithInventory],
    summary="작업지시 자재 사용 내역 조회",
)
async def read_work_order_parts(
    work_order_id: int,
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("work_order_parts", "read")),
):
    return await wo_crud.work_order_part.get_by_work_order(db, work_order_id=work_order_id)


@router.post(
    "/work-orders/{work_order_id}/parts",
    response_model=wo_schemas.WorkOrderPartRead,
    status_code=status.HTTP_201_CREATED,
    summary="작업지시에 자재 사용 등록 (재고 차감)",
)
async def create_work_order_part(
    work_order_id: int,
    part_in: wo_schemas.WorkOrderPartCreate,
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("work_order_parts", "create")),
):
    return await wo_crud.work_order_part.add_part(db, work_order_id=work_order_id, obj_in=part_in)


@router.put("/work-order-parts/{part_id}", response_model=wo_schemas.WorkOrderPartRead, summary="자재 사용 수량 변경 (재고 조정)")
async def update_work_order_part(
    part_id: int,
    part_in: wo_schemas.WorkOrderPartUpdate,
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("work_order_parts", "update")),
):
    return await wo_crud.work_order_part.update_quantity(db, id=part_id, obj_in=part_in)


@router.delete("/work-order-parts/{part_id}", status_code=status.HTTP_204_NO_CONTENT, summary="자재 사용 취소 (재고 복원)")
async def delete_work_order_part(
    part_id: int,
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("work_order_parts", "delete")),
):
    await wo_crud.work_order_part.remove(db, id=part_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =============================================================================
# 3. 작업지시 인력 투입 (WorkOrderLabor) 엔드포인트
# =============================================================================
@router.get(
    "/work-orders/{work_order_id}/labor",
    response_model=List[wo_schemas.WorkOrderLaborReadWithUser],
    summary="작업지시 인력 투입 내역 조회",
)
async def read_work_order_labor(
    work_order_id: int,
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("work_order_labor", "read")),
):
    return await wo_crud.work_order_labor.get_by_work_order(db, work_order_id=work_order_id)


@router.post(
    "/work-orders/{work_order_id}/labor",
    response_model=wo_schemas.WorkOrderLaborRead,
    status_code=status.HTTP_201_CREATED,
    summary="작업지시 인력 투입 등록",
)
async def create_work_order_labor(
    work_order_id: int,
    labor_in: wo_schemas.WorkOrderLaborCreate,
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("work_order_labor", "create")),
):
    return await wo_crud.work_order_labor.add_labor(db, work_order_id=work_order_id, obj_in=labor_in)


@router.put("/work-order-labor/{labor_id}", response_model=wo_schemas.WorkOrderLaborRead, summary="인력 투입 내역 수정")
async def update_work_order_labor(
    labor_id: int,
    labor_in: wo_schemas.WorkOrderLaborUpdate,
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("work_order_labor", "update")),
):
    db_labor = await wo_crud.work_order_labor.get_or_404(db, labor_id, detail="Labor entry not found")
    return await wo_crud.work_order_labor.update(db, db_obj=db_labor, obj_in=labor_in)


@router.delete("/work-order-labor/{labor_id}", status_code=status.HTTP_204_NO_CONTENT, summary="인력 투입 내역 삭제")
async def delete_work_order_labor(
    labor_id: int,
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("work_order_labor", "delete")),
):
    await wo_crud.work_order_labor.get_or_404(db, labor_id, detail="Labor entry not found")
    await wo_crud.work_order_labor.delete(db, id=labor_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
