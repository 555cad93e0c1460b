# pmms/domains/ops/routers.py

"""
'ops' 도메인 (설비 고장 호출)과 관련된 API 엔드포인트를 정의하는 모듈입니다.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status, Query
from sqlmodel.ext.asyncio.session import AsyncSession

from pmms.core.database import get_session
from pmms.core import dependencies as deps
from pmms.domains.usr.models import User as UsrUser

from . import crud as ops_crud
from . import models as ops_models
from . import schemas as ops_schemas


router = APIRouter(
    tags=["Operations - Breakdown Calls (설비 고장 호출)"],
    responses={404: {"description": "Not found"}},
)


@router.post("/calls", response_model=ops_schemas.CallRead, status_code=status.HTTP_201_CREATED, summary="고장 호출 접수")
async def create_call(
    call_in: ops_schemas.CallCreate,
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("calls", "create")),
):
    return await ops_crud.call.create(db, obj_in=call_in)


@router.get("/calls", response_model=List[ops_schemas.CallRead], summary="고장 호출 목록 조회")
async def read_calls(
    db: AsyncSession = Depends(get_session),
    status_filter: Optional[ops_models.CallStatus] = Query(None, alias="status"),
    machine_id: Optional[int] = Query(None),
    shift: Optional[int] = Query(None, ge=1, le=3),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1),
    current_user: UsrUser = Depends(deps.require_permission("calls", "read")),
):
    return await ops_crud.call.get_filtered(
        db,
        filters={"status": status_filter, "machine_id": machine_id, "shift": shift},
        order_by_field="reported_at",
        skip=skip,
        limit=limit,
    )


@router.get("/calls/{call_id}", response_model=ops_schemas.CallRead, summary="특정 고장 호출 조회")
async def read_call(
    call_id: int,
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("calls", "read")),
):
    return await ops_crud.call.get_or_404(db, call_id, detail="Call not found")


@router.put("/calls/{call_id}", response_model=ops_schemas.CallRead, summary="고장 호출 업데이트")
async def update_call(
    call_id: int,
    call_in: ops_schemas.CallUpdate,
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("calls", "update")),
):
    db_call = await ops_crud.call.get_or_404(db, call_id, detail="Call not found")
    return await ops_crud.call.update(db, db_obj=db_call, obj_in=call_in)


@router.delete("/calls/{call_id}", status_code=status.HTTP_204_NO_CONTENT, summary="고장 호출 삭제 (소프트 삭제)")
async def delete_call(
    call_id: int,
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("calls", "delete")),
):
    db_call = await ops_crud.call.get_or_404(db, call_id, detail="Call not found")
    await ops_crud.call.soft_delete(db, db_obj=db_call)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
