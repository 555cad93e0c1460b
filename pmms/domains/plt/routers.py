# pmms/domains/plt/routers.py

"""
'plt' 도메인 (공장 관리)과 관련된 API 엔드포인트를 정의하는 모듈입니다.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status, Query
from sqlmodel.ext.asyncio.session import AsyncSession

from pmms.core.database import get_session
from pmms.core import dependencies as deps
from pmms.core.exceptions import NotFoundError
from pmms.domains.usr.models import User as UsrUser

from . import crud as plt_crud
from . import schemas as plt_schemas


router = APIRouter(
    tags=["Plant Management (공장 관리)"],
    responses={404: {"description": "Not found"}},
)


# =============================================================================
# 1. 공장 (Plant) 엔드포인트
# =============================================================================
@router.post("/plants", response_model=plt_schemas.PlantRead, status_code=status.HTTP_201_CREATED, summary="새 공장 생성")
async def create_plant(
    plant_in: plt_schemas.PlantCreate,
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("plants", "create")),
):
    return await plt_crud.plant.create(db, obj_in=plant_in)


@router.get("/plants", response_model=List[plt_schemas.PlantRead], summary="모든 공장 조회")
async def read_plants(
    db: AsyncSession = Depends(get_session),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1),
    current_user: UsrUser = Depends(deps.require_permission("plants", "read")),
):
    return await plt_crud.plant.get_multi(db, skip=skip, limit=limit)


@router.get("/plants/{plant_id}", response_model=plt_schemas.PlantRead, summary="특정 공장 조회")
async def read_plant(
    plant_id: int,
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("plants", "read")),
):
    db_plant = await plt_crud.plant.get(db, id=plant_id)
    if not db_plant:
        raise NotFoundError("Plant not found")
    return db_plant


@router.put("/plants/{plant_id}", response_model=plt_schemas.PlantRead, summary="공장 정보 업데이트")
async def update_plant(
    plant_id: int,
    plant_in: plt_schemas.PlantUpdate,
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("plants", "update")),
):
    db_plant = await plt_crud.plant.get(db, id=plant_id)
    if not db_plant:
        raise NotFoundError("Plant not found")
    return await plt_crud.plant.update(db, db_obj=db_plant, obj_in=plant_in)


@router.delete("/plants/{plant_id}", status_code=status.HTTP_204_NO_CONTENT, summary="공장 삭제 (소프트 삭제)")
async def delete_plant(
    plant_id: int,
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("plants", "delete")),
):
    db_plant = await plt_crud.plant.get(db, id=plant_id)
    if not db_plant:
        raise NotFoundError("Plant not found")
    await plt_crud.plant.soft_delete(db, db_obj=db_plant)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
