# pmms/domains/ven/routers.py

"""
'ven' 도메인 (공급업체 관리)과 관련된 API 엔드포인트를 정의하는 모듈입니다.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status, Query
from sqlmodel.ext.asyncio.session import AsyncSession

from pmms.core.database import get_session
from pmms.core import dependencies as deps
from pmms.core.exceptions import NotFoundError
from pmms.domains.usr.models import User as UsrUser

from . import crud as ven_crud
from . import schemas as ven_schemas


router = APIRouter(
    tags=["Vendor Management (공급업체 관리)"],
    responses={404: {"description": "Not found"}},
)


@router.post("/vendors", response_model=ven_schemas.VendorRead, status_code=status.HTTP_201_CREATED, summary="새 공급업체 생성")
async def create_vendor(
    vendor_in: ven_schemas.VendorCreate,
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("vendors", "create")),
):
    return await ven_crud.vendor.create(db, obj_in=vendor_in)


@router.get("/vendors", response_model=List[ven_schemas.VendorRead], summary="모든 공급업체 조회")
async def read_vendors(
    db: AsyncSession = Depends(get_session),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1),
    current_user: UsrUser = Depends(deps.require_permission("vendors", "read")),
):
    return await ven_crud.vendor.get_multi(db, skip=skip, limit=limit)


@router.get("/vendors/{vendor_id}", response_model=ven_schemas.VendorRead, summary="특정 공급업체 조회")
async def read_vendor(
    vendor_id: int,
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("vendors", "read")),
):
    db_vendor = await ven_crud.vendor.get(db, id=vendor_id)
    if not db_vendor:
        raise NotFoundError("Vendor not found")
    return db_vendor


@router.put("/vendors/{vendor_id}", response_model=ven_schemas.VendorRead, summary="공급업체 정보 업데이트")
async def update_vendor(
    vendor_id: int,
    vendor_in: ven_schemas.VendorUpdate,
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("vendors", "update")),
):
    db_vendor = await ven_crud.vendor.get(db, id=vendor_id)
    if not db_vendor:
        raise NotFoundError("Vendor not found")
    return await ven_crud.vendor.update(db, db_obj=db_vendor, obj_in=vendor_in)


@router.delete("/vendors/{vendor_id}", status_code=status.HTTP_204_NO_CONTENT, summary="공급업체 삭제 (소프트 삭제)")
async def delete_vendor(
    vendor_id: int,
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("vendors", "delete")),
):
    db_vendor = await ven_crud.vendor.get(db, id=vendor_id)
    if not db_vendor:
        raise NotFoundError("Vendor not found")
    await ven_crud.vendor.soft_delete(db, db_obj=db_vendor)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
