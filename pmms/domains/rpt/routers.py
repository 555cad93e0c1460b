# pmms/domains/rpt/routers.py

"""
'rpt' 도메인 (보고서)과 관련된 API 엔드포인트를 정의하는 모듈입니다.
"""

from typing import List, Optional
from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlmodel.ext.asyncio.session import AsyncSession

from pmms.core.database import get_session
from pmms.core import dependencies as deps
from pmms.domains.usr.models import User as UsrUser
from . import crud, schemas

router = APIRouter(
    tags=["Report Management (보고서 관리)"],
    responses={404: {"description": "Not found"}},
)


@router.get("/reports/work-orders", response_model=schemas.WorkOrderReport, summary="작업지시 현황 보고서")
async def work_order_report(
    start_date: Optional[date] = Query(None, description="조회 시작일 (작업지시 생성일 기준)"),
    end_date: Optional[date] = Query(None, description="조회 종료일 (당일 포함)"),
    plant_id: Optional[int] = Query(None),
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("reports", "read")),
):
    return await crud.get_work_order_report(db, start_date=start_date, end_date=end_date, plant_id=plant_id)


@router.get("/reports/machine-downtime", response_model=List[schemas.MachineDowntime], summary="설비 정지 시간 보고서")
async def machine_downtime_report(
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    plant_id: Optional[int] = Query(None),
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("reports", "read")),
):
    return await crud.get_machine_downtime(db, start_date=start_date, end_date=end_date, plant_id=plant_id)


@router.get("/reports/inventory-usage", response_model=List[schemas.InventoryUsage], summary="자재 사용량 보고서")
async def inventory_usage_report(
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    plant_id: Optional[int] = Query(None),
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("reports", "read")),
):
    return await crud.get_inventory_usage(db, start_date=start_date, end_date=end_date, plant_id=plant_id)


@router.get("/reports/labor-hours", response_model=List[schemas.LaborHours], summary="인력 투입 시간 보고서")
async def labor_hours_report(
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    plant_id: Optional[int] = Query(None),
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("reports", "read")),
):
    return await crud.get_labor_hours(db, start_date=start_date, end_date=end_date, plant_id=plant_id)
