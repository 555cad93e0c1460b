# pmms/domains/fms/routers.py

"""
'fms' 도메인 (설비 및 예방정비 관리)과 관련된 API 엔드포인트를 정의하는 모듈입니다.

- /machines, /plants/{plant_id}/machines
- /maintenance-schedules, /machines/{machine_id}/maintenance-schedules
- /maintenance-schedules/{schedule_id}/complete
"""

from typing import List, Optional
from datetime import datetime, UTC

from fastapi import APIRouter, Depends, Response, status, Query, Body
from sqlmodel.ext.asyncio.session import AsyncSession

from pmms.core.database import get_session
from pmms.core import dependencies as deps
from pmms.domains.usr.models import User as UsrUser

from . import crud as fms_crud
from . import schemas as fms_schemas


router = APIRouter(
    tags=["Facility Maintenance (설비 및 예방정비 관리)"],
    responses={404: {"description": "Not found"}},
)


# =============================================================================
# 1. 설비 (Machine) 엔드포인트
# =============================================================================
@router.post("/machines", response_model=fms_schemas.MachineRead, status_code=status.HTTP_201_CREATED, summary="새 설비 등록")
async def create_machine(
    machine_in: fms_schemas.MachineCreate,
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("machines", "create")),
):
    return await fms_crud.machine.create(db, obj_in=machine_in)


@router.get("/machines", response_model=List[fms_schemas.MachineRead], summary="모든 설비 조회")
async def read_machines(
    db: AsyncSession = Depends(get_session),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1),
    current_user: UsrUser = Depends(deps.require_permission("machines", "read")),
):
    return await fms_crud.machine.get_multi(db, skip=skip, limit=limit)


@router.get("/plants/{plant_id}/machines", response_model=List[fms_schemas.MachineRead], summary="공장별 설비 조회")
async def read_machines_by_plant(
    plant_id: int,
    db: AsyncSession = Depends(get_session),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1),
    current_user: UsrUser = Depends(deps.require_permission("machines", "read")),
):
    return await fms_crud.machine.get_by_plant(db, plant_id=plant_id, skip=skip, limit=limit)


@router.get("/machines/{machine_id}", response_model=fms_schemas.MachineRead, summary="특정 설비 조회")
async def read_machine(
    machine_id: int,
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("machines", "read")),
):
    return await fms_crud.machine.get_or_404(db, machine_id, detail="Machine not found")


@router.put("/machines/{machine_id}", response_model=fms_schemas.MachineRead, summary="설비 정보 업데이트")
async def update_machine(
    machine_id: int,
    machine_in: fms_schemas.MachineUpdate,
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("machines", "update")),
):
    db_machine = await fms_crud.machine.get_or_404(db, machine_id, detail="Machine not found")
    return await fms_crud.machine.update(db, db_obj=db_machine, obj_in=machine_in)


@router.delete("/machines/{machine_id}", status_code=status.HTTP_204_NO_CONTENT, summary="설비 삭제 (소프트 삭제)")
async def delete_machine(
    machine_id: int,
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("machines", "delete")),
):
    db_machine = await fms_crud.machine.get_or_404(db, machine_id, detail="Machine not found")
    await fms_crud.machine.soft_delete(db, db_obj=db_machine)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =============================================================================
# 2. 정비 일정 (MaintenanceSchedule) 엔드포인트
# =============================================================================
@router.get("/maintenance-schedules", response_model=List[fms_schemas.MaintenanceScheduleRead], summary="모든 정비 일정 조회")
async def read_maintenance_schedules(
    db: AsyncSession = Depends(get_session),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1),
    current_user: UsrUser = Depends(deps.require_permission("maintenance_schedules", "read")),
):
    return await fms_crud.maintenance_schedule.get_multi(db, skip=skip, limit=limit)


@router.get(
    "/machines/{machine_id}/maintenance-schedules",
    response_model=List[fms_schemas.MaintenanceScheduleRead],
    summary="설비별 정비 일정 조회",
)
async def read_maintenance_schedules_by_machine(
    machine_id: int,
    db: AsyncSession = Depends(get_session),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1),
    current_user: UsrUser = Depends(deps.require_permission("maintenance_schedules", "read")),
):
    return await fms_crud.maintenance_schedule.get_by_machine(db, machine_id=machine_id, skip=skip, limit=limit)


@router.get("/maintenance-schedules/{schedule_id}", response_model=fms_schemas.MaintenanceScheduleRead, summary="특정 정비 일정 조회")
async def read_maintenance_schedule(
    schedule_id: int,
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("maintenance_schedules", "read")),
):
    return await fms_crud.maintenance_schedule.get_or_404(db, schedule_id, detail="Maintenance schedule not found")


@router.post(
    "/maintenance-schedules",
    response_model=fms_schemas.MaintenanceScheduleRead,
    status_code=status.HTTP_201_CREATED,
    summary="새 정비 일정 생성",
)
async def create_maintenance_schedule(
    schedule_in: fms_schemas.MaintenanceScheduleCreate,
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("maintenance_schedules", "create")),
):
    return await fms_crud.maintenance_schedule.create(db, obj_in=schedule_in)


@router.put("/maintenance-schedules/{schedule_id}", response_model=fms_schemas.MaintenanceScheduleRead, summary="정비 일정 업데이트")
async def update_maintenance_schedule(
    schedule_id: int,
    schedule_in: fms_schemas.MaintenanceScheduleUpdate,
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("maintenance_schedules", "update")),
):
    db_schedule = await fms_crud.maintenance_schedule.get_or_404(db, schedule_id, detail="Maintenance schedule not found")
    return await fms_crud.maintenance_schedule.update(db, db_obj=db_schedule, obj_in=schedule_in)


@router.delete("/maintenance-schedules/{schedule_id}", status_code=status.HTTP_204_NO_CONTENT, summary="정비 일정 삭제 (소프트 삭제)")
async def delete_maintenance_schedule(
    schedule_id: int,
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("maintenance_schedules", "delete")),
):
    db_schedule = await fms_crud.maintenance_schedule.get_or_404(db, schedule_id, detail="Maintenance schedule not found")
    await fms_crud.maintenance_schedule.soft_delete(db, db_obj=db_schedule)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/maintenance-schedules/{schedule_id}/complete",
    response_model=fms_schemas.MaintenanceScheduleRead,
    summary="정비 완료 처리",
)
async def complete_maintenance_schedule(
    schedule_id: int,
    complete_in: Optional[fms_schemas.MaintenanceCompleteRequest] = Body(None),
    db: AsyncSession = Depends(get_session),
    current_user: UsrUser = Depends(deps.require_permission("maintenance_schedules", "update")),
):
    """
    정비 완료일을 기록하고 다음 정비 예정일(완료일 + 주기)을 일정과 설비에 함께 반영합니다.
    """
    completion_date = complete_in.completion_date if complete_in else None
    if completion_date is None:
        completion_date = datetime.now(UTC).date()
    return await fms_crud.maintenance_schedule.complete(db, schedule_id=schedule_id, completion_date=completion_date)
