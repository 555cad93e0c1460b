# pmms/domains/fms/crud.py

"""
'fms' 도메인 (설비 및 예방정비 관리)의 CRUD 작업을 담당하는 모듈입니다.

정비 일정 완료(complete) 시 다음 정비 예정일을 계산하여
정비 일정과 대상 설비를 하나의 트랜잭션에서 함께 갱신합니다.
"""

import logging
from typing import List
from datetime import date, timedelta

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlalchemy.exc import IntegrityError

from pmms.core.crud_base import CRUDBase
from pmms.core.exceptions import ConflictError, NotFoundError
from pmms.domains.plt.crud import plant as plant_crud
from . import models as fms_models
from . import schemas as fms_schemas

logger = logging.getLogger(__name__)

DUPLICATE_SERIAL_DETAIL = "Machine with this serial number already exists"


def compute_next_due(completion_date: date, frequency_days: int) -> date:
    """완료일에 정비 주기(일)를 달력 일수로 더한 다음 정비 예정일을 반환합니다."""
    return completion_date + timedelta(days=frequency_days)


# =============================================================================
# 1. machines 테이블 CRUD
# =============================================================================
class CRUDMachine(CRUDBase[fms_models.Machine, fms_schemas.MachineCreate, fms_schemas.MachineUpdate]):
    def __init__(self):
        super().__init__(model=fms_models.Machine)

    async def _check_serial_number(self, db: AsyncSession, serial_number: str) -> None:
        # 시리얼 번호는 소프트 삭제된 설비를 포함해 전체에서 고유해야 합니다.
        existing = await self.get_by_attribute(
            db, attribute="serial_number", value=serial_number, include_deleted=True
        )
        if existing:
            raise ConflictError(DUPLICATE_SERIAL_DETAIL)

    async def create(self, db: AsyncSession, *, obj_in: fms_schemas.MachineCreate) -> fms_models.Machine:
        if obj_in.plant_id is not None:
            await plant_crud.get_or_404(db, obj_in.plant_id, detail="Plant not found")
        await self._check_serial_number(db, obj_in.serial_number)
        try:
            return await super().create(db, obj_in=obj_in)
        except IntegrityError:
            # 검사 이후 다른 요청이 같은 시리얼 번호를 먼저 등록한 경우
            await db.rollback()
            raise ConflictError(DUPLICATE_SERIAL_DETAIL)

    async def update(
        self, db: AsyncSession, *, db_obj: fms_models.Machine, obj_in: fms_schemas.MachineUpdate
    ) -> fms_models.Machine:
        if obj_in.plant_id is not None:
            await plant_crud.get_or_404(db, obj_in.plant_id, detail="Plant not found")
        if obj_in.serial_number is not None and obj_in.serial_number != db_obj.serial_number:
            await self._check_serial_number(db, obj_in.serial_number)
        try:
            return await super().update(db, db_obj=db_obj, obj_in=obj_in)
        except IntegrityError:
            await db.rollback()
            raise ConflictError(DUPLICATE_SERIAL_DETAIL)

    async def get_by_plant(
        self, db: AsyncSession, *, plant_id: int, skip: int = 0, limit: int = 100
    ) -> List[fms_models.Machine]:
        await plant_crud.get_or_404(db, plant_id, detail="Plant not found")
        return await self.get_multi(db, skip=skip, limit=limit, plant_id=plant_id)


machine = CRUDMachine()


# =============================================================================
# 2. maintenance_schedules 테이블 CRUD
# =============================================================================
class CRUDMaintenanceSchedule(
    CRUDBase[
        fms_models.MaintenanceSchedule,
        fms_schemas.MaintenanceScheduleCreate,
        fms_schemas.MaintenanceScheduleUpdate,
    ]
):
    def __init__(self):
        super().__init__(model=fms_models.MaintenanceSchedule)

    async def create(
        self, db: AsyncSession, *, obj_in: fms_schemas.MaintenanceScheduleCreate
    ) -> fms_models.MaintenanceSchedule:
        await machine.get_or_404(db, obj_in.machine_id, detail="Machine not found")
        return await super().create(db, obj_in=obj_in)

    async def get_by_machine(
        self, db: AsyncSession, *, machine_id: int, skip: int = 0, limit: int = 100
    ) -> List[fms_models.MaintenanceSchedule]:
        await machine.get_or_404(db, machine_id, detail="Machine not found")
        return await self.get_multi(db, skip=skip, limit=limit, machine_id=machine_id)

    async def complete(
        self, db: AsyncSession, *, schedule_id: int, completion_date: date
    ) -> fms_models.MaintenanceSchedule:
        """
        정비 완료를 기록합니다.

        - next_due = completion_date + frequency_days (달력 일수)
        - 일정의 last_completed/next_due 와 설비의 last/next_maintenance_date 를 함께 갱신
        - 두 행 모두 행 잠금(SELECT ... FOR UPDATE) 후 한 번의 커밋으로 반영하며,
          실패 시 전체를 롤백합니다.
        """
        Schedule = fms_models.MaintenanceSchedule
        Machine = fms_models.Machine
        try:
            schedule_stmt = (
                select(Schedule)
                .where(Schedule.id == schedule_id, Schedule.deleted_at.is_(None))
                .with_for_update()
            )
            schedule = (await db.execute(schedule_stmt)).scalars().first()
            if schedule is None:
                raise NotFoundError("Maintenance schedule not found")

            machine_stmt = (
                select(Machine)
                .where(Machine.id == schedule.machine_id, Machine.deleted_at.is_(None))
                .with_for_update()
            )
            db_machine = (await db.execute(machine_stmt)).scalars().first()
            if db_machine is None:
                raise NotFoundError("Associated machine not found")

            next_due = compute_next_due(completion_date, schedule.frequency_days)

            schedule.last_completed = completion_date
            schedule.next_due = next_due
            db_machine.last_maintenance_date = completion_date
            db_machine.next_maintenance_date = next_due

            db.add(schedule)
            db.add(db_machine)
            await db.commit()
        except Exception:
            await db.rollback()
            raise

        await db.refresh(schedule)
        logger.info(
            "정비 완료: schedule=%s machine=%s completed=%s next_due=%s",
            schedule.id, schedule.machine_id, completion_date, next_due,
        )
        return schedule


maintenance_schedule = CRUDMaintenanceSchedule()
