# pmms/domains/rpt/crud.py

"""
'rpt' 도메인 (보고서)의 집계 쿼리를 담당하는 모듈입니다.

모든 보고서는 start_date, end_date, plant_id 로 작업지시를 필터링합니다.
- 기간: 작업지시 created_at 기준, end_date 당일까지 포함
- 소프트 삭제된 작업지시는 집계에서 제외
시간 차이(완료 - 생성)는 DB 방언에 따라 계산 방식이 다르므로 Python 에서 계산합니다.
"""

from typing import Any, Dict, List, Optional
from datetime import date, datetime, time, timedelta, UTC

from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession

from pmms.domains.fms.models import Machine
from pmms.domains.inv.models import Inventory
from pmms.domains.usr.models import User
from pmms.domains.wo.models import WorkOrder, WorkOrderStatus, WorkOrderPart, WorkOrderLabor


def _work_order_conditions(
    start_date: Optional[date], end_date: Optional[date], plant_id: Optional[int]
) -> List[Any]:
    conditions = [WorkOrder.deleted_at.is_(None)]
    if start_date is not None:
        conditions.append(WorkOrder.created_at >= datetime.combine(start_date, time.min, tzinfo=UTC))
    if end_date is not None:
        end = datetime.combine(end_date + timedelta(days=1), time.min, tzinfo=UTC)
        conditions.append(WorkOrder.created_at < end)
    if plant_id is not None:
        conditions.append(WorkOrder.plant_id == plant_id)
    return conditions


def _as_utc(value: datetime) -> datetime:
    # SQLite 는 시간대 정보 없이 돌려주므로 UTC 로 간주합니다.
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def _elapsed_hours(created_at: datetime, completed_date: datetime) -> float:
    return (_as_utc(completed_date) - _as_utc(created_at)).total_seconds() / 3600


async def get_work_order_report(
    db: AsyncSession,
    *,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    plant_id: Optional[int] = None,
) -> Dict[str, Any]:
    """상태별/우선순위별 작업지시 건수와 평균 완료 소요 시간(시간)을 계산합니다."""
    conditions = _work_order_conditions(start_date, end_date, plant_id)

    status_result = await db.execute(
        select(WorkOrder.status, func.count(WorkOrder.id))
        .where(*conditions)
        .group_by(WorkOrder.status)
    )
    priority_result = await db.execute(
        select(WorkOrder.priority, func.count(WorkOrder.id))
        .where(*conditions)
        .group_by(WorkOrder.priority)
    )
    completed_result = await db.execute(
        select(WorkOrder.created_at, WorkOrder.completed_date).where(
            *conditions,
            WorkOrder.status == WorkOrderStatus.COMPLETED,
            WorkOrder.completed_date.is_not(None),
        )
    )

    durations = [_elapsed_hours(created, completed) for created, completed in completed_result.all()]
    avg_completion_time = round(sum(durations) / len(durations), 2) if durations else 0

    return {
        "status_counts": [{"status": s, "count": c} for s, c in status_result.all()],
        "priority_counts": [{"priority": p, "count": c} for p, c in priority_result.all()],
        "avg_completion_time": avg_completion_time,
    }


async def get_machine_downtime(
    db: AsyncSession,
    *,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    plant_id: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """설비별로 완료된 작업지시의 (완료 - 생성) 시간을 합산합니다. 합계 내림차순."""
    statement = (
        select(
            Machine.id, Machine.name, Machine.serial_number,
            WorkOrder.created_at, WorkOrder.completed_date,
        )
        .join(Machine, Machine.id == WorkOrder.machine_id)
        .where(
            *_work_order_conditions(start_date, end_date, plant_id),
            WorkOrder.status == WorkOrderStatus.COMPLETED,
            WorkOrder.completed_date.is_not(None),
        )
    )
    result = await db.execute(statement)

    downtime: Dict[int, Dict[str, Any]] = {}
    for machine_id, name, serial_number, created_at, completed_date in result.all():
        row = downtime.setdefault(machine_id, {
            "machine_id": machine_id,
            "machine_name": name,
            "serial_number": serial_number,
            "total_downtime_hours": 0.0,
        })
        row["total_downtime_hours"] += _elapsed_hours(created_at, completed_date)

    for row in downtime.values():
        row["total_downtime_hours"] = round(row["total_downtime_hours"], 2)
    return sorted(downtime.values(), key=lambda r: r["total_downtime_hours"], reverse=True)


async def get_inventory_usage(
    db: AsyncSession,
    *,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    plant_id: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """자재별 사용 수량 합계를 계산합니다. 합계 내림차순."""
    total_used = func.sum(WorkOrderPart.quantity_used).label("total_quantity_used")
    statement = (
        select(Inventory.id, Inventory.name, Inventory.unit_price, total_used)
        .join(WorkOrderPart, WorkOrderPart.inventory_id == Inventory.id)
        .join(WorkOrder, WorkOrder.id == WorkOrderPart.work_order_id)
        .where(*_work_order_conditions(start_date, end_date, plant_id))
        .group_by(Inventory.id, Inventory.name, Inventory.unit_price)
        .order_by(total_used.desc(), Inventory.id)
    )
    result = await db.execute(statement)
    return [
        {
            "inventory_id": inventory_id,
            "name": name,
            "unit_price": unit_price,
            "total_quantity_used": int(total),
        }
        for inventory_id, name, unit_price, total in result.all()
    ]


async def get_labor_hours(
    db: AsyncSession,
    *,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    plant_id: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """작업자별 투입 시간 합계를 계산합니다. 합계 내림차순."""
    total_hours = func.sum(WorkOrderLabor.hours_worked).label("total_hours")
    statement = (
        select(User.id, User.username, total_hours)
        .join(WorkOrderLabor, WorkOrderLabor.user_id == User.id)
        .join(WorkOrder, WorkOrder.id == WorkOrderLabor.work_order_id)
        .where(*_work_order_conditions(start_date, end_date, plant_id))
        .group_by(User.id, User.username)
        .order_by(total_hours.desc(), User.id)
    )
    result = await db.execute(statement)
    return [
        {"user_id": user_id, "username": username, "total_hours": float(total)}
        for user_id, username, total in result.all()
    ]
