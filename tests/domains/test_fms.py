# tests/domains/test_fms.py

"""
'fms' 도메인 (설비 및 예방정비 관리) 관련 API 엔드포인트에 대한 통합 테스트를 정의하는 모듈입니다.

- 설비 CRUD 및 시리얼 번호 중복(409)
- 공장별 설비 조회
- 정비 일정 CRUD 및 완료 처리 (다음 정비 예정일 계산과 설비 반영)
"""

from datetime import date, datetime, UTC

import pytest
from httpx import AsyncClient

from pmms.domains.fms import crud as fms_crud
from pmms.domains.fms.crud import compute_next_due


def _machine_payload(**overrides) -> dict:
    payload = {
        "name": "Press #1",
        "model": "HP-500",
        "manufacturer": "Hyundai",
        "serial_number": "SN-PRESS-001",
    }
    payload.update(overrides)
    return payload


def _schedule_payload(machine_id: int, **overrides) -> dict:
    payload = {
        "machine_id": machine_id,
        "name": "월간 윤활 점검",
        "description": "Lubricate guide rails and check oil level",
        "frequency_days": 30,
        "next_due": "2025-01-01",
    }
    payload.update(overrides)
    return payload


# --- 다음 정비 예정일 계산 ---

def test_compute_next_due_adds_calendar_days():
    assert compute_next_due(date(2025, 1, 1), 30) == date(2025, 1, 31)
    assert compute_next_due(date(2024, 2, 28), 1) == date(2024, 2, 29)
    assert compute_next_due(date(2024, 12, 31), 1) == date(2025, 1, 1)


# --- 설비 (Machine) ---

@pytest.mark.asyncio
async def test_create_machine_success_admin(admin_client: AsyncClient, test_plant):
    response = await admin_client.post("/api/machines", json=_machine_payload(plant_id=test_plant.id))

    assert response.status_code == 201
    created = response.json()
    assert created["serial_number"] == "SN-PRESS-001"
    assert created["status"] == "active"
    assert created["plant_id"] == test_plant.id


@pytest.mark.asyncio
async def test_create_machine_without_plant(admin_client: AsyncClient):
    response = await admin_client.post("/api/machines", json=_machine_payload())

    assert response.status_code == 201
    assert response.json()["plant_id"] is None


@pytest.mark.asyncio
async def test_create_machine_unknown_plant_returns_404(admin_client: AsyncClient):
    response = await admin_client.post("/api/machines", json=_machine_payload(plant_id=9999))

    assert response.status_code == 404
    assert response.json()["detail"] == "Plant not found"


@pytest.mark.asyncio
async def test_create_machine_duplicate_serial_returns_409(admin_client: AsyncClient, test_machine):
    response = await admin_client.post("/api/machines", json=_machine_payload(serial_number=test_machine.serial_number))

    assert response.status_code == 409
    assert response.json()["detail"] == "Machine with this serial number already exists"


@pytest.mark.asyncio
async def test_duplicate_serial_caught_by_unique_constraint_returns_409(
    admin_client: AsyncClient, test_machine, monkeypatch
):
    # 사전 검사를 통과한 뒤 동시에 등록된 경우와 같이, 고유 제약 위반만 남는 상황
    async def _skip_check(db, serial_number):
        return None

    monkeypatch.setattr(fms_crud.machine, "_check_serial_number", _skip_check)

    response = await admin_client.post("/api/machines", json=_machine_payload(serial_number=test_machine.serial_number))
    assert response.status_code == 409
    assert response.json()["detail"] == "Machine with this serial number already exists"

    other = await admin_client.post("/api/machines", json=_machine_payload(serial_number="SN-RACE"))
    assert other.status_code == 201
    response = await admin_client.put(
        f"/api/machines/{other.json()['id']}", json={"serial_number": test_machine.serial_number}
    )
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_serial_number_of_deleted_machine_still_conflicts(admin_client: AsyncClient, test_machine):
    response = await admin_client.delete(f"/api/machines/{test_machine.id}")
    assert response.status_code == 204

    response = await admin_client.post("/api/machines", json=_machine_payload(serial_number=test_machine.serial_number))
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_update_machine_to_existing_serial_returns_409(admin_client: AsyncClient, test_machine):
    other = await admin_client.post("/api/machines", json=_machine_payload(serial_number="SN-OTHER"))
    assert other.status_code == 201

    response = await admin_client.put(
        f"/api/machines/{other.json()['id']}", json={"serial_number": test_machine.serial_number}
    )
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_update_machine_status(admin_client: AsyncClient, test_machine):
    response = await admin_client.put(f"/api/machines/{test_machine.id}", json={"status": "maintenance"})

    assert response.status_code == 200
    assert response.json()["status"] == "maintenance"
    assert response.json()["serial_number"] == test_machine.serial_number


@pytest.mark.asyncio
async def test_update_machine_invalid_status_returns_400(admin_client: AsyncClient, test_machine):
    response = await admin_client.put(f"/api/machines/{test_machine.id}", json={"status": "exploded"})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_machine_write_forbidden_for_manager(manager_client: AsyncClient, test_machine):
    response = await manager_client.post("/api/machines", json=_machine_payload(serial_number="SN-MGR"))
    assert response.status_code == 403

    response = await manager_client.get(f"/api/machines/{test_machine.id}")
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_read_machines_by_plant(technician_client: AsyncClient, test_machine, test_plant):
    response = await technician_client.get(f"/api/plants/{test_plant.id}/machines")

    assert response.status_code == 200
    assert [m["id"] for m in response.json()] == [test_machine.id]

    response = await technician_client.get("/api/plants/9999/machines")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_soft_deleted_machine_is_hidden(admin_client: AsyncClient, test_machine):
    await admin_client.delete(f"/api/machines/{test_machine.id}")

    response = await admin_client.get(f"/api/machines/{test_machine.id}")
    assert response.status_code == 404
    assert response.json()["detail"] == "Machine not found"

    response = await admin_client.get("/api/machines")
    assert response.json() == []


# --- 정비 일정 (MaintenanceSchedule) ---

@pytest.mark.asyncio
async def test_create_schedule_any_role(technician_client: AsyncClient, test_machine):
    response = await technician_client.post("/api/maintenance-schedules", json=_schedule_payload(test_machine.id))

    assert response.status_code == 201
    created = response.json()
    assert created["frequency_days"] == 30
    assert created["last_completed"] is None
    assert created["next_due"] == "2025-01-01"


@pytest.mark.asyncio
async def test_create_schedule_unknown_machine_returns_404(technician_client: AsyncClient):
    response = await technician_client.post("/api/maintenance-schedules", json=_schedule_payload(9999))

    assert response.status_code == 404
    assert response.json()["detail"] == "Machine not found"


@pytest.mark.asyncio
async def test_create_schedule_zero_frequency_returns_400(technician_client: AsyncClient, test_machine):
    response = await technician_client.post(
        "/api/maintenance-schedules", json=_schedule_payload(test_machine.id, frequency_days=0)
    )

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "frequency_days"


@pytest.mark.asyncio
async def test_complete_schedule_updates_schedule_and_machine(
    technician_client: AsyncClient, test_machine
):
    created = await technician_client.post("/api/maintenance-schedules", json=_schedule_payload(test_machine.id))
    schedule_id = created.json()["id"]

    response = await technician_client.post(
        f"/api/maintenance-schedules/{schedule_id}/complete", json={"completion_date": "2025-01-01"}
    )

    assert response.status_code == 200
    schedule = response.json()
    assert schedule["last_completed"] == "2025-01-01"
    assert schedule["next_due"] == "2025-01-31"

    machine = (await technician_client.get(f"/api/machines/{test_machine.id}")).json()
    assert machine["last_maintenance_date"] == "2025-01-01"
    assert machine["next_maintenance_date"] == "2025-01-31"


@pytest.mark.asyncio
async def test_complete_schedule_defaults_to_today(technician_client: AsyncClient, test_machine):
    created = await technician_client.post(
        "/api/maintenance-schedules", json=_schedule_payload(test_machine.id, frequency_days=7)
    )

    before = datetime.now(UTC).date()
    response = await technician_client.post(f"/api/maintenance-schedules/{created.json()['id']}/complete")
    after = datetime.now(UTC).date()

    assert response.status_code == 200
    # 완료일 기본값은 UTC 기준 오늘 (요청 중 자정이 지날 수 있으므로 전후 날짜 허용)
    last_completed = date.fromisoformat(response.json()["last_completed"])
    assert last_completed in {before, after}
    assert date.fromisoformat(response.json()["next_due"]) == compute_next_due(last_completed, 7)


@pytest.mark.asyncio
async def test_complete_schedule_invalid_date_returns_400(technician_client: AsyncClient, test_machine):
    created = await technician_client.post("/api/maintenance-schedules", json=_schedule_payload(test_machine.id))

    response = await technician_client.post(
        f"/api/maintenance-schedules/{created.json()['id']}/complete", json={"completion_date": "2025-13-45"}
    )

    assert response.status_code == 400
    # 실패한 요청은 일정을 변경하지 않습니다.
    schedule = (await technician_client.get(f"/api/maintenance-schedules/{created.json()['id']}")).json()
    assert schedule["last_completed"] is None


@pytest.mark.asyncio
async def test_complete_unknown_schedule_returns_404(technician_client: AsyncClient):
    response = await technician_client.post(
        "/api/maintenance-schedules/9999/complete", json={"completion_date": "2025-01-01"}
    )

    assert response.status_code == 404
    assert response.json()["detail"] == "Maintenance schedule not found"


@pytest.mark.asyncio
async def test_complete_schedule_of_deleted_machine_returns_404(
    admin_client: AsyncClient, test_machine
):
    created = await admin_client.post("/api/maintenance-schedules", json=_schedule_payload(test_machine.id))
    await admin_client.delete(f"/api/machines/{test_machine.id}")

    response = await admin_client.post(
        f"/api/maintenance-schedules/{created.json()['id']}/complete", json={"completion_date": "2025-01-01"}
    )

    assert response.status_code == 404
    assert response.json()["detail"] == "Associated machine not found"

    schedule = (await admin_client.get(f"/api/maintenance-schedules/{created.json()['id']}")).json()
    assert schedule["next_due"] == "2025-01-01"


@pytest.mark.asyncio
async def test_read_schedules_by_machine(technician_client: AsyncClient, test_machine):
    first = await technician_client.post("/api/maintenance-schedules", json=_schedule_payload(test_machine.id))
    second = await technician_client.post(
        "/api/maintenance-schedules", json=_schedule_payload(test_machine.id, name="분기 점검", frequency_days=90)
    )

    response = await technician_client.get(f"/api/machines/{test_machine.id}/maintenance-schedules")

    assert response.status_code == 200
    assert [s["id"] for s in response.json()] == [first.json()["id"], second.json()["id"]]


@pytest.mark.asyncio
async def test_update_and_delete_schedule(technician_client: AsyncClient, test_machine):
    created = await technician_client.post("/api/maintenance-schedules", json=_schedule_payload(test_machine.id))
    schedule_id = created.json()["id"]

    response = await technician_client.put(f"/api/maintenance-schedules/{schedule_id}", json={"frequency_days": 14})
    assert response.status_code == 200
    assert response.json()["frequency_days"] == 14

    response = await technician_client.delete(f"/api/maintenance-schedules/{schedule_id}")
    assert response.status_code == 204

    response = await technician_client.get(f"/api/maintenance-schedules/{schedule_id}")
    assert response.status_code == 404
