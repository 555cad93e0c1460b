# tests/domains/test_inv.py

"""
'inv' 도메인 (자재 관리) 관련 API 엔드포인트에 대한 통합 테스트를 정의하는 모듈입니다.

- 자재 CRUD: `/inventory`, `/inventory/{id}`
- 조회는 모든 역할, 생성/수정은 admin/manager, 삭제는 admin 만 허용
- 수량/단가 음수 입력 거부
"""

from decimal import Decimal

import pytest
from httpx import AsyncClient


def _item_payload(**overrides) -> dict:
    payload = {
        "name": "V-Belt A42",
        "description": "Fan drive belt",
        "quantity": 25,
        "unit_price": "8.75",
    }
    payload.update(overrides)
    return payload


@pytest.mark.asyncio
async def test_create_inventory_item_as_manager(manager_client: AsyncClient, test_plant):
    response = await manager_client.post("/api/inventory", json=_item_payload(plant_id=test_plant.id))

    assert response.status_code == 201
    created = response.json()
    assert created["quantity"] == 25
    assert Decimal(str(created["unit_price"])) == Decimal("8.75")
    assert created["plant_id"] == test_plant.id
    assert created["vendor_id"] is None


@pytest.mark.asyncio
async def test_create_inventory_item_forbidden_for_technician(technician_client: AsyncClient):
    response = await technician_client.post("/api/inventory", json=_item_payload())
    assert response.status_code == 403


@pytest.mark.asyncio
@pytest.mark.parametrize("field,value", [("quantity", -1), ("unit_price", "-0.01")])
async def test_create_inventory_item_negative_values_rejected(admin_client: AsyncClient, field, value):
    response = await admin_client.post("/api/inventory", json=_item_payload(**{field: value}))

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == field


@pytest.mark.asyncio
async def test_create_inventory_item_unknown_vendor_returns_404(admin_client: AsyncClient):
    response = await admin_client.post("/api/inventory", json=_item_payload(vendor_id=9999))

    assert response.status_code == 404
    assert response.json()["detail"] == "Vendor not found"


@pytest.mark.asyncio
async def test_read_inventory_filters(technician_client: AsyncClient, inventory_factory, test_plant):
    in_plant = await inventory_factory(quantity=5, plant_id=test_plant.id)
    await inventory_factory(quantity=7, name="Loose item")

    response = await technician_client.get("/api/inventory")
    assert response.status_code == 200
    assert len(response.json()) == 2

    response = await technician_client.get("/api/inventory", params={"plant_id": test_plant.id})
    assert [i["id"] for i in response.json()] == [in_plant.id]


@pytest.mark.asyncio
async def test_update_inventory_quantity_directly(manager_client: AsyncClient, inventory_factory):
    item = await inventory_factory(quantity=3)

    response = await manager_client.put(f"/api/inventory/{item.id}", json={"quantity": 40})

    assert response.status_code == 200
    assert response.json()["quantity"] == 40


@pytest.mark.asyncio
async def test_delete_inventory_admin_only(manager_client: AsyncClient, admin_client: AsyncClient, inventory_factory):
    item = await inventory_factory()

    response = await manager_client.delete(f"/api/inventory/{item.id}")
    assert response.status_code == 403

    response = await admin_client.delete(f"/api/inventory/{item.id}")
    assert response.status_code == 204

    response = await admin_client.get(f"/api/inventory/{item.id}")
    assert response.status_code == 404
    assert response.json()["detail"] == "Inventory item not found"
