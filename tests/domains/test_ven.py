# tests/domains/test_ven.py

"""
'ven' 도메인 (공급업체 관리) 관련 API 엔드포인트에 대한 통합 테스트를 정의하는 모듈입니다.

- 공급업체 CRUD: `/vendors`, `/vendors/{id}`
- 조회는 모든 역할, 쓰기는 관리자만 허용
"""

import pytest
from httpx import AsyncClient


async def _create_vendor(client: AsyncClient, name: str = "SKF Korea") -> dict:
    response = await client.post(
        "/api/vendors", json={"name": name, "contact_email": "sales@example.com", "contact_phone": "02-123-4567"}
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_create_vendor_success_admin(admin_client: AsyncClient):
    vendor = await _create_vendor(admin_client)

    assert vendor["name"] == "SKF Korea"
    assert vendor["contact_email"] == "sales@example.com"


@pytest.mark.asyncio
async def test_create_vendor_forbidden_for_technician(technician_client: AsyncClient):
    response = await technician_client.post("/api/vendors", json={"name": "Nope"})
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_read_vendors_any_role(admin_client: AsyncClient, technician_client: AsyncClient):
    first = await _create_vendor(admin_client, "Vendor A")
    second = await _create_vendor(admin_client, "Vendor B")

    response = await technician_client.get("/api/vendors")
    assert response.status_code == 200
    assert [v["id"] for v in response.json()] == [first["id"], second["id"]]

    response = await technician_client.get(f"/api/vendors/{second['id']}")
    assert response.status_code == 200
    assert response.json()["name"] == "Vendor B"


@pytest.mark.asyncio
async def test_update_vendor(admin_client: AsyncClient):
    vendor = await _create_vendor(admin_client)

    response = await admin_client.put(f"/api/vendors/{vendor['id']}", json={"name": "SKF Korea Ltd."})

    assert response.status_code == 200
    assert response.json()["name"] == "SKF Korea Ltd."
    assert response.json()["contact_phone"] == "02-123-4567"


@pytest.mark.asyncio
async def test_update_vendor_not_found(admin_client: AsyncClient):
    response = await admin_client.put("/api/vendors/9999", json={"name": "Ghost"})

    assert response.status_code == 404
    assert response.json()["detail"] == "Vendor not found"


@pytest.mark.asyncio
async def test_delete_vendor_soft_deletes(admin_client: AsyncClient):
    vendor = await _create_vendor(admin_client)

    response = await admin_client.delete(f"/api/vendors/{vendor['id']}")
    assert response.status_code == 204

    response = await admin_client.get(f"/api/vendors/{vendor['id']}")
    assert response.status_code == 404
    response = await admin_client.get("/api/vendors")
    assert response.json() == []
