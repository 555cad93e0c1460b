# tests/conftest.py

import os
from typing import AsyncGenerator, Callable, Awaitable
from decimal import Decimal
from contextlib import asynccontextmanager

# pmms 를 임포트하기 전에 테스트용 환경 변수를 지정합니다. (Settings 는 임포트 시점에 로드됨)
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-pmms")
os.environ.setdefault("APP_ENV", "testing")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402

from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import SQLModel  # noqa: E402
from sqlmodel.ext.asyncio.session import AsyncSession  # noqa: E402

from pmms.main import app as main_app  # noqa: E402
from pmms.core.database import get_session  # noqa: E402
from pmms.domains.usr import crud as usr_crud  # noqa: E402
from pmms.domains.usr import models as usr_models  # noqa: E402
from pmms.domains.usr import schemas as usr_schemas  # noqa: E402
from pmms.domains.plt import models as plt_models  # noqa: E402
from pmms.domains.fms import models as fms_models  # noqa: E402
from pmms.domains.inv import models as inv_models  # noqa: E402
from pmms.domains.wo import models as wo_models  # noqa: E402


# --- 테스트용 데이터베이스 설정 ---
# 테스트마다 새로운 인메모리 SQLite DB 를 만들고, StaticPool 로 하나의 연결을 공유합니다.
TEST_DATABASE_URL = "sqlite+aiosqlite://"

ADMIN_PASSWORD = "adminpass123"
MANAGER_PASSWORD = "managerpass123"
TECHNICIAN_PASSWORD = "techpass123"


# --- 데이터베이스 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def test_engine():
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest.fixture(scope="function")
def session_factory(test_engine):
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest_asyncio.fixture(scope="function")
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """
    테스트 데이터 준비(setup)용 세션입니다.
    API 요청은 요청마다 별도의 세션을 사용하므로, 요청 이후의 상태 확인은 API 조회로 합니다.
    """
    async with session_factory() as session:
        yield session


@pytest.fixture(scope="function")
def override_get_session(session_factory):
    """API 요청이 사용하는 get_session 의존성을 테스트 DB 세션으로 교체합니다."""
    async def _get_test_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    original_overrides = main_app.dependency_overrides.copy()
    main_app.dependency_overrides[get_session] = _get_test_session
    yield
    main_app.dependency_overrides.clear()
    main_app.dependency_overrides.update(original_overrides)


# --- 역할별 사용자 픽스처 ---
# 역할: users 테이블에 테스트 사용자를 생성하고 User 모델 객체를 반환합니다.
# 목적: 외래 키 값(assigned_to, user_id 등)으로 사용하거나 로그인 클라이언트를 만들 때 사용합니다.
@pytest.fixture(scope="function")
def user_factory(db_session: AsyncSession) -> Callable[..., Awaitable[usr_models.User]]:
    """역할과 속성을 지정하여 테스트 사용자를 생성하는 팩토리 함수를 반환합니다."""
    async def _create_user(
        username: str,
        password: str,
        role: usr_models.UserRole,
        **kwargs,
    ) -> usr_models.User:
        user_in = usr_schemas.UserCreate(
            username=username,
            email=f"{username}@example.com",
            password=password,
            role=role,
            **kwargs,
        )
        return await usr_crud.user.create(db_session, obj_in=user_in)
    return _create_user


@pytest_asyncio.fixture(scope="function")
async def test_admin_user(user_factory: Callable) -> usr_models.User:
    return await user_factory("sysadm", ADMIN_PASSWORD, role=usr_models.UserRole.ADMIN)


@pytest_asyncio.fixture(scope="function")
async def test_manager_user(user_factory: Callable) -> usr_models.User:
    return await user_factory("plantmgr", MANAGER_PASSWORD, role=usr_models.UserRole.MANAGER)


@pytest_asyncio.fixture(scope="function")
async def test_technician_user(user_factory: Callable) -> usr_models.User:
    return await user_factory("tech01", TECHNICIAN_PASSWORD, role=usr_models.UserRole.TECHNICIAN)


# --- 비동기 테스트 클라이언트 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def client(override_get_session) -> AsyncGenerator[AsyncClient, None]:
    """인증되지 않은 사용자를 위한 AsyncClient 입니다."""
    async with AsyncClient(transport=ASGITransport(app=main_app), base_url="http://test") as async_client:
        yield async_client


# --- 역할별 인증 클라이언트 픽스처 ---
# 역할: 실제 /api/auth/login 을 호출해 받은 access_token 을 Authorization 헤더에 넣은 AsyncClient 를 반환합니다.
@pytest.fixture(scope="function")
def authorized_client_factory(override_get_session) -> Callable[[usr_models.User, str], AsyncGenerator[AsyncClient, None]]:
    """특정 사용자로 로그인된 AsyncClient 를 만드는 비동기 컨텍스트 매니저를 반환합니다."""
    @asynccontextmanager
    async def _create_client_context(user: usr_models.User, password: str) -> AsyncGenerator[AsyncClient, None]:
        transport = ASGITransport(app=main_app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            res = await client.post("/api/auth/login", json={"email": user.email, "password": password})
            if res.status_code != 200:
                pytest.fail(f"Login failed for {user.username}: {res.text}")

            token = res.json()["access_token"]
            client.headers["Authorization"] = f"Bearer {token}"
            # 쿠키 대신 헤더로만 인증되도록 쿠키는 비웁니다.
            client.cookies.clear()
            yield client

    return _create_client_context


@pytest_asyncio.fixture(scope="function")
async def admin_client(authorized_client_factory, test_admin_user) -> AsyncGenerator[AsyncClient, None]:
    """관리자로 인증된 클라이언트를 반환합니다."""
    async with authorized_client_factory(test_admin_user, ADMIN_PASSWORD) as client:
        yield client


@pytest_asyncio.fixture(scope="function")
async def manager_client(authorized_client_factory, test_manager_user) -> AsyncGenerator[AsyncClient, None]:
    """매니저로 인증된 클라이언트를 반환합니다."""
    async with authorized_client_factory(test_manager_user, MANAGER_PASSWORD) as client:
        yield client


@pytest_asyncio.fixture(scope="function")
async def technician_client(authorized_client_factory, test_technician_user) -> AsyncGenerator[AsyncClient, None]:
    """기술자로 인증된 클라이언트를 반환합니다."""
    async with authorized_client_factory(test_technician_user, TECHNICIAN_PASSWORD) as client:
        yield client


# --- 도메인별 공통 픽스처 ---
@pytest_asyncio.fixture(name="test_plant")
async def test_plant_fixture(db_session: AsyncSession) -> plt_models.Plant:
    """테스트용 공장을 데이터베이스에 생성하고 반환합니다."""
    plant = plt_models.Plant(name="제1공장", location="Ulsan", contact_email="plant1@example.com")
    db_session.add(plant)
    await db_session.commit()
    await db_session.refresh(plant)
    return plant


@pytest_asyncio.fixture(name="test_machine")
async def test_machine_fixture(db_session: AsyncSession, test_plant: plt_models.Plant) -> fms_models.Machine:
    """테스트용 설비를 생성합니다."""
    machine = fms_models.Machine(
        plant_id=test_plant.id,
        name="CNC Lathe",
        model="LX-200",
        manufacturer="Doosan",
        serial_number="SN-0001",
    )
    db_session.add(machine)
    await db_session.commit()
    await db_session.refresh(machine)
    return machine


@pytest.fixture(name="inventory_factory")
def inventory_factory_fixture(db_session: AsyncSession) -> Callable[..., Awaitable[inv_models.Inventory]]:
    async def _create_inventory(quantity: int = 10, **kwargs) -> inv_models.Inventory:
        data = {"name": "Bearing 6204", "description": "Deep groove ball bearing", "unit_price": Decimal("12.50")}
        data.update(kwargs)
        item = inv_models.Inventory(quantity=quantity, **data)
        db_session.add(item)
        await db_session.commit()
        await db_session.refresh(item)
        return item
    return _create_inventory


@pytest_asyncio.fixture(name="test_work_order")
async def test_work_order_fixture(
    db_session: AsyncSession, test_plant: plt_models.Plant, test_machine: fms_models.Machine
) -> wo_models.WorkOrder:
    work_order = wo_models.WorkOrder(
        title="Replace spindle bearing",
        description="Spindle makes noise above 2000 rpm",
        plant_id=test_plant.id,
        machine_id=test_machine.id,
    )
    db_session.add(work_order)
    await db_session.commit()
    await db_session.refresh(work_order)
    return work_order
