import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from fleetadmin.adapter.services.module_catalog import seed_module_catalog
from fleetadmin.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from fleetadmin.depends import get_unit_of_work

OWNER_EMAIL = "owner@acme.com"
OWNER_PASSWORD = "SecurePass123"


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def app(db_session):
    from config import ApplicationConfig
    from fleetadmin.api.app import create_app

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    return app


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def seeded_modules(db_session):
    await seed_module_catalog(SqlAlchemyUnitOfWork(db_session))


@pytest_asyncio.fixture
async def company(client):
    """Company 'Acme Logistics' with owner owner@acme.com"""
    response = await client.post(
        "/admin/companies",
        json={
            "name": "Acme Logistics",
            "email": "hello@acme.com",
            "owner_name": "Olive Owner",
            "owner_email": OWNER_EMAIL,
            "owner_password": OWNER_PASSWORD,
        },
    )
    assert response.status_code == 201
    return response.json()["data"]


@pytest_asyncio.fixture
async def admin_headers(client, company):
    response = await client.post(
        "/admin/auth/login", json={"email": OWNER_EMAIL, "password": OWNER_PASSWORD}
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['data']['token']}"}
