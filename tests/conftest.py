"""Конфигурационный файл pytest с общими фикстурами для тестов сервиса избранного."""

import os

# До импорта приложения: модульный engine не должен тянуть PostgreSQL
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from favorites_service.database import get_session, setup_database
from favorites_service.main import app


@pytest_asyncio.fixture
async def test_engine(tmp_path):
    """Тестовая БД SQLite в файле с включенными внешними ключами и созданной схемой."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'favorites.db'}")

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    await setup_database(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return async_sessionmaker(test_engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory):
    """HTTP-клиент к приложению; get_session переопределен на тестовую БД."""
    async def _override_get_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = _override_get_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.pop(get_session, None)
