"""Модуль для настройки асинхронного подключения к базе данных и управления сессиями."""

import logging
from collections.abc import AsyncGenerator
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from favorites_service.config import get_db_url, get_engine_options
from favorites_service.models import Base

logger = logging.getLogger("favorites_service")

# Пул соединений живет столько же, сколько процесс
engine = create_async_engine(get_db_url(), **get_engine_options())

new_session = async_sessionmaker(engine, expire_on_commit=False)


async def setup_database(db_engine: Optional[AsyncEngine] = None) -> None:
    """
    Создает таблицы users, products и favorites, если их еще нет.

    Повторный вызов ничего не меняет.
    """
    db_engine = db_engine or engine
    try:
        async with db_engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Таблицы успешно созданы")
    except Exception as e:
        logger.error("Ошибка при создании таблиц: %s", str(e))
        raise


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Предоставляет сессию из пула; соединение возвращается в пул при любом исходе."""
    async with new_session() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
