"""Модуль для работы с пользователями и их учетными данными."""

import logging
import uuid
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from favorites_service.exceptions import classify_storage_error
from favorites_service.models import UserModel
from favorites_service.utils import get_password_hash

logger = logging.getLogger(__name__)


class UserService:
    """Сервис для работы с пользователями"""

    @staticmethod
    async def create_user(session: AsyncSession, username: str, password: str) -> UserModel:
        """
        Создание нового пользователя

        Args:
            session: Сессия базы данных
            username: Имя пользователя
            password: Пароль (нехешированный)

        Returns:
            UserModel: Созданный пользователь вместе с хешем пароля.
            Отдавать хеш клиенту нельзя.

        Raises:
            DuplicateRecordError: Имя пользователя уже занято
            StorageError: Прочие ошибки хранилища
        """
        hashed_password = await get_password_hash(password)
        user = UserModel(id=uuid.uuid4(), username=username, password_hash=hashed_password)
        session.add(user)
        try:
            await session.commit()
        except (SQLAlchemyError, OSError) as e:
            await session.rollback()
            logger.error("Ошибка при создании пользователя: %s", str(e))
            raise classify_storage_error(e, conflict_message="Username already exists") from e
        logger.info("Создан пользователь %s", user.id)
        return user

    @staticmethod
    async def fetch_users(session: AsyncSession) -> Sequence[UserModel]:
        """Все пользователи в порядке хранения."""
        try:
            result = await session.execute(select(UserModel))
        except (SQLAlchemyError, OSError) as e:
            logger.error("Ошибка при получении пользователей: %s", str(e))
            raise classify_storage_error(e) from e
        return result.scalars().all()


user_service = UserService()
