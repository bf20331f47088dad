"""Сервис избранного: связь пользователя с продуктом."""

import logging
import uuid
from typing import Sequence

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from favorites_service.exceptions import classify_storage_error
from favorites_service.models import FavoriteModel

logger = logging.getLogger(__name__)


class FavoriteService:
    """Сервис для работы с избранным"""

    @staticmethod
    async def create_favorite(
        session: AsyncSession,
        user_id: uuid.UUID,
        product_id: uuid.UUID,
    ) -> FavoriteModel:
        """
        Добавляет продукт в избранное пользователя.

        Существование пользователя и продукта не проверяется заранее,
        это делают внешние ключи.

        Raises:
            DuplicateRecordError: Пара (user_id, product_id) уже есть
            ReferenceNotFoundError: Нет такого пользователя или продукта
        """
        favorite = FavoriteModel(id=uuid.uuid4(), user_id=user_id, product_id=product_id)
        session.add(favorite)
        try:
            await session.commit()
        except (SQLAlchemyError, OSError) as e:
            await session.rollback()
            logger.error("Ошибка при создании избранного: %s", str(e))
            raise classify_storage_error(
                e,
                conflict_message="Product already in favorites",
                reference_message="User or product not found",
            ) from e
        return favorite

    @staticmethod
    async def fetch_favorites(session: AsyncSession, user_id: uuid.UUID) -> Sequence[FavoriteModel]:
        try:
            result = await session.execute(
                select(FavoriteModel).where(FavoriteModel.user_id == user_id)
            )
        except (SQLAlchemyError, OSError) as e:
            logger.error("Ошибка при получении избранного: %s", str(e))
            raise classify_storage_error(e) from e
        return result.scalars().all()

    @staticmethod
    async def destroy_favorite(
        session: AsyncSession,
        user_id: uuid.UUID,
        favorite_id: uuid.UUID,
    ) -> None:
        """
        Удаляет запись избранного, только если она принадлежит пользователю.

        Если подходящей записи нет, ничего не происходит.
        """
        try:
            result = await session.execute(
                delete(FavoriteModel).where(
                    FavoriteModel.id == favorite_id,
                    FavoriteModel.user_id == user_id,
                )
            )
            await session.commit()
        except (SQLAlchemyError, OSError) as e:
            await session.rollback()
            logger.error("Ошибка при удалении избранного: %s", str(e))
            raise classify_storage_error(e) from e
        if not result.rowcount:
            logger.info("Избранное %s пользователя %s не найдено, удалять нечего", favorite_id, user_id)


favorite_service = FavoriteService()
