"""Сервис для работы с продуктами."""

import logging
import uuid
from decimal import Decimal
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from favorites_service.exceptions import classify_storage_error
from favorites_service.models import ProductModel
from favorites_service.schema import quantize_price

logger = logging.getLogger(__name__)


class ProductService:
    """Сервис для работы с продуктами"""

    @staticmethod
    async def create_product(session: AsyncSession, name: str, price: Decimal) -> ProductModel:
        """Добавляет продукт и возвращает вставленную запись."""
        product = ProductModel(id=uuid.uuid4(), name=name, price=quantize_price(price))
        session.add(product)
        try:
            await session.commit()
        except (SQLAlchemyError, OSError) as e:
            await session.rollback()
            logger.error("Ошибка при создании продукта: %s", str(e))
            raise classify_storage_error(e) from e
        return product

    @staticmethod
    async def fetch_products(session: AsyncSession) -> Sequence[ProductModel]:
        try:
            result = await session.execute(select(ProductModel))
        except (SQLAlchemyError, OSError) as e:
            logger.error("Ошибка при получении продуктов: %s", str(e))
            raise classify_storage_error(e) from e
        return result.scalars().all()


product_service = ProductService()
