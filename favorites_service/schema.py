"""
Схемы Pydantic для сервиса избранного.
"""
import uuid
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

PRICE_QUANT = Decimal("0.01")


def quantize_price(price: Decimal) -> Decimal:
    """Цена всегда с двумя знаками после запятой, как NUMERIC(10, 2)."""
    return price.quantize(PRICE_QUANT)


class UserCreate(BaseModel):
    """Схема регистрации пользователя."""
    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1)


class UserOut(BaseModel):
    """Пользователь в ответе API. Хеш пароля наружу не отдается."""
    id: uuid.UUID
    username: str

    model_config = ConfigDict(from_attributes=True)


class ProductCreate(BaseModel):
    """Схема добавления продукта."""
    name: str = Field(min_length=1, max_length=255)
    price: Decimal = Field(max_digits=10, decimal_places=2)

    @field_validator("price")
    def price_to_cents(cls, v):
        return quantize_price(v)


class ProductOut(BaseModel):
    """Схема продукта."""
    id: uuid.UUID
    name: str
    price: Decimal

    model_config = ConfigDict(from_attributes=True)

    @field_validator("price")
    def price_to_cents(cls, v):
        return quantize_price(v)


class FavoriteIn(BaseModel):
    product_id: uuid.UUID


class FavoriteOut(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    product_id: uuid.UUID

    model_config = ConfigDict(from_attributes=True)
