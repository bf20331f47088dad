"""Роуты для работы с продуктами."""

from typing import Annotated, List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from favorites_service.app.services import product_service
from favorites_service.database import get_session
from favorites_service.schema import ProductCreate, ProductOut

router = APIRouter(prefix="/api/products", tags=["products"])

SessionDep = Annotated[AsyncSession, Depends(get_session)]


@router.get('', response_model=List[ProductOut])
async def get_products(session: SessionDep):
    return await product_service.fetch_products(session)


@router.post('', response_model=ProductOut, status_code=status.HTTP_201_CREATED)
async def add_product(product_data: ProductCreate, session: SessionDep):
    return await product_service.create_product(session, product_data.name, product_data.price)
