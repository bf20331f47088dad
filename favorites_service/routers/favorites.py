"""Роуты избранного пользователя."""

import uuid
from typing import Annotated, List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from favorites_service.app.services import favorite_service
from favorites_service.database import get_session
from favorites_service.schema import FavoriteIn, FavoriteOut

router = APIRouter(prefix="/api/users/{user_id}/favorites", tags=["favorites"])

SessionDep = Annotated[AsyncSession, Depends(get_session)]


@router.get('', response_model=List[FavoriteOut])
async def list_favorites(user_id: uuid.UUID, session: SessionDep):
    return await favorite_service.fetch_favorites(session, user_id)


@router.post('', response_model=FavoriteOut, status_code=status.HTTP_201_CREATED)
async def add_favorite(user_id: uuid.UUID, favorite: FavoriteIn, session: SessionDep):
    """Добавить продукт в избранное. 404 если нет пользователя или продукта, 409 если уже добавлен."""
    return await favorite_service.create_favorite(session, user_id, favorite.product_id)


@router.delete('/{favorite_id}', status_code=status.HTTP_204_NO_CONTENT)
async def remove_favorite(user_id: uuid.UUID, favorite_id: uuid.UUID, session: SessionDep):
    """Удалить из избранного. Отсутствующая запись тоже дает 204."""
    await favorite_service.destroy_favorite(session, user_id, favorite_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
