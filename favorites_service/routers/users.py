"""Роуты для работы с пользователями."""

from typing import Annotated, List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from favorites_service.app.services import user_service
from favorites_service.database import get_session
from favorites_service.schema import UserCreate, UserOut

router = APIRouter(prefix="/api/users", tags=["users"])

SessionDep = Annotated[AsyncSession, Depends(get_session)]


@router.get('', response_model=List[UserOut])
async def get_users(session: SessionDep):
    """Список пользователей без хешей паролей."""
    return await user_service.fetch_users(session)


@router.post('', response_model=UserOut, status_code=status.HTTP_201_CREATED)
async def add_user(user_data: UserCreate, session: SessionDep):
    """Регистрация пользователя. Хеш пароля в ответ не попадает."""
    return await user_service.create_user(session, user_data.username, user_data.password)
