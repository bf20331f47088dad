"""Утилиты для хеширования паролей."""

from passlib.context import CryptContext
from starlette.concurrency import run_in_threadpool

from favorites_service.config import settings

# Настройка для хэширования паролей
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


async def get_password_hash(password: str) -> str:
    """Хеширует пароль в пуле потоков, не блокируя цикл событий"""
    return await run_in_threadpool(pwd_context.hash, password)


async def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Проверяет соответствие пароля хешу"""
    return await run_in_threadpool(pwd_context.verify, plain_password, hashed_password)
