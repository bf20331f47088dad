"""Типизированные ошибки слоя доступа к данным."""

from typing import Optional

from fastapi import status
from sqlalchemy.exc import DBAPIError, IntegrityError, InterfaceError, OperationalError

# SQLSTATE PostgreSQL
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"


class StorageError(Exception):
    """Ошибка хранилища без уточненного типа."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    public_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.public_message
        super().__init__(self.message)


class DuplicateRecordError(StorageError):
    """Нарушено ограничение уникальности."""

    status_code = status.HTTP_409_CONFLICT
    public_message = "Record already exists"


class ReferenceNotFoundError(StorageError):
    """Внешний ключ ссылается на несуществующую запись."""

    status_code = status.HTTP_404_NOT_FOUND
    public_message = "Referenced record not found"


class StorageUnavailableError(StorageError):
    """База данных недоступна."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    public_message = "Service unavailable"


def _sqlstate(exc: DBAPIError):
    orig = exc.orig
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


def classify_storage_error(
    exc: Exception,
    conflict_message: Optional[str] = None,
    reference_message: Optional[str] = None,
) -> StorageError:
    """Преобразует исключение драйвера или SQLAlchemy в StorageError нужного типа.

    Для IntegrityError сначала смотрим SQLSTATE (PostgreSQL), затем текст
    ошибки (SQLite не отдает код).
    """
    if isinstance(exc, IntegrityError):
        code = _sqlstate(exc)
        text = str(exc.orig).upper()
        if code == UNIQUE_VIOLATION or "UNIQUE" in text:
            return DuplicateRecordError(conflict_message)
        if code == FOREIGN_KEY_VIOLATION or "FOREIGN KEY" in text:
            return ReferenceNotFoundError(reference_message)
        return StorageError()
    if isinstance(exc, (OperationalError, InterfaceError, OSError)):
        return StorageUnavailableError()
    if isinstance(exc, DBAPIError) and exc.connection_invalidated:
        return StorageUnavailableError()
    return StorageError()
