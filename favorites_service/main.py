import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from favorites_service.config import settings
from favorites_service.database import engine, setup_database
from favorites_service.exceptions import StorageError
from favorites_service.routers import favorite_router, product_router, user_router

# Настройка логирования
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger("favorites_service")


@asynccontextmanager
async def lifespan(app: FastAPI):
    await setup_database()
    logger.info("Server is running on http://localhost:%s", settings.PORT)
    yield
    logger.info("Завершение работы сервиса избранного")
    await engine.dispose()
    logger.info("Соединения с БД закрыты")


app = FastAPI(lifespan=lifespan)


@app.exception_handler(StorageError)
async def storage_exception_handler(request: Request, exc: StorageError):
    logger.error("%s: %s %s -> %s", type(exc).__name__, request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error("Необработанная ошибка: %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


app.include_router(user_router)
app.include_router(product_router)
app.include_router(favorite_router)


def run():
    import uvicorn
    uvicorn.run("favorites_service.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
