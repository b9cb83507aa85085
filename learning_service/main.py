# -*- coding: utf-8 -*-
"""
Точка входа FastAPI-приложения Learning Service.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from learning_service.api.v1.health import router as health_router
from learning_service.api.v1.learning import router as learning_router
from learning_service.api.v1.progress import router as progress_router
from learning_service.clients.database_client import DatabaseClient
from learning_service.config.logger import configure_logger, get_system_logger
from learning_service.config.settings import settings
from learning_service.config.uvicorn_config import setup_uvicorn_logging

logger = configure_logger()
system_logger = get_system_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_uvicorn_logging()
    system_logger.info("🔧 Инициализация сервисов...")
    system_logger.info(f"Конфигурация: {settings.get_config_source()}")

    await app.state.db_client.connect()
    system_logger.info("🎉 Все сервисы готовы к работе!")
    try:
        yield
    finally:
        logger.info("🛑 Завершение работы Learning Service")
        await app.state.db_client.close()


app = FastAPI(
    title="Learning Service API",
    description="Каталог обучения, опыт и прогресс пользователей",
    version="0.1.0",
    docs_url="/api/v1/docs",
    redoc_url="/api/v1/redoc",
    openapi_url="/api/v1/openapi.json",
    lifespan=lifespan,
)
app.state.db_client = DatabaseClient()


# Middleware для логирования всех запросов
@app.middleware("http")
async def log_all_requests(request, call_next):
    if request.url.path.startswith("/api/"):
        logger.info(f"🌐 API запрос: {request.method} {request.url.path}")

    try:
        response = await call_next(request)
    except Exception:
        if request.url.path.startswith("/api/"):
            logger.exception(
                f"💥 Критическая ошибка API: {request.method} {request.url.path}"
            )
        raise

    if request.url.path.startswith("/api/"):
        if response.status_code >= 400:
            logger.warning(
                f"❌ API ошибка: {request.method} {request.url.path} → {response.status_code}"
            )
        else:
            logger.info(
                f"✅ API ответ: {request.method} {request.url.path} → {response.status_code}"
            )
    return response


app.include_router(health_router, prefix="/api/v1")
app.include_router(learning_router, prefix="/api/v1")
app.include_router(progress_router, prefix="/api/v1/progress", tags=["📊 Прогресс"])


@app.get("/api/v1")
async def api_root():
    """Корневой эндпоинт API."""
    return {"message": "Learning Service API работает", "version": app.version}


def run() -> None:
    """Запуск сервера uvicorn с настройками приложения."""
    uvicorn.run(
        "learning_service.main:app",
        host=settings.app_host,
        port=settings.app_port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
