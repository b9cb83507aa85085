# -*- coding: utf-8 -*-
"""
Проверка состояния сервиса и доступности хранилища.
"""

from fastapi import APIRouter, Depends
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError
from pydantic import BaseModel

from learning_service.clients.database_client import get_db
from learning_service.config.logger import configure_logger
from learning_service.utils.exceptions import StorageUnavailableError

router = APIRouter(tags=["🩺 Состояние"])
logger = configure_logger()


class HealthResponse(BaseModel):
    status: str
    database: str


@router.get("/health", response_model=HealthResponse)
async def health_check(db: AsyncDatabase = Depends(get_db)) -> HealthResponse:
    """Проверить доступность MongoDB."""
    try:
        await db.command("ping")
    except PyMongoError as e:
        logger.error(f"❌ Health check: MongoDB недоступен: {e}")
        raise StorageUnavailableError(str(e)) from e
    return HealthResponse(status="ok", database=db.name)
