# -*- coding: utf-8 -*-
"""
Клиент для работы с базой данных MongoDB.

Подключение создаётся явно (в lifespan приложения) и передаётся в
репозитории и сервисы; глобального соединения на уровне модуля нет.
"""
from typing import Optional

from fastapi import Request
from pymongo import ASCENDING, AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from learning_service.config.logger import configure_logger
from learning_service.config.settings import settings
from learning_service.domain.enums import Collection
from learning_service.utils.exceptions import StorageUnavailableError

logger = configure_logger()


class DatabaseClient:
    """Жизненный цикл подключения: connect, ping, выбор базы, close."""

    def __init__(
        self,
        uri: Optional[str] = None,
        db_name: Optional[str] = None,
        timeout_ms: Optional[int] = None,
    ) -> None:
        self.uri = uri or settings.mongo_uri
        self.db_name = db_name or settings.mongo_db
        self.timeout_ms = timeout_ms or settings.mongo_timeout_ms
        self.client: Optional[AsyncMongoClient] = None
        self.database: Optional[AsyncDatabase] = None

    async def connect(self) -> AsyncDatabase:
        """
        Открывает подключение, проверяет его и выбирает базу данных.

        Raises:
            StorageUnavailableError: Сервер недоступен
        """
        self.client = AsyncMongoClient(
            self.uri, serverSelectionTimeoutMS=self.timeout_ms
        )
        self.database = self.client[self.db_name]
        await self.ping()
        await self._init_indexes()
        logger.info(f"✅ MongoDB подключен, база '{self.db_name}'")
        return self.database

    async def _init_indexes(self) -> None:
        db = self.database
        try:
            await db[Collection.TOPICS.value].create_index([("id", ASCENDING)])
            await db[Collection.TOPICS.value].create_index([("quiz.id", ASCENDING)])
            # Один леджер и одна запись счётчиков на пользователя
            await db[Collection.USER_LEVELS.value].create_index(
                [("user_id", ASCENDING)], unique=True
            )
            await db[Collection.COMPLETEDS.value].create_index(
                [("user_id", ASCENDING)], unique=True
            )
        except PyMongoError as e:
            logger.error(f"❌ Не удалось создать индексы: {e}")
            raise StorageUnavailableError(str(e)) from e

    async def ping(self) -> bool:
        if self.database is None:
            raise StorageUnavailableError("Подключение к MongoDB не открыто")
        try:
            await self.database.command("ping")
        except PyMongoError as e:
            logger.error(f"❌ MongoDB недоступен: {e}")
            raise StorageUnavailableError(str(e)) from e
        return True

    async def close(self) -> None:
        if self.client is not None:
            await self.client.close()
            logger.info("MongoDB соединение закрыто")
        self.client = None
        self.database = None


async def get_db(request: Request) -> AsyncDatabase:
    """
    Предоставляет базу данных для внедрения зависимостей в FastAPI.

    Returns:
        AsyncDatabase: База, выбранная при старте приложения
    """
    return request.app.state.db_client.database
