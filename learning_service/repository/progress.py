# -*- coding: utf-8 -*-
"""
Операции с леджером опыта и счётчиками завершения пользователя.
"""

from typing import Dict

from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import DuplicateKeyError

from learning_service.config.logger import configure_logger
from learning_service.domain.enums import Collection, CompletionCategory
from learning_service.domain.models import CompletionRecord, UserLevel
from learning_service.repository.base import (find_document, insert_document,
                                              storage_errors, update_document)
from learning_service.utils.exceptions import (ConflictError,
                                               StorageUnavailableError)

logger = configure_logger()

# ---------------------------------------------------------------------------
# Леджер опыта (user_levels)
# ---------------------------------------------------------------------------


async def get_user_level(db: AsyncDatabase, user_id: str) -> UserLevel:
    """
    Получить леджер пользователя.

    Raises:
        NotFoundError: Игра для пользователя не начата
    """
    return await find_document(
        db, Collection.USER_LEVELS, UserLevel, {"user_id": user_id}, resource_id=user_id
    )


async def create_user_level(
    db: AsyncDatabase, user_id: str, required_xp: int = 0
) -> UserLevel:
    """
    Создать леджер с нулевым опытом.

    Raises:
        ConflictError: Леджер для пользователя уже существует
    """
    with storage_errors("check user level"):
        existing = await db[Collection.USER_LEVELS.value].find_one({"user_id": user_id})
    if existing is not None:
        raise ConflictError(f"Игра для пользователя {user_id} уже начата")

    level = UserLevel(user_id=user_id, user_xp=0, required_xp=required_xp)
    try:
        await insert_document(db, Collection.USER_LEVELS, level.model_dump())
    except StorageUnavailableError as e:
        # Параллельный StartGame упирается в уникальный индекс по user_id
        if isinstance(e.__cause__, DuplicateKeyError):
            raise ConflictError(f"Игра для пользователя {user_id} уже начата") from e
        raise
    logger.info(f"Создан леджер опыта для пользователя {user_id}")
    return level


async def set_user_xp(db: AsyncDatabase, user_id: str, user_xp: int) -> None:
    """Записать итоговый опыт пользователя."""
    await update_document(
        db,
        Collection.USER_LEVELS,
        UserLevel,
        {"user_id": user_id},
        {"$set": {"user_xp": user_xp}},
        resource_id=user_id,
    )


# ---------------------------------------------------------------------------
# Счётчики завершения (Complateds)
# ---------------------------------------------------------------------------


async def get_completion_record(db: AsyncDatabase, user_id: str) -> CompletionRecord:
    """
    Получить счётчики завершения пользователя.

    Raises:
        NotFoundError: Запись ещё не создана
    """
    return await find_document(
        db,
        Collection.COMPLETEDS,
        CompletionRecord,
        {"user_id": user_id},
        resource_id=user_id,
    )


async def ensure_completion_record(db: AsyncDatabase, user_id: str) -> None:
    """Создать нулевую запись, если её ещё нет. Существующая не перезаписывается."""
    zero = CompletionRecord(user_id=user_id).model_dump(exclude={"user_id"})
    await update_document(
        db,
        Collection.COMPLETEDS,
        CompletionRecord,
        {"user_id": user_id},
        {"$setOnInsert": zero},
        upsert=True,
    )


async def increment_completions(
    db: AsyncDatabase, user_id: str, increments: Dict[CompletionCategory, int]
) -> None:
    """
    Атомарно увеличить счётчики одним оператором $inc.

    Args:
        db: База данных
        user_id: ID пользователя
        increments: Положительные приращения по категориям
    """
    await update_document(
        db,
        Collection.COMPLETEDS,
        CompletionRecord,
        {"user_id": user_id},
        {"$inc": {category.value: value for category, value in increments.items()}},
        resource_id=user_id,
    )
