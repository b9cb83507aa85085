# -*- coding: utf-8 -*-
"""
Модуль обновления счётчиков завершённых тем, квизов и ресурсов.
"""
from typing import Dict, Optional

from pymongo.asynchronous.database import AsyncDatabase

from learning_service.config.logger import configure_logger
from learning_service.domain.enums import CompletionCategory
from learning_service.domain.models import CompletionUpdate
from learning_service.repository.progress import (get_completion_record,
                                                  increment_completions)
from learning_service.utils.exceptions import ValidationError

logger = configure_logger()

NOTHING_TO_UPDATE = "Nothing to update"
UPDATED = "Success"


def build_increments(
    topics: Optional[int] = None,
    quizzes: Optional[int] = None,
    resources: Optional[int] = None,
) -> Dict[CompletionCategory, int]:
    """
    Собрать приращения по категориям.

    Нулевые и отсутствующие значения пропускаются, отрицательные запрещены:
    счётчики только растут.
    """
    requested = {
        CompletionCategory.TOPICS: topics,
        CompletionCategory.QUIZZES: quizzes,
        CompletionCategory.RESOURCES: resources,
    }
    increments: Dict[CompletionCategory, int] = {}
    for category, value in requested.items():
        if value is None:
            continue
        if value < 0:
            raise ValidationError(
                f"Приращение {category.value} не может быть отрицательным: {value}"
            )
        if value > 0:
            increments[category] = value
    return increments


class CompletionAggregator:
    """Увеличивает счётчики завершения пользователя."""

    def __init__(self, db: AsyncDatabase):
        self.db = db

    async def increment(
        self,
        user_id: str,
        topics: Optional[int] = None,
        quizzes: Optional[int] = None,
        resources: Optional[int] = None,
    ) -> CompletionUpdate:
        """
        Увеличить счётчики завершения.

        Args:
            user_id: ID пользователя
            topics: Приращение завершённых тем
            quizzes: Приращение завершённых квизов
            resources: Приращение завершённых ресурсов

        Returns:
            Результат обновления; без положительных приращений хранилище
            не изменяется

        Raises:
            NotFoundError: Запись счётчиков пользователя не найдена
            ValidationError: Отрицательное приращение
        """
        increments = build_increments(topics, quizzes, resources)

        await get_completion_record(self.db, user_id)

        if not increments:
            logger.debug(f"Счётчики пользователя {user_id}: нечего обновлять")
            return CompletionUpdate(updated=False, message=NOTHING_TO_UPDATE)

        await increment_completions(self.db, user_id, increments)
        logger.debug(
            f"Счётчики пользователя {user_id} увеличены: "
            + ", ".join(f"{c.value}+{v}" for c, v in increments.items())
        )
        return CompletionUpdate(updated=True, message=UPDATED)
