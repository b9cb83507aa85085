# -*- coding: utf-8 -*-
"""
Модуль для расчета общего прогресса пользователя по каталогу.
"""
from pymongo.asynchronous.database import AsyncDatabase

from learning_service.config.logger import configure_logger
from learning_service.domain.models import ProgressReport
from learning_service.repository.catalog import (count_quizzes,
                                                 count_resources, list_topics)
from learning_service.repository.progress import get_completion_record

logger = configure_logger()


def calculate_overall_progress(
    topics_completed: int,
    quizzes_completed: int,
    resources_completed: int,
    total_topics: int,
    total_quizzes: int,
    total_resources: int,
) -> float:
    """
    Процент завершения по всем категориям вместе.

    Returns:
        Процент от 0 до 100; для пустого каталога 0.0
    """
    completed = topics_completed + quizzes_completed + resources_completed
    total = total_topics + total_quizzes + total_resources
    if total <= 0:
        return 0.0
    return completed / total * 100


class ProgressService:
    """Отчёт о прогрессе пользователя с учётом актуальных размеров каталога."""

    def __init__(self, db: AsyncDatabase):
        self.db = db

    async def get_progress(self, user_id: str) -> ProgressReport:
        """
        Рассчитать прогресс пользователя.

        Args:
            user_id: ID пользователя

        Returns:
            Счётчики пользователя, размеры каталога и общий процент

        Raises:
            NotFoundError: Запись счётчиков пользователя не найдена
        """
        record = await get_completion_record(self.db, user_id)

        topics = await list_topics(self.db)
        total_topics = len(topics)
        total_quizzes = count_quizzes(topics)
        total_resources = await count_resources(self.db)

        overall_progress = calculate_overall_progress(
            record.topics_completed,
            record.quizzes_completed,
            record.resources_completed,
            total_topics,
            total_quizzes,
            total_resources,
        )

        logger.debug(
            f"📊 Прогресс пользователя {user_id}: "
            f"темы {record.topics_completed}/{total_topics}, "
            f"квизы {record.quizzes_completed}/{total_quizzes}, "
            f"ресурсы {record.resources_completed}/{total_resources}, "
            f"итого {overall_progress:.2f}%"
        )

        return ProgressReport(
            topics_completed=record.topics_completed,
            total_topics=total_topics,
            quizzes_completed=record.quizzes_completed,
            total_quizzes=total_quizzes,
            resources_completed=record.resources_completed,
            total_resources=total_resources,
            overall_progress=overall_progress,
        )
