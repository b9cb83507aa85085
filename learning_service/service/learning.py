# -*- coding: utf-8 -*-
"""
learning_service/service/learning.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Сервисный слой операций обучения.

Каждая операция завершения активности читает запись каталога, начисляет
опыт, обновляет счётчики и возвращает объединённый результат. Ошибки
хранилища не перехватываются и доходят до вызывающего кода.
"""

from typing import List

from pymongo.asynchronous.database import AsyncDatabase

from learning_service.config.logger import configure_logger
from learning_service.config.settings import settings
from learning_service.domain.models import (ActivityResult, Answer, Challenge,
                                            Feedback, GameStarted, ProgressReport,
                                            Quiz, QuizResult, Recommendation,
                                            Resource, Topic)
from learning_service.repository import catalog
from learning_service.repository.feedback import create_feedback
from learning_service.repository.progress import (create_user_level,
                                                  ensure_completion_record,
                                                  get_user_level)
from learning_service.service.progress import (CompletionAggregator,
                                               ProgressService,
                                               XpAccrualService)
from learning_service.service.quiz_grading import QuizService
from learning_service.utils.exceptions import ValidationError

logger = configure_logger()


class LearningService:
    """Операции каталога и активностей пользователя."""

    def __init__(self, db: AsyncDatabase):
        self.db = db
        self.xp = XpAccrualService(db)
        self.completions = CompletionAggregator(db)
        self.progress = ProgressService(db)
        self.quizzes = QuizService(db)

    # ------------------------------------------------------------------ каталог

    async def get_topics(self) -> List[Topic]:
        return await catalog.list_topics(self.db)

    async def get_topic(self, topic_id: str) -> Topic:
        return await catalog.get_topic(self.db, topic_id)

    async def get_quiz(self, quiz_id: str) -> Quiz:
        return await self.quizzes.get_quiz(quiz_id)

    async def get_resources(self) -> List[Resource]:
        return await catalog.list_resources(self.db)

    async def get_recommendations(self) -> List[Recommendation]:
        return await catalog.list_recommendations(self.db)

    async def get_challenges(self) -> List[Challenge]:
        return await catalog.list_challenges(self.db)

    # --------------------------------------------------------------- активности

    async def complete_topic(self, topic_id: str, user_id: str) -> ActivityResult:
        """
        Завершить тему.

        Raises:
            NotFoundError: Тема, леджер или счётчики пользователя не найдены
        """
        await catalog.get_topic(self.db, topic_id)
        xp_total = await self.xp.award(user_id, settings.xp_topic_completion)
        await self.completions.increment(user_id, topics=1)

        logger.info(f"✅ Пользователь {user_id} завершил тему {topic_id}")
        return ActivityResult(message="Topic completed successfully", xp_earned=xp_total)

    async def submit_quiz(
        self, quiz_id: str, user_id: str, answers: List[Answer]
    ) -> QuizResult:
        return await self.quizzes.submit(quiz_id, user_id, answers)

    async def complete_resource(self, user_id: str) -> ActivityResult:
        xp_total = await self.xp.award(user_id, settings.xp_resource_completion)
        await self.completions.increment(user_id, resources=1)

        logger.info(f"✅ Пользователь {user_id} завершил ресурс")
        return ActivityResult(
            message="Resource completed successfully", xp_earned=xp_total
        )

    async def submit_feedback(
        self, user_id: str, topic_id: str, rating: int, comment: str = ""
    ) -> ActivityResult:
        """
        Сохранить отзыв о теме и начислить за него опыт.

        Raises:
            ValidationError: Оценка вне диапазона 1..5
            NotFoundError: Леджер пользователя не найден
        """
        if not 1 <= rating <= 5:
            raise ValidationError(f"Оценка должна быть от 1 до 5, получено {rating}")

        # Отзыв без леджера не сохраняется
        await get_user_level(self.db, user_id)
        await create_feedback(
            self.db,
            Feedback(user_id=user_id, topic_id=topic_id, rating=rating, comment=comment),
        )
        xp_total = await self.xp.award(user_id, settings.xp_feedback)
        return ActivityResult(
            message="Feedback submitted successfully", xp_earned=xp_total
        )

    # ----------------------------------------------------------------- прогресс

    async def get_progress(self, user_id: str) -> ProgressReport:
        return await self.progress.get_progress(user_id)

    async def start_game(self, user_id: str) -> GameStarted:
        """
        Начать игру: леджер с нулевым опытом и нулевые счётчики.

        Raises:
            ConflictError: Игра для пользователя уже начата
        """
        # Сначала идемпотентный upsert счётчиков: повтор после сбоя его досоздаст
        await ensure_completion_record(self.db, user_id)
        await create_user_level(self.db, user_id, settings.default_required_xp)

        logger.info(f"🎮 Пользователь {user_id} начал игру")
        return GameStarted(message="Success")
