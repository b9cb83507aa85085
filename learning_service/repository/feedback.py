# -*- coding: utf-8 -*-
"""
Операции с отзывами пользователей о темах.
"""

from pymongo.asynchronous.database import AsyncDatabase

from learning_service.config.logger import configure_logger
from learning_service.domain.enums import Collection
from learning_service.domain.models import Feedback
from learning_service.repository.base import insert_document

logger = configure_logger()


async def create_feedback(db: AsyncDatabase, feedback: Feedback) -> Feedback:
    """Сохранить отзыв пользователя."""
    await insert_document(db, Collection.FEEDBACKS, feedback.model_dump())
    logger.debug(
        f"Отзыв пользователя {feedback.user_id} по теме {feedback.topic_id} сохранён"
    )
    return feedback
