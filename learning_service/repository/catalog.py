# -*- coding: utf-8 -*-
"""
learning_service/repository/catalog.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Repository for the read-only learning catalog.

Topics (with their nested quizzes), resources, challenges and
recommendations. Every operation is a pure read: listings return an empty
list for an empty collection, lookups by id raise ``NotFoundError``.
"""

from __future__ import annotations

from typing import List

from pymongo.asynchronous.database import AsyncDatabase

from learning_service.config.logger import configure_logger
from learning_service.domain.enums import Collection
from learning_service.domain.models import (Challenge, Quiz, Recommendation,
                                            Resource, Topic)
from learning_service.repository.base import (count_documents, find_document,
                                              list_documents)
from learning_service.utils.exceptions import NotFoundError

logger = configure_logger()

# ---------------------------------------------------------------------------
# Topic / Quiz
# ---------------------------------------------------------------------------


async def list_topics(db: AsyncDatabase) -> List[Topic]:
    """Retrieve all topics."""
    return await list_documents(db, Collection.TOPICS, Topic)


async def get_topic(db: AsyncDatabase, topic_id: str) -> Topic:
    """Retrieve a topic by ID."""
    return await find_document(
        db, Collection.TOPICS, Topic, {"id": topic_id}, resource_id=topic_id
    )


async def get_quiz(db: AsyncDatabase, quiz_id: str) -> Quiz:
    """Retrieve a quiz by ID from the topic that contains it."""
    topic = await find_document(
        db, Collection.TOPICS, Topic, {"quiz.id": quiz_id}, resource_id=quiz_id
    )
    for quiz in topic.quiz:
        if quiz.id == quiz_id:
            return quiz

    # Фильтр совпал, но в схеме темы квиза нет: документ повреждён
    logger.error(f"Quiz {quiz_id} not found in topic {topic.id}")
    raise NotFoundError(resource_type="Quiz", resource_id=quiz_id)


def count_quizzes(topics: List[Topic]) -> int:
    """Total number of quizzes across the given topics."""
    return sum(len(topic.quiz) for topic in topics)


# ---------------------------------------------------------------------------
# Resources / challenges / recommendations
# ---------------------------------------------------------------------------


async def list_resources(db: AsyncDatabase) -> List[Resource]:
    return await list_documents(db, Collection.RESOURCES, Resource)


async def count_resources(db: AsyncDatabase) -> int:
    return await count_documents(db, Collection.RESOURCES)


async def list_challenges(db: AsyncDatabase) -> List[Challenge]:
    return await list_documents(db, Collection.CHALLENGES, Challenge)


async def list_recommendations(db: AsyncDatabase) -> List[Recommendation]:
    return await list_documents(db, Collection.RECOMMENDATIONS, Recommendation)
