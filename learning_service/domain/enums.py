# -*- coding: utf-8 -*-
"""
learning_service/domain/enums.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Определение классов перечислений для домена Learning Service.

Этот модуль содержит имена коллекций хранилища, категории завершения
и уровни отзыва по результатам квиза.
"""

import enum


class Collection(str, enum.Enum):
    """Коллекции документного хранилища."""

    TOPICS = "topics"
    RESOURCES = "resources"
    CHALLENGES = "challenges"
    RECOMMENDATIONS = "recommendations"
    FEEDBACKS = "feedbacks"
    USER_LEVELS = "user_levels"
    # Историческое имя коллекции, на него уже завязаны существующие данные
    COMPLETEDS = "Complateds"


class CompletionCategory(str, enum.Enum):
    """Категории счётчиков завершения."""

    TOPICS = "topics_completed"
    QUIZZES = "quizzes_completed"
    RESOURCES = "resources_completed"


class FeedbackTier(str, enum.Enum):
    """Уровни отзыва по результату квиза."""

    EXCELLENT = "Excellent! You have a good understanding of the topic."
    KEEP_PRACTICING = "Keep practicing! You can improve."
