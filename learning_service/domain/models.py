# -*- coding: utf-8 -*-
"""
learning_service/domain/models.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Схемы документов хранилища.

Каждая коллекция описана явной Pydantic-моделью. Документ, не совпадающий
со схемой, не превращается молча в нулевые значения: декодирование в
``repository.base.decode_document`` завершается ``ValidationError``.
Служебные поля MongoDB (``_id``) и неизвестные ключи игнорируются.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Document(BaseModel):
    """Базовая модель документа."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


# ---------------------------------------------------------------------------
# Каталог
# ---------------------------------------------------------------------------


class Question(Document):
    id: str
    text: str = ""
    options: List[str] = Field(default_factory=list)
    correct_option: str


class Quiz(Document):
    id: str
    title: str = ""
    questions: List[Question] = Field(default_factory=list)


class Resource(Document):
    id: str
    title: str = ""
    type: Optional[str] = None
    url: Optional[str] = None


class Topic(Document):
    id: str
    title: str = ""
    description: Optional[str] = None
    quiz: List[Quiz] = Field(default_factory=list)
    resources: List[Resource] = Field(default_factory=list)


class Challenge(Document):
    id: str
    title: str = ""
    description: Optional[str] = None
    difficulty: Optional[str] = None
    xp_reward: int = Field(default=0, ge=0)


class Recommendation(Document):
    id: str
    title: str = ""
    reason: Optional[str] = None
    topic_id: Optional[str] = None


# ---------------------------------------------------------------------------
# Пользовательские данные
# ---------------------------------------------------------------------------


class UserLevel(Document):
    """Леджер пользователя: текущий опыт и базовый порог."""

    user_id: str
    user_xp: int = Field(default=0, ge=0)
    required_xp: int = Field(default=0, ge=0)


class CompletionRecord(Document):
    """Счётчики завершённых тем, квизов и ресурсов."""

    user_id: str
    topics_completed: int = Field(default=0, ge=0)
    quizzes_completed: int = Field(default=0, ge=0)
    resources_completed: int = Field(default=0, ge=0)


class Feedback(Document):
    user_id: str
    topic_id: str
    rating: int = Field(ge=1, le=5)
    comment: str = ""


class Answer(BaseModel):
    """Ответ на один вопрос квиза. В хранилище не сохраняется."""

    question_id: str = Field(min_length=1)
    selected_option: str


# ---------------------------------------------------------------------------
# Результаты операций
# ---------------------------------------------------------------------------


class CompletionUpdate(BaseModel):
    updated: bool
    message: str


class ActivityResult(BaseModel):
    """Ответ на завершение темы, ресурса или отправку отзыва."""

    message: str
    xp_earned: int


class QuizResult(BaseModel):
    total_questions: int
    xp_earned: int
    correct_answers: List[str] = Field(default_factory=list)
    feedback: str


class ProgressReport(BaseModel):
    topics_completed: int
    total_topics: int
    quizzes_completed: int
    total_quizzes: int
    resources_completed: int
    total_resources: int
    overall_progress: float


class GameStarted(BaseModel):
    message: str
