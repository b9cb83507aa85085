# -*- coding: utf-8 -*-
"""
Pydantic-схемы запросов операций обучения.
"""

from typing import List

from pydantic import BaseModel, Field

from learning_service.domain.models import Answer


class UserRequest(BaseModel):
    user_id: str = Field(min_length=1, description="ID пользователя")


class CompleteTopicRequest(UserRequest):
    pass


class CompleteResourceRequest(UserRequest):
    pass


class StartGameRequest(UserRequest):
    pass


class SubmitQuizRequest(UserRequest):
    answers: List[Answer] = Field(
        min_length=1, description="Ответы в порядке вопросов квиза"
    )


class FeedbackCreate(UserRequest):
    topic_id: str = Field(min_length=1)
    rating: int = Field(ge=1, le=5, description="Оценка темы от 1 до 5")
    comment: str = ""
