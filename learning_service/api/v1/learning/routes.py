# -*- coding: utf-8 -*-
"""
Маршруты FastAPI для каталога и активностей пользователя.

* GET  /topics, /topics/{topic_id}      — темы
* POST /topics/{topic_id}/complete      — завершение темы
* GET  /quizzes/{quiz_id}               — квиз
* POST /quizzes/{quiz_id}/submit        — отправка ответов
* GET  /resources, POST /resources/complete
* GET  /recommendations, GET /challenges
* POST /feedback
* POST /game/start
"""

from typing import List

from fastapi import APIRouter, Depends, status

from learning_service.api.v1.dependencies import get_learning_service
from learning_service.config.logger import configure_logger
from learning_service.domain.models import (ActivityResult, Challenge,
                                            GameStarted, Quiz, QuizResult,
                                            Recommendation, Resource, Topic)
from learning_service.service.learning import LearningService

from .schemas import (CompleteResourceRequest, CompleteTopicRequest,
                      FeedbackCreate, StartGameRequest, SubmitQuizRequest)

router = APIRouter()
logger = configure_logger()

# -------------------------- каталог -----------------------------------------


@router.get("/topics", response_model=List[Topic], tags=["📚 Темы"])
async def list_topics_endpoint(
    service: LearningService = Depends(get_learning_service),
):
    return await service.get_topics()


@router.get("/topics/{topic_id}", response_model=Topic, tags=["📚 Темы"])
async def get_topic_endpoint(
    topic_id: str, service: LearningService = Depends(get_learning_service)
):
    return await service.get_topic(topic_id)


@router.get("/quizzes/{quiz_id}", response_model=Quiz, tags=["🧪 Квизы"])
async def get_quiz_endpoint(
    quiz_id: str, service: LearningService = Depends(get_learning_service)
):
    return await service.get_quiz(quiz_id)


@router.get("/resources", response_model=List[Resource], tags=["📁 Ресурсы"])
async def list_resources_endpoint(
    service: LearningService = Depends(get_learning_service),
):
    return await service.get_resources()


@router.get(
    "/recommendations", response_model=List[Recommendation], tags=["💡 Рекомендации"]
)
async def list_recommendations_endpoint(
    service: LearningService = Depends(get_learning_service),
):
    return await service.get_recommendations()


@router.get("/challenges", response_model=List[Challenge], tags=["🏆 Челленджи"])
async def list_challenges_endpoint(
    service: LearningService = Depends(get_learning_service),
):
    return await service.get_challenges()


# -------------------------- активности --------------------------------------


@router.post(
    "/topics/{topic_id}/complete", response_model=ActivityResult, tags=["📚 Темы"]
)
async def complete_topic_endpoint(
    topic_id: str,
    payload: CompleteTopicRequest,
    service: LearningService = Depends(get_learning_service),
):
    return await service.complete_topic(topic_id, payload.user_id)


@router.post("/quizzes/{quiz_id}/submit", response_model=QuizResult, tags=["🧪 Квизы"])
async def submit_quiz_endpoint(
    quiz_id: str,
    payload: SubmitQuizRequest,
    service: LearningService = Depends(get_learning_service),
):
    logger.debug(
        f"Пользователь {payload.user_id} отправляет квиз {quiz_id}: "
        f"{len(payload.answers)} ответов"
    )
    return await service.submit_quiz(quiz_id, payload.user_id, payload.answers)


@router.post(
    "/resources/complete", response_model=ActivityResult, tags=["📁 Ресурсы"]
)
async def complete_resource_endpoint(
    payload: CompleteResourceRequest,
    service: LearningService = Depends(get_learning_service),
):
    return await service.complete_resource(payload.user_id)


@router.post(
    "/feedback",
    response_model=ActivityResult,
    status_code=status.HTTP_201_CREATED,
    tags=["💬 Отзывы"],
)
async def submit_feedback_endpoint(
    payload: FeedbackCreate,
    service: LearningService = Depends(get_learning_service),
):
    return await service.submit_feedback(
        payload.user_id, payload.topic_id, payload.rating, payload.comment
    )


@router.post(
    "/game/start",
    response_model=GameStarted,
    status_code=status.HTTP_201_CREATED,
    tags=["🎮 Игра"],
)
async def start_game_endpoint(
    payload: StartGameRequest,
    service: LearningService = Depends(get_learning_service),
):
    return await service.start_game(payload.user_id)
