# -*- coding: utf-8 -*-
"""
Маршруты FastAPI для получения прогресса пользователей.

* GET /api/v1/progress/{user_id} — счётчики пользователя, размеры каталога
  и общий процент завершения
"""

from fastapi import APIRouter, Depends

from learning_service.api.v1.dependencies import get_learning_service
from learning_service.service.learning import LearningService

from .schemas import ProgressRead

router = APIRouter()


@router.get("/{user_id}", response_model=ProgressRead)
async def get_progress_endpoint(
    user_id: str, service: LearningService = Depends(get_learning_service)
):
    """
    Возвращает прогресс пользователя по всему каталогу.
    """
    report = await service.get_progress(user_id)
    return ProgressRead.model_validate(report.model_dump())
