# -*- coding: utf-8 -*-
"""
Зависимости FastAPI для маршрутов v1.
"""

from fastapi import Depends
from pymongo.asynchronous.database import AsyncDatabase

from learning_service.clients.database_client import get_db
from learning_service.service.learning import LearningService


def get_learning_service(db: AsyncDatabase = Depends(get_db)) -> LearningService:
    """Сервис операций обучения поверх базы текущего приложения."""
    return LearningService(db)
