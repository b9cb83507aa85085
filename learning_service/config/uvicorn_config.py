# -*- coding: utf-8 -*-
"""
Конфигурация для Uvicorn: логи сервера и драйвера MongoDB идут через loguru.
"""

import logging

from learning_service.config.logger import InterceptHandler


def setup_uvicorn_logging():
    """Настраивает перехват логов uvicorn и pymongo."""

    # Очищаем существующие обработчики
    for logger_name in [
        "uvicorn",
        "uvicorn.access",
        "uvicorn.error",
        "fastapi",
        "pymongo",
    ]:
        logger_obj = logging.getLogger(logger_name)
        logger_obj.handlers.clear()
        logger_obj.propagate = False

    logging.getLogger("uvicorn").handlers = [InterceptHandler()]
    logging.getLogger("uvicorn.error").handlers = [InterceptHandler()]
    logging.getLogger("fastapi").handlers = [InterceptHandler()]

    # От драйвера MongoDB нужны только предупреждения и ошибки
    pymongo_logger = logging.getLogger("pymongo")
    pymongo_logger.handlers = [InterceptHandler()]
    pymongo_logger.setLevel(logging.WARNING)
