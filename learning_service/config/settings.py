# -*- coding: utf-8 -*-
"""
learning_service/config/settings.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Конфигурация настроек приложения с использованием Pydantic.

Этот модуль загружает конфигурацию из .env файла, предоставляя централизованную
систему управления настройками для всех окружений.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Base directory for the project (корень репозитория)
BASE_DIR = Path(__file__).resolve().parent.parent.parent

ENV_PATH = (BASE_DIR / ".env").resolve()


class Settings(BaseSettings):
    """Настройки приложения, загружаемые из .env файла."""

    # .env используется только если файл существует, иначе только переменные окружения
    model_config = SettingsConfigDict(
        env_file=ENV_PATH if ENV_PATH.exists() else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Конфигурация MongoDB
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db: str = "lerning"
    mongo_timeout_ms: int = 5000

    # Конфигурация приложения
    app_host: str = "0.0.0.0"
    app_port: int = 8000

    # Конфигурация логирования
    log_level: str = "INFO"
    log_file: str | None = None
    debug: bool = False

    # Начисление опыта
    xp_topic_completion: int = 50
    xp_resource_completion: int = 10
    xp_feedback: int = 10
    xp_per_correct_answer: int = 10
    default_required_xp: int = 0

    def get_config_source(self) -> str:
        """Возвращает информацию об источнике конфигурации для отладки."""
        if ENV_PATH.exists():
            return f"env file: {ENV_PATH}"
        return "environment variables only"


settings = Settings()
