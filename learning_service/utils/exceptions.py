# -*- coding: utf-8 -*-
"""
Этот модуль определяет пользовательские исключения Learning Service.
Исключения сразу несут HTTP статус-код и уникальный код ошибки, поэтому
FastAPI отдаёт их клиенту без дополнительных обработчиков.
"""

from enum import Enum

from fastapi import HTTPException, status


class ErrorCode(str, Enum):
    """Перечисление для уникальных кодов ошибок."""

    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    STORAGE_UNAVAILABLE = "STORAGE_UNAVAILABLE"


class APIException(HTTPException):
    """Базовый класс для пользовательских исключений API."""

    def __init__(
        self,
        status_code: int,
        detail: str,
        error_code: str,
        headers: dict | None = None,
    ):
        """
        Инициализирует APIException с кодом статуса, деталями и кодом ошибки.

        Args:
            status_code (int): HTTP код статуса.
            detail (str): Сообщение об ошибке.
            error_code (str): Уникальный код ошибки.
            headers (dict, optional): Дополнительные заголовки.
        """
        super().__init__(status_code=status_code, headers=headers)
        self.detail = detail
        self.error_code = error_code

    def __str__(self) -> str:
        return self.detail


class NotFoundError(APIException):
    """Вызывается, когда документ не найден."""

    def __init__(
        self,
        resource_type: str,
        resource_id: str | int | None = None,
        details: str | None = None,
    ):
        """
        Инициализирует NotFoundError.

        Args:
            resource_type (str): Тип ресурса (например, "Topic", "UserLevel").
            resource_id (str or int, optional): ID ресурса.
            details (str, optional): Дополнительные детали об ошибке.
        """
        detail = f"{resource_type} не найден"
        if resource_id:
            detail = f"{resource_type} с ID {resource_id} не найден"
        if details:
            detail = f"{detail}: {details}"
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
            error_code=ErrorCode.NOT_FOUND,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class ConflictError(APIException):
    """Вызывается, когда документ уже существует."""

    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=detail,
            error_code=ErrorCode.CONFLICT,
        )


class ValidationError(APIException):
    """Вызывается, когда входные данные или документ хранилища недействительны."""

    def __init__(self, detail: str):
        """
        Инициализирует ValidationError.

        Args:
            detail (str): Детальное сообщение об ошибке.
        """
        super().__init__(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=detail,
            error_code=ErrorCode.VALIDATION_ERROR,
        )


class StorageUnavailableError(APIException):
    """Вызывается, когда хранилище недоступно или запрос к нему упал.

    Сообщение драйвера передаётся без изменений.
    """

    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=detail,
            error_code=ErrorCode.STORAGE_UNAVAILABLE,
        )
