# -*- coding: utf-8 -*-
"""
Настройка логирования для Learning Service с использованием loguru.
"""
import logging
import sys

from loguru import logger

from learning_service.config.settings import settings

# Удаляем стандартный хендлер loguru
logger.remove()


class InterceptHandler(logging.Handler):
    """Перехватывает стандартные логи и перенаправляет их в loguru."""

    def emit(self, record):
        # Пропускаем uvicorn INFO логи (Will watch, Uvicorn running, etc.)
        if record.name.startswith("uvicorn") and record.levelno == logging.INFO:
            return

        # Пропускаем отладочный шум драйвера MongoDB
        if record.name.startswith("pymongo") and record.levelno < logging.WARNING:
            return

        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


# Настраиваем перехват всех стандартных логов
logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

log_level = settings.log_level.upper()
debug_mode = settings.debug

# Формат для консоли (с цветами и префиксом)
console_format = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

# Формат для системных сообщений (без файловых путей)
system_format = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>SYSTEM</cyan> | "
    "<level>{message}</level>"
)

# Формат для файла (без цветов)
file_format = (
    "{time:YYYY-MM-DD HH:mm:ss} | "
    "{level: <8} | "
    "{name}:{function}:{line} - "
    "{message}"
)

logger.add(
    sys.stdout,
    format=console_format,
    level=log_level,
    colorize=True,
    backtrace=False,
    diagnose=False,
    filter=lambda record: (record["level"].name != "DEBUG" or debug_mode)
    and record["extra"].get("system") is not True,
)

logger.add(
    sys.stdout,
    format=system_format,
    level=log_level,
    colorize=True,
    backtrace=False,
    diagnose=False,
    filter=lambda record: record["extra"].get("system") is True,
)

if settings.log_file:
    logger.add(
        settings.log_file,
        level="INFO",
        format=file_format,
        rotation="10 MB",
        retention=5,
        filter=lambda record: record["extra"].get("system") is not True,
    )


def configure_logger(name: str = "learning_service"):
    """
    Получает настроенный логгер.

    Args:
        name: Имя логгера (игнорируется в loguru, сохраняется для совместимости вызовов)

    Returns:
        loguru.Logger: Настроенный логгер
    """
    return logger


def get_system_logger():
    """
    Получает логгер для системных сообщений без файловых путей.

    Returns:
        loguru.Logger: Настроенный логгер для системных сообщений
    """
    return logger.bind(system=True)
