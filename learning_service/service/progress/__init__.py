# -*- coding: utf-8 -*-
"""
Модуль для работы с опытом и прогрессом пользователей.

Этот модуль экспортирует публичные функции и сервисы начисления опыта,
обновления счётчиков завершения и расчета общего прогресса.
"""

from learning_service.service.progress.completion import (
    CompletionAggregator, build_increments)
from learning_service.service.progress.report import (
    ProgressService, calculate_overall_progress)
from learning_service.service.progress.xp import (XpAccrualService,
                                                  calculate_new_total)

__all__ = [
    # Начисление опыта
    "XpAccrualService",
    "calculate_new_total",
    # Счётчики завершения
    "CompletionAggregator",
    "build_increments",
    # Расчет прогресса
    "ProgressService",
    "calculate_overall_progress",
]
