# -*- coding: utf-8 -*-
"""
Модуль начисления опыта (XP) пользователю.
"""
from pymongo.asynchronous.database import AsyncDatabase

from learning_service.config.logger import configure_logger
from learning_service.repository.progress import get_user_level, set_user_xp
from learning_service.utils.exceptions import ValidationError

logger = configure_logger()


def calculate_new_total(delta: int, required_xp: int) -> int:
    """
    Итоговый опыт после начисления.

    Итог считается от базового порога ``required_xp`` леджера, а не от
    текущего накопленного опыта: повторные начисления не суммируются,
    каждое выставляет ``delta + required_xp``. На это значение опираются
    клиентские экраны.
    """
    return delta + required_xp


class XpAccrualService:
    """Применяет начисления опыта к леджеру пользователя."""

    def __init__(self, db: AsyncDatabase):
        self.db = db

    async def award(self, user_id: str, delta: int) -> int:
        """
        Начислить опыт за завершённую активность.

        Args:
            user_id: ID пользователя
            delta: Начисляемый опыт

        Returns:
            Итоговый опыт пользователя

        Raises:
            NotFoundError: Леджер пользователя не найден
            ValidationError: Отрицательное начисление
        """
        if delta < 0:
            raise ValidationError(f"Начисление опыта не может быть отрицательным: {delta}")

        level = await get_user_level(self.db, user_id)
        new_total = calculate_new_total(delta, level.required_xp)
        await set_user_xp(self.db, user_id, new_total)

        logger.info(
            f"⭐ Пользователь {user_id}: +{delta} XP, итог {new_total} "
            f"(базовый порог {level.required_xp})"
        )
        return new_total
