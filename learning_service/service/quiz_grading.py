# -*- coding: utf-8 -*-
"""
Сервис проверки квизов.

Ответы сопоставляются с вопросами по позиции: ответ ``i`` засчитывается,
только если он относится к вопросу ``i`` (совпадает ID) и выбран верный
вариант этого вопроса. Ответы, присланные в другом порядке или сверх
количества вопросов, не засчитываются.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from pymongo.asynchronous.database import AsyncDatabase

from learning_service.config.logger import configure_logger
from learning_service.config.settings import settings
from learning_service.domain.enums import FeedbackTier
from learning_service.domain.models import Answer, Quiz, QuizResult
from learning_service.repository.catalog import get_quiz
from learning_service.service.progress import (CompletionAggregator,
                                               XpAccrualService)
from learning_service.utils.exceptions import ValidationError

logger = configure_logger(__name__)


@dataclass
class QuizGrade:
    xp_earned: int = 0
    correct_answers: List[str] = field(default_factory=list)
    feedback: FeedbackTier = FeedbackTier.KEEP_PRACTICING


def _is_answer_correct(quiz: Quiz, position: int, answer: Answer) -> bool:
    if position >= len(quiz.questions):
        return False
    question = quiz.questions[position]
    return (
        answer.question_id == question.id
        and answer.selected_option == question.correct_option
    )


def select_feedback(correct_count: int, submitted_count: int) -> FeedbackTier:
    # Частично верный результат получает тот же отзыв, что и нулевой
    if submitted_count > 0 and correct_count == submitted_count:
        return FeedbackTier.EXCELLENT
    return FeedbackTier.KEEP_PRACTICING


def grade_submission(
    quiz: Quiz, answers: List[Answer], xp_per_answer: int | None = None
) -> QuizGrade:
    """
    Проверить ответы на квиз.

    Args:
        quiz: Квиз с ключом ответов
        answers: Ответы в порядке вопросов
        xp_per_answer: Опыт за верный ответ (по умолчанию из настроек)

    Returns:
        Начисленный опыт, ID верно отвеченных вопросов и уровень отзыва
    """
    if xp_per_answer is None:
        xp_per_answer = settings.xp_per_correct_answer

    grade = QuizGrade()
    for position, answer in enumerate(answers):
        if _is_answer_correct(quiz, position, answer):
            grade.xp_earned += xp_per_answer
            grade.correct_answers.append(answer.question_id)

    grade.feedback = select_feedback(len(grade.correct_answers), len(answers))
    return grade


class QuizService:
    """Проверка квиза с начислением опыта и обновлением счётчиков."""

    def __init__(self, db: AsyncDatabase):
        self.db = db
        self.xp = XpAccrualService(db)
        self.completions = CompletionAggregator(db)

    async def get_quiz(self, quiz_id: str) -> Quiz:
        return await get_quiz(self.db, quiz_id)

    async def submit(
        self, quiz_id: str, user_id: str, answers: List[Answer]
    ) -> QuizResult:
        """
        Проверить ответы пользователя и применить результат.

        Raises:
            NotFoundError: Квиз, леджер или счётчики пользователя не найдены
            ValidationError: Пустой список ответов
        """
        if not answers:
            raise ValidationError("Список ответов пуст")

        quiz = await get_quiz(self.db, quiz_id)
        grade = grade_submission(quiz, answers)

        logger.info(
            f"📝 Квиз {quiz_id} пользователя {user_id}: "
            f"верно {len(grade.correct_answers)}/{len(answers)}, +{grade.xp_earned} XP"
        )

        await self.xp.award(user_id, grade.xp_earned)
        await self.completions.increment(user_id, quizzes=len(answers))

        return QuizResult(
            total_questions=len(quiz.questions),
            xp_earned=grade.xp_earned,
            correct_answers=grade.correct_answers,
            feedback=grade.feedback.value,
        )
