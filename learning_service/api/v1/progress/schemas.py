# -*- coding: utf-8 -*-
"""
Pydantic-схемы для прогресса пользователей.
"""

from pydantic import BaseModel, ConfigDict, field_validator


class ProgressRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    topics_completed: int
    total_topics: int
    quizzes_completed: int
    total_quizzes: int
    resources_completed: int
    total_resources: int
    overall_progress: float

    @field_validator("overall_progress", mode="before")
    @classmethod
    def round_overall_progress(cls, v):
        """Округлить overall_progress до сотых."""
        if v is None:
            return 0.0
        return round(float(v), 2)
