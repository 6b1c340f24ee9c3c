from enum import Enum
from typing import Any

from pydantic import Field

from core.models.base import CamelModel


class PlanType(str, Enum):
    EXERCISE = "EXERCISE"
    DIET = "DIET"
    BOTH = "BOTH"

    @property
    def includes_exercise(self) -> bool:
        return self in (PlanType.EXERCISE, PlanType.BOTH)

    @property
    def includes_diet(self) -> bool:
        return self in (PlanType.DIET, PlanType.BOTH)


class UserProfileInput(CamelModel):
    user_id: str = Field(..., min_length=1)
    name: str | None = None
    age: int | None = None
    gender: str | None = None
    height: int | float | None = None
    weight: int | float | None = None


class QuizResponseInput(CamelModel):
    user_id: str = Field(..., min_length=1)
    question_id: str = Field(..., min_length=1)
    question_text: str | None = None
    response_data: str | None = None
    step_number: int | None = None


class PlanGenerationRequest(CamelModel):
    user_id: str = Field(..., min_length=1)
    plan_type: PlanType
    preferences: dict[str, Any] | None = None


class FlowPlanRequest(CamelModel):
    user_id: str = Field(..., min_length=1)
    connection_id: str = Field(..., min_length=1)
    plan_type: PlanType = PlanType.BOTH
    preferences: dict[str, Any] | None = None
