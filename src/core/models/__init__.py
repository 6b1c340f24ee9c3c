"""
Pydantic models for DreamBody.
"""

from core.models.base import CamelModel, parse
from core.models.events import PLAN_EVENT_DETAIL_TYPE, PLAN_EVENT_SOURCE, PlanEvent, PlanEventDetail
from core.models.requests import (
    FlowPlanRequest,
    PlanGenerationRequest,
    PlanType,
    QuizResponseInput,
    UserProfileInput,
)

__all__ = [
    "CamelModel",
    "FlowPlanRequest",
    "PLAN_EVENT_DETAIL_TYPE",
    "PLAN_EVENT_SOURCE",
    "PlanEvent",
    "PlanEventDetail",
    "PlanGenerationRequest",
    "PlanType",
    "QuizResponseInput",
    "UserProfileInput",
    "parse",
]
