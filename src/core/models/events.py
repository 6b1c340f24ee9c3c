"""Pydantic models for the plan notification envelope on EventBridge."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from core.models.base import CamelModel

PLAN_EVENT_SOURCE = "promptEventHandler"
PLAN_EVENT_DETAIL_TYPE = "bedrockResponded"


class PlanEventDetail(CamelModel):
    connection_id: str | None = None
    user_id: str | None = None
    exercise_plan: dict[str, Any] | None = None
    diet_plan: dict[str, Any] | None = None


class PlanEvent(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    source: str = ""
    detail_type: str = Field("", alias="detail-type")
    detail: dict[str, Any] | None = None
