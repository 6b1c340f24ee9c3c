"""Publish generated plans to EventBridge and persist plans relayed from it."""

import json
import logging
from datetime import datetime, timezone
from typing import Any

import pydantic

from core.config import Config
from core.errors import EventPublishError, InvalidPayloadError
from core.models import PLAN_EVENT_DETAIL_TYPE, PLAN_EVENT_SOURCE, PlanEvent, PlanEventDetail
from core.services.plans import build_plan_record, save_plan

logger = logging.getLogger(__name__)

DEFAULT_DESCRIPTION = "Generated with Bedrock prompt flows"


def publish_plans(
    connection_id: str,
    user_id: str,
    plans: dict[str, Any],
    events_client: Any,
    config: Config,
) -> None:
    """Put one plan notification on the event bus."""
    detail = {"connectionId": connection_id, "userId": user_id, **plans}
    response = events_client.put_events(
        Entries=[
            {
                "EventBusName": config.require("event_bus_name"),
                "Source": PLAN_EVENT_SOURCE,
                "DetailType": PLAN_EVENT_DETAIL_TYPE,
                "Detail": json.dumps(detail),
            }
        ]
    )
    if response.get("FailedEntryCount", 0):
        entry = response.get("Entries", [{}])[0]
        raise EventPublishError(
            f"EventBridge rejected plan event: {entry.get('ErrorCode')} {entry.get('ErrorMessage')}"
        )
    logger.info("Published plan event for %s on %s", user_id, config.event_bus_name)


def is_plan_event(event: dict[str, Any]) -> bool:
    """True for plan notifications, judged on the raw envelope before any validation."""
    return event.get("detail-type") == PLAN_EVENT_DETAIL_TYPE


def parse_plan_detail(event: PlanEvent) -> tuple[str, PlanEventDetail]:
    """Validate the detail of a plan event and resolve its user id."""
    if not event.detail:
        raise InvalidPayloadError("Plan event has no detail")

    try:
        detail = PlanEventDetail.model_validate(event.detail)
    except pydantic.ValidationError as e:
        raise InvalidPayloadError(f"Plan event detail is malformed: {e.error_count()} error(s)") from e

    missing = [name for name, plan in (("exercisePlan", detail.exercise_plan), ("dietPlan", detail.diet_plan)) if not plan]
    if missing:
        raise InvalidPayloadError(f"Plan event is missing {', '.join(missing)}")

    user_id = (
        detail.user_id
        or detail.exercise_plan.get("userId")
        or detail.diet_plan.get("userId")
        or (detail.connection_id.split("-")[0] if detail.connection_id else None)
    )
    if not user_id:
        raise InvalidPayloadError("Plan event has no userId or connectionId")
    return user_id, detail


def persist_plan_event(event: PlanEvent, dynamo_client: Any, config: Config) -> dict[str, Any]:
    """Store both plans carried by a plan event under fresh ids."""
    user_id, detail = parse_plan_detail(event)
    timestamp = datetime.now(timezone.utc).isoformat()

    exercise_plan = build_plan_record(
        user_id,
        "exercise",
        {
            **detail.exercise_plan,
            "title": detail.exercise_plan.get("title") or "Custom Exercise Plan",
            "description": detail.exercise_plan.get("description") or DEFAULT_DESCRIPTION,
        },
        timestamp,
    )
    diet_plan = build_plan_record(
        user_id,
        "diet",
        {
            **detail.diet_plan,
            "title": detail.diet_plan.get("title") or "Custom Diet Plan",
            "description": detail.diet_plan.get("description") or DEFAULT_DESCRIPTION,
        },
        timestamp,
    )

    save_plan(exercise_plan, dynamo_client, config.require("exercise_plans_table"))
    save_plan(diet_plan, dynamo_client, config.require("diet_plans_table"))

    return {
        "userId": user_id,
        "exercisePlanId": exercise_plan["planId"],
        "dietPlanId": diet_plan["planId"],
    }
