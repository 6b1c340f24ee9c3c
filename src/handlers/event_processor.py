"""EventBridge target that stores plans produced by the prompt flow."""

import json
import logging
from typing import Any

import pydantic

from core.clients import get_dynamo_client
from core.config import get_config
from core.errors import InvalidPayloadError
from core.log import configure_logging
from core.models import PlanEvent
from core.services.plan_events import is_plan_event, persist_plan_event

configure_logging()
logger = logging.getLogger(__name__)


def build_response(status_code: int, body: dict[str, Any]) -> dict[str, Any]:
    return {"statusCode": status_code, "body": json.dumps(body)}


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    if not is_plan_event(event):
        logger.info("Ignoring %s event from %s", event.get("detail-type"), event.get("source"))
        return build_response(200, {"message": "Event ignored - not relevant"})

    try:
        plan_event = PlanEvent.model_validate(event)
    except pydantic.ValidationError:
        logger.warning("Malformed event envelope")
        return build_response(400, {"message": "Invalid event data"})

    try:
        saved = persist_plan_event(plan_event, get_dynamo_client(), get_config())
    except InvalidPayloadError as e:
        logger.warning("Invalid plan event: %s", e.message)
        return build_response(400, {"message": "Invalid event data", "error": e.message})

    logger.info("Stored plans %s and %s for %s", saved["exercisePlanId"], saved["dietPlanId"], saved["userId"])
    return build_response(200, {"message": "Event processed successfully", **saved})
