"""AppSync resolver for generateUserPlansWithFlow.

Runs the Bedrock prompt flow and publishes its plans on the event bus; the
event processor stores them asynchronously.
"""

import logging
from typing import Any

from core.clients import get_bedrock_agent_runtime_client, get_events_client
from core.config import get_config
from core.log import configure_logging
from core.models import FlowPlanRequest, parse
from core.services.bedrock import invoke_flow
from core.services.extraction import extract_json_object
from core.services.plan_events import publish_plans

configure_logging()
logger = logging.getLogger(__name__)

PLAN_KEYS = ("exercisePlan", "dietPlan")


def _plans_from_output(output: Any) -> dict[str, Any]:
    if isinstance(output, str):
        output = extract_json_object(output)
    if not isinstance(output, dict):
        return {}
    return {key: output[key] for key in PLAN_KEYS if output.get(key)}


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    arguments = event.get("arguments") or {}
    request = parse(FlowPlanRequest, arguments.get("input", arguments))
    config = get_config()

    document = {
        "userId": request.user_id,
        "planType": request.plan_type.value,
        "preferences": request.preferences or {},
    }

    try:
        output = invoke_flow(document, get_bedrock_agent_runtime_client(), config)
        plans = _plans_from_output(output)
        publish_plans(request.connection_id, request.user_id, plans, get_events_client(), config)
    except Exception:
        logger.exception("Error invoking flow for %s", request.user_id)
        raise

    return {
        "success": True,
        "connectionId": request.connection_id,
        "message": "Flow invoked successfully",
    }
