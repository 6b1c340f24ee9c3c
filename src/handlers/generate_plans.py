"""AppSync resolver for generateUserPlans — direct Bedrock model invocation."""

import logging
from typing import Any

from core.clients import get_bedrock_runtime_client, get_dynamo_client
from core.config import get_config
from core.log import configure_logging
from core.models import PlanGenerationRequest, parse
from core.services.plan_generation import generate_user_plans

configure_logging()
logger = logging.getLogger(__name__)


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    arguments = event.get("arguments") or {}
    # Accept both generateUserPlans(input: {...}) and flat arguments
    request = parse(PlanGenerationRequest, arguments.get("input", arguments))
    logger.info("Generating %s plan(s) for %s", request.plan_type.value, request.user_id)

    try:
        return generate_user_plans(request, get_dynamo_client(), get_bedrock_runtime_client(), get_config())
    except Exception:
        logger.exception("Plan generation failed for %s", request.user_id)
        raise
