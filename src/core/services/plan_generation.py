"""Generate exercise and diet plans from a user's profile and quiz answers."""

import logging
from datetime import datetime, timezone
from typing import Any

from core.config import Config
from core.errors import NotFoundError
from core.models import PlanGenerationRequest
from core.services.bedrock import invoke_model
from core.services.extraction import extract_json_object
from core.services.plans import build_plan_record, save_plan
from core.services.profiles import get_profile, get_quiz_responses
from core.services.prompts import render_diet_prompt, render_exercise_prompt

logger = logging.getLogger(__name__)


def collect_user_data(user_id: str, dynamo_client: Any, config: Config) -> tuple[dict[str, Any], list[dict[str, Any]]]:
    """Profile and quiz responses for a user; the profile must exist."""
    profile = get_profile(user_id, dynamo_client, config.require("user_profiles_table"))
    if profile is None:
        raise NotFoundError(f"User profile not found for userId: {user_id}")

    quiz_responses = get_quiz_responses(user_id, dynamo_client, config.require("quiz_responses_table"))
    logger.info("Collected profile and %d quiz responses for %s", len(quiz_responses), user_id)
    return profile, quiz_responses


def generate_user_plans(
    request: PlanGenerationRequest,
    dynamo_client: Any,
    bedrock_client: Any,
    config: Config,
) -> dict[str, Any]:
    """Generate and persist the requested plans.

    Plans are saved as soon as each one is generated. When BOTH is requested
    and the diet plan fails, the exercise plan is not rolled back.
    """
    profile, quiz_responses = collect_user_data(request.user_id, dynamo_client, config)
    timestamp = datetime.now(timezone.utc).isoformat()
    result: dict[str, Any] = {}

    if request.plan_type.includes_exercise:
        prompt = render_exercise_prompt(profile, quiz_responses, request.preferences)
        document = extract_json_object(invoke_model(prompt, bedrock_client, config))
        plan = build_plan_record(request.user_id, "exercise", document, timestamp)
        result["exercisePlan"] = save_plan(plan, dynamo_client, config.require("exercise_plans_table"))

    if request.plan_type.includes_diet:
        prompt = render_diet_prompt(profile, quiz_responses, request.preferences)
        document = extract_json_object(invoke_model(prompt, bedrock_client, config))
        plan = build_plan_record(request.user_id, "diet", document, timestamp)
        result["dietPlan"] = save_plan(plan, dynamo_client, config.require("diet_plans_table"))

    logger.info("Generated %s plan(s) for %s", request.plan_type.value, request.user_id)
    return result
