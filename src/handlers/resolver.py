"""AppSync resolver for profile, quiz response and plan fields."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from aws_lambda_powertools.event_handler import AppSyncResolver

from core.clients import get_dynamo_client
from core.config import get_config
from core.errors import UnrecognizedOperationError, ValidationError
from core.log import configure_logging
from core.models import QuizResponseInput, UserProfileInput, parse
from core.services import plans, profiles

if TYPE_CHECKING:
    from aws_lambda_powertools.utilities.typing import LambdaContext

configure_logging()
logger = logging.getLogger(__name__)

app = AppSyncResolver()

QUERY_FIELDS = frozenset({"getUserProfile", "getQuizResponses", "getExercisePlan", "getDietPlan", "getUserPlans"})
MUTATION_FIELDS = frozenset({"createUserProfile", "updateUserProfile", "saveQuizResponse"})


def _require_user_id(user_id: str | None) -> str:
    if not user_id:
        raise ValidationError("userId is required")
    return user_id


@app.resolver(type_name="Query", field_name="getUserProfile")
def get_user_profile(userId: str = "") -> Any:
    return profiles.get_profile(
        _require_user_id(userId), get_dynamo_client(), get_config().require("user_profiles_table")
    )


@app.resolver(type_name="Query", field_name="getQuizResponses")
def get_quiz_responses(userId: str = "") -> Any:
    return profiles.get_quiz_responses(
        _require_user_id(userId), get_dynamo_client(), get_config().require("quiz_responses_table")
    )


@app.resolver(type_name="Query", field_name="getExercisePlan")
def get_exercise_plan(userId: str = "", planId: str | None = None) -> Any:
    return plans.get_plan(
        _require_user_id(userId),
        get_dynamo_client(),
        get_config().require("exercise_plans_table"),
        plan_id=planId,
    )


@app.resolver(type_name="Query", field_name="getDietPlan")
def get_diet_plan(userId: str = "", planId: str | None = None) -> Any:
    return plans.get_plan(
        _require_user_id(userId),
        get_dynamo_client(),
        get_config().require("diet_plans_table"),
        plan_id=planId,
    )


@app.resolver(type_name="Query", field_name="getUserPlans")
def get_user_plans(userId: str = "") -> Any:
    config = get_config()
    return plans.get_all_plans(
        _require_user_id(userId),
        get_dynamo_client(),
        config.require("exercise_plans_table"),
        config.require("diet_plans_table"),
    )


@app.resolver(type_name="Mutation", field_name="createUserProfile")
def create_user_profile(input: dict[str, Any] | None = None) -> Any:
    profile_input = parse(UserProfileInput, input).to_record()
    return profiles.create_profile(profile_input, get_dynamo_client(), get_config().require("user_profiles_table"))


@app.resolver(type_name="Mutation", field_name="updateUserProfile")
def update_user_profile(input: dict[str, Any] | None = None) -> Any:
    profile_input = parse(UserProfileInput, input).to_record()
    return profiles.update_profile(profile_input, get_dynamo_client(), get_config().require("user_profiles_table"))


@app.resolver(type_name="Mutation", field_name="saveQuizResponse")
def save_quiz_response(input: dict[str, Any] | None = None) -> Any:
    quiz_input = parse(QuizResponseInput, input).to_record()
    return profiles.save_quiz_response(quiz_input, get_dynamo_client(), get_config().require("quiz_responses_table"))


def handler(event: dict[str, Any], context: LambdaContext) -> Any:
    info = event.get("info", {})
    field_name = info.get("fieldName", "")
    arguments = event.get("arguments") or {}
    logger.info("Resolving %s with arguments %s", field_name, list(arguments))

    try:
        # AppSync resolves each field under its parent type; anything else has no resolver
        if field_name not in {"Query": QUERY_FIELDS, "Mutation": MUTATION_FIELDS}.get(info.get("parentTypeName"), ()):
            raise UnrecognizedOperationError(f"Unrecognized field name: {field_name}")
        return app.resolve({**event, "arguments": arguments}, context)
    except Exception:
        logger.exception("Error processing %s", field_name)
        raise
