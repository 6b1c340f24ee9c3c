"""User profile and quiz response data access."""

import logging
from datetime import datetime, timezone
from typing import Any

from core.db.items import build_update_expression, from_item, to_item
from core.errors import AlreadyExistsError, NotFoundError

logger = logging.getLogger(__name__)

# Never taken from update input
_PROTECTED_ATTRIBUTES = ("userId", "createdAt", "updatedAt")


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def get_profile(user_id: str, dynamo_client: Any, profiles_table: str) -> dict[str, Any] | None:
    response = dynamo_client.get_item(
        TableName=profiles_table,
        Key={"userId": {"S": user_id}},
    )
    item = response.get("Item")
    return from_item(item) if item else None


def create_profile(profile_input: dict[str, Any], dynamo_client: Any, profiles_table: str) -> dict[str, Any]:
    """Create a profile; fails if one already exists for the userId."""
    timestamp = _now()
    record = {
        **{k: v for k, v in profile_input.items() if v is not None},
        "createdAt": timestamp,
        "updatedAt": timestamp,
    }

    try:
        dynamo_client.put_item(
            TableName=profiles_table,
            Item=to_item(record),
            ConditionExpression="attribute_not_exists(userId)",
        )
    except dynamo_client.exceptions.ConditionalCheckFailedException as e:
        raise AlreadyExistsError(f"User profile already exists for userId: {record['userId']}") from e

    logger.info("Created profile for %s", record["userId"])
    return record


def update_profile(profile_input: dict[str, Any], dynamo_client: Any, profiles_table: str) -> dict[str, Any]:
    """Apply the attributes present in the input and refresh updatedAt."""
    user_id = profile_input["userId"]
    fields = {k: v for k, v in profile_input.items() if k not in _PROTECTED_ATTRIBUTES}
    fields["updatedAt"] = _now()

    try:
        response = dynamo_client.update_item(
            TableName=profiles_table,
            Key={"userId": {"S": user_id}},
            ConditionExpression="attribute_exists(userId)",
            ReturnValues="ALL_NEW",
            **build_update_expression(fields),
        )
    except dynamo_client.exceptions.ConditionalCheckFailedException as e:
        raise NotFoundError(f"User profile not found for userId: {user_id}") from e

    logger.info("Updated profile for %s", user_id)
    return from_item(response["Attributes"])


def get_quiz_responses(user_id: str, dynamo_client: Any, quiz_table: str) -> list[dict[str, Any]]:
    """All quiz responses for a user, oldest first."""
    responses: list[dict[str, Any]] = []
    last_key = None

    while True:
        query_kwargs: dict[str, Any] = {
            "TableName": quiz_table,
            "KeyConditionExpression": "userId = :userId",
            "ExpressionAttributeValues": {":userId": {"S": user_id}},
        }
        if last_key:
            query_kwargs["ExclusiveStartKey"] = last_key

        response = dynamo_client.query(**query_kwargs)
        responses.extend(from_item(item) for item in response.get("Items", []))

        last_key = response.get("LastEvaluatedKey")
        if not last_key:
            break

    return sorted(responses, key=lambda r: r.get("createdAt", ""))


def save_quiz_response(quiz_input: dict[str, Any], dynamo_client: Any, quiz_table: str) -> dict[str, Any]:
    """Upsert a quiz response; saving the same questionId again overwrites it."""
    timestamp = _now()
    record = {
        **{k: v for k, v in quiz_input.items() if v is not None},
        "createdAt": timestamp,
        "updatedAt": timestamp,
    }

    dynamo_client.put_item(TableName=quiz_table, Item=to_item(record))
    logger.info("Saved quiz response %s for %s", record["questionId"], record["userId"])
    return record
