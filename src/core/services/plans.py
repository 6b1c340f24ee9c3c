"""Exercise and diet plan data access.

Both plan tables share the same key schema (userId + planId) and are
write-once, so one set of functions serves both.
"""

import logging
import secrets
from datetime import datetime, timezone
from typing import Any, Literal

from core.db.items import from_item, to_item

logger = logging.getLogger(__name__)

PlanKind = Literal["exercise", "diet"]

# List attributes a stored plan always carries
_LIST_DEFAULTS: dict[str, tuple[str, ...]] = {
    "exercise": ("exercises",),
    "diet": ("meals", "dietaryRestrictions"),
}


def new_plan_id(now: datetime | None = None) -> str:
    """Time-ordered plan id: newer plans sort after older ones."""
    now = now or datetime.now(timezone.utc)
    return f"{now.strftime('%Y%m%d%H%M%S%f')}-{secrets.token_hex(4)}"


def build_plan_record(
    user_id: str,
    kind: PlanKind,
    document: dict[str, Any],
    timestamp: str | None = None,
) -> dict[str, Any]:
    """Stamp a plan document with a fresh planId, the owner and timestamps."""
    timestamp = timestamp or datetime.now(timezone.utc).isoformat()
    record = {
        **document,
        "planId": new_plan_id(),
        "userId": user_id,
        "createdAt": timestamp,
        "updatedAt": timestamp,
    }
    for attribute in _LIST_DEFAULTS[kind]:
        record[attribute] = record.get(attribute) or []
    return record


def save_plan(plan: dict[str, Any], dynamo_client: Any, plans_table: str) -> dict[str, Any]:
    dynamo_client.put_item(TableName=plans_table, Item=to_item(plan))
    logger.info("Saved plan %s for %s in %s", plan["planId"], plan["userId"], plans_table)
    return plan


def get_plan(
    user_id: str,
    dynamo_client: Any,
    plans_table: str,
    plan_id: str | None = None,
) -> dict[str, Any] | None:
    """Fetch one plan by id, or the newest plan when no id is given."""
    if plan_id:
        response = dynamo_client.get_item(
            TableName=plans_table,
            Key={"userId": {"S": user_id}, "planId": {"S": plan_id}},
        )
        item = response.get("Item")
        return from_item(item) if item else None

    response = dynamo_client.query(
        TableName=plans_table,
        KeyConditionExpression="userId = :userId",
        ExpressionAttributeValues={":userId": {"S": user_id}},
        ScanIndexForward=False,  # newest first
        Limit=1,
    )
    items = response.get("Items", [])
    return from_item(items[0]) if items else None


def _query_all(user_id: str, dynamo_client: Any, plans_table: str) -> list[dict[str, Any]]:
    plans: list[dict[str, Any]] = []
    last_key = None

    while True:
        query_kwargs: dict[str, Any] = {
            "TableName": plans_table,
            "KeyConditionExpression": "userId = :userId",
            "ExpressionAttributeValues": {":userId": {"S": user_id}},
        }
        if last_key:
            query_kwargs["ExclusiveStartKey"] = last_key

        response = dynamo_client.query(**query_kwargs)
        plans.extend(from_item(item) for item in response.get("Items", []))

        last_key = response.get("LastEvaluatedKey")
        if not last_key:
            break

    return plans


def get_all_plans(
    user_id: str,
    dynamo_client: Any,
    exercise_table: str,
    diet_table: str,
) -> dict[str, list[dict[str, Any]]]:
    return {
        "exercisePlans": _query_all(user_id, dynamo_client, exercise_table),
        "dietPlans": _query_all(user_id, dynamo_client, diet_table),
    }
