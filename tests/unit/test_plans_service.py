"""Unit tests for the plan service."""

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

from core.services.plans import build_plan_record, get_all_plans, get_plan, new_plan_id, save_plan

TABLE = "ExercisePlans"


def test_new_plan_id_sorts_by_creation_time():
    earlier = datetime(2026, 3, 1, 8, 0, 0, tzinfo=timezone.utc)
    later = earlier + timedelta(microseconds=1)

    assert new_plan_id(earlier) < new_plan_id(later)


def test_new_plan_ids_are_unique():
    now = datetime.now(timezone.utc)
    assert len({new_plan_id(now) for _ in range(50)}) == 50


def test_build_plan_record_stamps_identity_and_defaults():
    record = build_plan_record("user-1", "diet", {"title": "Lean", "dailyCalories": 2100}, "2026-03-01T00:00:00+00:00")

    assert record["userId"] == "user-1"
    assert record["planId"]
    assert record["createdAt"] == record["updatedAt"] == "2026-03-01T00:00:00+00:00"
    assert record["meals"] == []
    assert record["dietaryRestrictions"] == []
    assert record["dailyCalories"] == 2100


def test_build_plan_record_ignores_ids_in_document():
    record = build_plan_record("user-1", "exercise", {"planId": "from-model", "userId": "someone-else"})

    assert record["planId"] != "from-model"
    assert record["userId"] == "user-1"
    assert record["exercises"] == []


def test_save_plan_puts_item():
    client = MagicMock()
    plan = build_plan_record("user-1", "exercise", {"exercises": [{"name": "Row", "sets": 4}]})

    assert save_plan(plan, client, TABLE) is plan
    call_kwargs = client.put_item.call_args.kwargs
    assert call_kwargs["TableName"] == TABLE
    assert call_kwargs["Item"]["planId"] == {"S": plan["planId"]}


def test_get_plan_by_id():
    client = MagicMock()
    client.get_item.return_value = {"Item": {"userId": {"S": "user-1"}, "planId": {"S": "p1"}}}

    plan = get_plan("user-1", client, TABLE, plan_id="p1")

    assert plan == {"userId": "user-1", "planId": "p1"}
    client.get_item.assert_called_once_with(TableName=TABLE, Key={"userId": {"S": "user-1"}, "planId": {"S": "p1"}})
    client.query.assert_not_called()


def test_get_plan_by_id_absent():
    client = MagicMock()
    client.get_item.return_value = {}
    assert get_plan("user-1", client, TABLE, plan_id="nope") is None


def test_get_latest_plan_queries_newest_first():
    client = MagicMock()
    client.query.return_value = {"Items": [{"userId": {"S": "user-1"}, "planId": {"S": "p2"}}]}

    plan = get_plan("user-1", client, TABLE)

    assert plan["planId"] == "p2"
    call_kwargs = client.query.call_args.kwargs
    assert call_kwargs["ScanIndexForward"] is False
    assert call_kwargs["Limit"] == 1


def test_get_latest_plan_none_when_user_has_no_plans():
    client = MagicMock()
    client.query.return_value = {"Items": []}
    assert get_plan("user-1", client, TABLE) is None


def test_get_all_plans_queries_both_tables():
    client = MagicMock()
    client.query.side_effect = [
        {"Items": [{"userId": {"S": "user-1"}, "planId": {"S": "e1"}}]},
        {"Items": [{"userId": {"S": "user-1"}, "planId": {"S": "d1"}}, {"userId": {"S": "user-1"}, "planId": {"S": "d2"}}]},
    ]

    result = get_all_plans("user-1", client, "ExercisePlans", "DietPlans")

    assert [p["planId"] for p in result["exercisePlans"]] == ["e1"]
    assert [p["planId"] for p in result["dietPlans"]] == ["d1", "d2"]
    tables = [c.kwargs["TableName"] for c in client.query.call_args_list]
    assert tables == ["ExercisePlans", "DietPlans"]


def test_get_all_plans_empty():
    client = MagicMock()
    client.query.return_value = {"Items": []}
    assert get_all_plans("user-1", client, "ExercisePlans", "DietPlans") == {"exercisePlans": [], "dietPlans": []}
