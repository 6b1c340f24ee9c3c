"""Unit tests for the generateUserPlans resolver."""

from unittest.mock import MagicMock, patch

import pytest

from core.errors import ValidationError
from core.models import PlanType
from handlers.generate_plans import handler


def test_generate_plans_handler():
    event = {
        "info": {"fieldName": "generateUserPlans"},
        "arguments": {"input": {"userId": "user-1", "planType": "BOTH", "preferences": {"goal": "strength"}}},
    }

    with (
        patch("handlers.generate_plans.get_dynamo_client") as mock_dynamo,
        patch("handlers.generate_plans.get_bedrock_runtime_client") as mock_bedrock,
        patch("handlers.generate_plans.generate_user_plans") as mock_generate,
    ):
        mock_generate.return_value = {"exercisePlan": {"planId": "p1"}, "dietPlan": {"planId": "p2"}}

        result = handler(event, None)

    assert result == {"exercisePlan": {"planId": "p1"}, "dietPlan": {"planId": "p2"}}
    request, dynamo_client, bedrock_client, _ = mock_generate.call_args.args
    assert request.user_id == "user-1"
    assert request.plan_type is PlanType.BOTH
    assert request.preferences == {"goal": "strength"}
    assert dynamo_client is mock_dynamo.return_value
    assert bedrock_client is mock_bedrock.return_value


def test_generate_plans_handler_accepts_flat_arguments():
    event = {"arguments": {"userId": "user-1", "planType": "DIET"}}

    with (
        patch("handlers.generate_plans.get_dynamo_client", return_value=MagicMock()),
        patch("handlers.generate_plans.get_bedrock_runtime_client", return_value=MagicMock()),
        patch("handlers.generate_plans.generate_user_plans", return_value={}) as mock_generate,
    ):
        handler(event, None)

    assert mock_generate.call_args.args[0].plan_type is PlanType.DIET


def test_generate_plans_handler_rejects_unknown_plan_type():
    event = {"arguments": {"userId": "user-1", "planType": "YOGA"}}

    with patch("handlers.generate_plans.generate_user_plans") as mock_generate:
        with pytest.raises(ValidationError):
            handler(event, None)

    mock_generate.assert_not_called()
