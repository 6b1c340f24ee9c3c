"""Shared test fixtures for DreamBody."""

import os
import sys
import uuid
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Unset AWS_PROFILE for local testing (DynamoDB Local doesn't need it)
if "AWS_PROFILE" in os.environ:
    del os.environ["AWS_PROFILE"]

# Same names scripts/create_local_tables.py creates
os.environ.setdefault("USER_PROFILES_TABLE", "UserProfilesLocal")
os.environ.setdefault("QUIZ_RESPONSES_TABLE", "QuizResponsesLocal")
os.environ.setdefault("EXERCISE_PLANS_TABLE", "ExercisePlansLocal")
os.environ.setdefault("DIET_PLANS_TABLE", "DietPlansLocal")
os.environ.setdefault("EVENT_BUS_NAME", "DreambodyEventBus-test")

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _fresh_config():
    from core.config import _reset_config

    _reset_config()
    yield
    _reset_config()


@pytest.fixture
def conditional_check_failed():
    """Stand-in for the modeled DynamoDB ConditionalCheckFailedException."""
    return type("ConditionalCheckFailedException", (Exception,), {})


@pytest.fixture
def dynamo_mock(conditional_check_failed):
    from unittest.mock import MagicMock

    client = MagicMock()
    client.exceptions.ConditionalCheckFailedException = conditional_check_failed
    return client


# DynamoDB Local fixtures
@pytest.fixture
def dynamodb_client():
    """Provide a low-level DynamoDB client for integration tests."""
    import boto3
    from botocore.exceptions import EndpointConnectionError

    from core.config import get_config

    config = get_config()

    client = boto3.client(
        "dynamodb",
        endpoint_url=config.dynamodb_endpoint or "http://localhost:8000",
        region_name=config.aws_region,
        aws_access_key_id="dummy",
        aws_secret_access_key="dummy",
    )
    try:
        existing = set(client.list_tables()["TableNames"])
    except EndpointConnectionError:
        pytest.skip("DynamoDB Local is not running")

    required = {
        config.user_profiles_table,
        config.quiz_responses_table,
        config.exercise_plans_table,
        config.diet_plans_table,
    }
    if not required <= existing:
        pytest.skip("Local tables missing; run scripts/create_local_tables.py")
    return client


@pytest.fixture
def user_id():
    """A user id no other test run has written."""
    return f"user-{uuid.uuid4().hex[:12]}"


def _delete_partition(client, table_name: str, key_names: tuple[str, ...], user_id: str) -> None:
    response = client.query(
        TableName=table_name,
        KeyConditionExpression="userId = :userId",
        ExpressionAttributeValues={":userId": {"S": user_id}},
    )
    for item in response.get("Items", []):
        client.delete_item(TableName=table_name, Key={name: item[name] for name in key_names})


@pytest.fixture
def local_tables(dynamodb_client, user_id):
    """Table names on DynamoDB Local; rows written for user_id are removed afterwards."""
    from core.config import get_config

    config = get_config()
    tables = {
        "profiles": config.user_profiles_table,
        "quiz": config.quiz_responses_table,
        "exercise": config.exercise_plans_table,
        "diet": config.diet_plans_table,
    }
    yield tables

    _delete_partition(dynamodb_client, tables["profiles"], ("userId",), user_id)
    _delete_partition(dynamodb_client, tables["quiz"], ("userId", "questionId"), user_id)
    _delete_partition(dynamodb_client, tables["exercise"], ("userId", "planId"), user_id)
    _delete_partition(dynamodb_client, tables["diet"], ("userId", "planId"), user_id)
