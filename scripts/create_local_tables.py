#!/usr/bin/env python3
"""Create DynamoDB tables for local development.

This script creates the four DynamoDB tables needed for local development and testing, configured
against DynamoDB Local. Table names come from the same environment variables the resolvers read.

Usage:
    python scripts/create_local_tables.py
"""

import sys
from pathlib import Path

import boto3
from botocore.exceptions import ClientError
from dotenv import load_dotenv

# Add src to path for config import
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.config import get_config  # noqa: E402

LOCAL_TABLE_DEFAULTS = {
    "user_profiles_table": "UserProfilesLocal",
    "quiz_responses_table": "QuizResponsesLocal",
    "exercise_plans_table": "ExercisePlansLocal",
    "diet_plans_table": "DietPlansLocal",
}

# Sort key per table; every table is partitioned on userId
SORT_KEYS = {
    "user_profiles_table": None,
    "quiz_responses_table": "questionId",
    "exercise_plans_table": "planId",
    "diet_plans_table": "planId",
}


def create_table(dynamodb, table_name: str, sort_key: str | None) -> None:
    key_schema = [{"AttributeName": "userId", "KeyType": "HASH"}]
    attributes = [{"AttributeName": "userId", "AttributeType": "S"}]
    if sort_key:
        key_schema.append({"AttributeName": sort_key, "KeyType": "RANGE"})
        attributes.append({"AttributeName": sort_key, "AttributeType": "S"})

    try:
        dynamodb.create_table(
            TableName=table_name,
            KeySchema=key_schema,
            AttributeDefinitions=attributes,
            BillingMode="PAY_PER_REQUEST",
        )
        print(f"✓ Created {table_name} table")
    except ClientError as e:
        if e.response["Error"]["Code"] == "ResourceInUseException":
            print(f"✓ {table_name} table already exists")
        else:
            raise


def main():
    """Create all DynamoDB tables."""
    load_dotenv()
    config = get_config()

    endpoint_url = config.dynamodb_endpoint or "http://localhost:8000"

    print(f"Creating DynamoDB tables at {endpoint_url}...")
    print()

    # For DynamoDB Local, use dummy credentials
    dynamodb = boto3.client(
        "dynamodb",
        endpoint_url=endpoint_url,
        region_name=config.aws_region,
        aws_access_key_id="dummy",
        aws_secret_access_key="dummy",
    )

    for field, sort_key in SORT_KEYS.items():
        table_name = getattr(config, field) or LOCAL_TABLE_DEFAULTS[field]
        create_table(dynamodb, table_name, sort_key)

    print()
    print("✅ All DynamoDB tables ready")


if __name__ == "__main__":
    main()
