from os import environ
from typing import Any

import boto3
from pydantic import BaseModel, ConfigDict

from core.errors import ConfigurationError

_FLOW_PARAMETERS = {
    "flow_identifier": "flowIdentifier",
    "flow_alias_identifier": "flowAliasIdentifier",
    "flow_start_node_name": "startNodeName",
    "flow_node_output_name": "endNodeOutputName",
}

_cached_flow_parameters: dict[str, str] | None = None


def _resolve_flow_parameters(prefix: str) -> dict[str, str]:
    """Fetch prompt-flow identifiers from SSM Parameter Store, with caching."""
    global _cached_flow_parameters
    if _cached_flow_parameters is not None:
        return _cached_flow_parameters

    # Local dev and tests: no prefix means env vars only
    if not prefix:
        return {}

    names = {f"{prefix.rstrip('/')}/{suffix}": field for field, suffix in _FLOW_PARAMETERS.items()}
    client = boto3.client("ssm")
    response = client.get_parameters(Names=list(names))
    _cached_flow_parameters = {names[p["Name"]]: p["Value"] for p in response.get("Parameters", [])}
    return _cached_flow_parameters


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    aws_region: str
    dynamodb_endpoint: str | None = None
    user_profiles_table: str = ""
    quiz_responses_table: str = ""
    exercise_plans_table: str = ""
    diet_plans_table: str = ""
    bedrock_model_id: str
    bedrock_max_tokens: int = 4096
    bedrock_temperature: float = 0.7
    event_bus_name: str = ""
    flow_parameter_prefix: str = ""
    flow_identifier: str = ""
    flow_alias_identifier: str = ""
    flow_start_node_name: str = ""
    flow_node_output_name: str = ""
    stage: str
    log_level: str = "INFO"

    def require(self, field: str) -> str:
        """Return a string setting, or raise if it was left empty."""
        value: Any = getattr(self, field)
        if not value:
            raise ConfigurationError(f"{field.upper()} is not configured")
        return str(value)


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config — for testing only."""
    global _cached_config, _cached_flow_parameters
    _cached_config = None
    _cached_flow_parameters = None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    flow_prefix = environ.get("FLOW_PARAMETER_PREFIX", "")
    flow_defaults = _resolve_flow_parameters(flow_prefix)

    _cached_config = Config(
        aws_region=environ.get("AWS_REGION", "us-west-2"),
        dynamodb_endpoint=environ.get("DYNAMODB_ENDPOINT"),
        user_profiles_table=environ.get("USER_PROFILES_TABLE", ""),
        quiz_responses_table=environ.get("QUIZ_RESPONSES_TABLE", ""),
        exercise_plans_table=environ.get("EXERCISE_PLANS_TABLE", ""),
        diet_plans_table=environ.get("DIET_PLANS_TABLE", ""),
        bedrock_model_id=environ.get("BEDROCK_MODEL_ID", "anthropic.claude-3-sonnet-20240229-v1:0"),
        bedrock_max_tokens=int(environ.get("BEDROCK_MAX_TOKENS", "4096")),
        bedrock_temperature=float(environ.get("BEDROCK_TEMPERATURE", "0.7")),
        event_bus_name=environ.get("EVENT_BUS_NAME", ""),
        flow_parameter_prefix=flow_prefix,
        flow_identifier=environ.get("FLOW_IDENTIFIER") or flow_defaults.get("flow_identifier", ""),
        flow_alias_identifier=environ.get("FLOW_ALIAS_IDENTIFIER") or flow_defaults.get("flow_alias_identifier", ""),
        flow_start_node_name=environ.get("FLOW_START_NODE_NAME") or flow_defaults.get("flow_start_node_name", ""),
        flow_node_output_name=environ.get("FLOW_NODE_OUTPUT_NAME") or flow_defaults.get("flow_node_output_name", ""),
        stage=environ.get("STAGE", "dev"),
        log_level=environ.get("LOG_LEVEL", "INFO"),
    )
    return _cached_config
