"""Conversion between plain records and DynamoDB attribute-value maps."""

import json
from decimal import Decimal
from typing import Any

from boto3.dynamodb.types import TypeDeserializer, TypeSerializer

_serializer = TypeSerializer()
_deserializer = TypeDeserializer()


def _to_dynamo_value(value: Any) -> Any:
    # TypeSerializer rejects float, so numbers go through Decimal
    return json.loads(json.dumps(value), parse_float=Decimal)


def _from_dynamo_value(value: Any) -> Any:
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, list):
        return [_from_dynamo_value(v) for v in value]
    if isinstance(value, set):
        return [_from_dynamo_value(v) for v in sorted(value)]
    if isinstance(value, dict):
        return {k: _from_dynamo_value(v) for k, v in value.items()}
    return value


def to_item(record: dict[str, Any]) -> dict[str, Any]:
    """Serialize a record, dropping attributes whose value is None."""
    return {
        key: _serializer.serialize(_to_dynamo_value(value))
        for key, value in record.items()
        if value is not None
    }


def from_item(item: dict[str, Any]) -> dict[str, Any]:
    return {key: _from_dynamo_value(_deserializer.deserialize(value)) for key, value in item.items()}


def build_update_expression(fields: dict[str, Any]) -> dict[str, Any]:
    """Build SET expression kwargs for update_item from a partial record.

    None values are skipped. Attribute names go through placeholders so any
    name is written verbatim, including reserved words.
    """
    assignments: list[str] = []
    names: dict[str, str] = {}
    values: dict[str, Any] = {}

    for index, (name, value) in enumerate(fields.items()):
        if value is None:
            continue
        assignments.append(f"#f{index} = :v{index}")
        names[f"#f{index}"] = name
        values[f":v{index}"] = _serializer.serialize(_to_dynamo_value(value))

    return {
        "UpdateExpression": "SET " + ", ".join(assignments),
        "ExpressionAttributeNames": names,
        "ExpressionAttributeValues": values,
    }
