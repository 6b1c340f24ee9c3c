"""Amazon Bedrock access: single-shot model invocation and prompt flows."""

import json
import logging
from typing import Any

from core.config import Config

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are an expert fitness and nutrition coach. Always answer with a single "
    "JSON object that follows the requested structure."
)


def _is_nova(model_id: str) -> bool:
    # Cross-region inference profiles prefix the id, e.g. "us.amazon.nova-lite-v1:0"
    return "amazon.nova" in model_id


def build_request_body(model_id: str, prompt: str, max_tokens: int, temperature: float) -> dict[str, Any]:
    """Return the InvokeModel payload for the configured model family."""
    if _is_nova(model_id):
        return {
            "system": [{"text": SYSTEM_PROMPT}],
            "messages": [{"role": "user", "content": [{"text": prompt}]}],
            "inferenceConfig": {"maxTokens": max_tokens, "temperature": temperature},
        }
    return {
        "anthropic_version": "bedrock-2023-05-31",
        "system": SYSTEM_PROMPT,
        "max_tokens": max_tokens,
        "temperature": temperature,
        "messages": [{"role": "user", "content": [{"type": "text", "text": prompt}]}],
    }


def extract_text(body: dict[str, Any]) -> str:
    """Assistant reply text from a Nova or Claude response body, or ""."""
    # Amazon Nova
    for block in body.get("output", {}).get("message", {}).get("content", []):
        if isinstance(block, dict) and block.get("text"):
            return block["text"]

    # Anthropic Claude
    content = body.get("content")
    if isinstance(content, list):
        for block in content:
            if isinstance(block, dict) and block.get("text"):
                return block["text"]

    return ""


def invoke_model(prompt: str, bedrock_client: Any, config: Config) -> str:
    """Send one prompt to the configured model and return the reply text."""
    request_body = build_request_body(
        config.bedrock_model_id,
        prompt,
        config.bedrock_max_tokens,
        config.bedrock_temperature,
    )
    logger.debug("Invoking %s with %d-char prompt", config.bedrock_model_id, len(prompt))

    response = bedrock_client.invoke_model(
        modelId=config.bedrock_model_id,
        body=json.dumps(request_body),
        accept="application/json",
        contentType="application/json",
    )
    response_body = json.loads(response["body"].read())

    text = extract_text(response_body)
    if not text:
        logger.warning("Empty completion from %s: %s", config.bedrock_model_id, response_body)
    return text


def invoke_flow(document: Any, agent_client: Any, config: Config) -> Any:
    """Run the plan-generation prompt flow and return its output document.

    Only the last populated output document is kept. A flow with a single
    output node emits exactly one; if several arrive, earlier ones are
    dropped and a warning is logged.
    """
    response = agent_client.invoke_flow(
        flowIdentifier=config.require("flow_identifier"),
        flowAliasIdentifier=config.require("flow_alias_identifier"),
        inputs=[
            {
                "content": {"document": document},
                "nodeName": config.require("flow_start_node_name"),
                "nodeOutputName": config.require("flow_node_output_name"),
            }
        ],
    )

    result = None
    outputs_seen = 0
    for event in response.get("responseStream", []):
        output_document = event.get("flowOutputEvent", {}).get("content", {}).get("document")
        if output_document:
            outputs_seen += 1
            result = output_document
        elif "flowCompletionEvent" in event:
            logger.info("Flow completed: %s", event["flowCompletionEvent"].get("completionReason"))

    if outputs_seen > 1:
        logger.warning("Flow emitted %d output documents; keeping the last one", outputs_seen)
    return result
