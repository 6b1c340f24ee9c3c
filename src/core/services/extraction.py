"""Pull a JSON object out of free-form model output."""

import json
import logging
from typing import Any

from core.errors import ExtractionError

logger = logging.getLogger(__name__)

_decoder = json.JSONDecoder()

# Each failed candidate can scan to the end of the text
MAX_START_ATTEMPTS = 200


def extract_json_object(text: str) -> dict[str, Any]:
    """Return the first syntactically valid JSON object embedded in text.

    Models wrap their answer in prose or ```json fences; every `{` is tried as
    a start position until one decodes to an object, giving up after
    MAX_START_ATTEMPTS candidates.
    """
    attempts = 0
    start = text.find("{") if text else -1
    while start != -1 and attempts < MAX_START_ATTEMPTS:
        attempts += 1
        try:
            value, _ = _decoder.raw_decode(text, start)
        except json.JSONDecodeError:
            value = None
        if isinstance(value, dict):
            return value
        start = text.find("{", start + 1)

    logger.warning("No JSON object found in model response (%d chars, %d candidates)", len(text or ""), attempts)
    raise ExtractionError("No JSON found in response")
