"""Unit tests for JSON extraction from model output."""

from unittest.mock import patch

import pytest

from core.errors import ExtractionError
from core.services.extraction import extract_json_object


def test_plain_json():
    assert extract_json_object('{"title": "Plan"}') == {"title": "Plan"}


def test_json_inside_fence_with_prose():
    text = 'Here is your plan:\n```json\n{"title": "Plan", "exercises": [{"name": "Squat"}]}\n```\nEnjoy!'
    assert extract_json_object(text) == {"title": "Plan", "exercises": [{"name": "Squat"}]}


def test_skips_braces_that_are_not_json():
    text = 'Use {sets} x {reps} notation. {"title": "Real"}'
    assert extract_json_object(text) == {"title": "Real"}


def test_returns_first_valid_object():
    assert extract_json_object('{"a": 1} and {"b": 2}') == {"a": 1}


def test_no_json_raises():
    with pytest.raises(ExtractionError):
        extract_json_object("I cannot help with that.")


def test_empty_text_raises():
    with pytest.raises(ExtractionError):
        extract_json_object("")


def test_array_only_raises():
    with pytest.raises(ExtractionError):
        extract_json_object('[1, 2, 3]')


def test_gives_up_after_max_start_attempts():
    text = "{ " * 3 + '{"title": "Late"}'
    with patch("core.services.extraction.MAX_START_ATTEMPTS", 3):
        with pytest.raises(ExtractionError):
            extract_json_object(text)
    with patch("core.services.extraction.MAX_START_ATTEMPTS", 4):
        assert extract_json_object(text) == {"title": "Late"}
