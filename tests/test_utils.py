"""
Unit tests for utility functions.
"""

import json
import logging
import pytest
from fastapi import HTTPException
from promptsmith.exceptions import (
    EmptyPromptError,
    InvalidFieldError,
    PaymentRequiredError,
)
from promptsmith.utils import (
    JSONFormatter,
    calculate_overall_score,
    clamp,
    handle_service_errors,
    round_half_up,
    score_label,
    validate_prompt_text,
)

class TestValidation:
    """Test validation functions."""

    def test_validate_prompt_text_valid(self):
        assert validate_prompt_text("  keep me  ") == "  keep me  "

    def test_validate_prompt_text_empty(self):
        with pytest.raises(EmptyPromptError, match="Prompt required"):
            validate_prompt_text("")

    def test_validate_prompt_text_none(self):
        with pytest.raises(EmptyPromptError, match="Task required"):
            validate_prompt_text(None, "Task required")

    def test_empty_prompt_is_a_value_error(self):
        with pytest.raises(ValueError):
            validate_prompt_text(" ")

class TestScoreHelpers:
    """Test score helper functions."""

    def test_clamp(self):
        assert clamp(-5) == 0
        assert clamp(105) == 100
        assert clamp(10, 20, 100) == 20
        assert clamp(55) == 55

    def test_round_half_up(self):
        assert round_half_up(82.5) == 83
        assert round_half_up(60.5) == 61
        assert round_half_up(43.75) == 44
        assert round_half_up(43.25) == 43

    def test_calculate_overall_score(self):
        assert calculate_overall_score([80, 65, 90, 95]) == 83

    def test_calculate_overall_score_empty(self):
        assert calculate_overall_score([]) == 0

    @pytest.mark.parametrize("score,label", [
        (100, "Excellent"), (80, "Excellent"), (79, "Good"), (60, "Good"),
        (59, "Fair"), (40, "Fair"), (39, "Needs Improvement"), (0, "Needs Improvement"),
    ])
    def test_score_label(self, score, label):
        assert score_label(score) == label

class TestHandleServiceErrors:
    """Test the route error decorator."""

    def _raise(self, error):
        @handle_service_errors
        def route():
            raise error
        with pytest.raises(HTTPException) as exc:
            route()
        return exc.value

    def test_empty_prompt(self):
        exc = self._raise(EmptyPromptError("Subject required"))
        assert (exc.status_code, exc.detail) == (400, "Subject required")

    def test_invalid_field(self):
        assert self._raise(InvalidFieldError("bad ratio")).status_code == 422

    def test_generation_error(self):
        exc = self._raise(PaymentRequiredError())
        assert exc.status_code == 402
        assert exc.detail == "Payment required. Please add credits to your workspace."

    def test_unexpected_error(self):
        exc = self._raise(RuntimeError("boom"))
        assert (exc.status_code, exc.detail) == (500, "Internal server error")

    def test_passes_through_result(self):
        @handle_service_errors
        def route(value):
            return value * 2
        assert route(21) == 42

class TestJSONFormatter:
    """Test structured log formatting."""

    def test_format(self):
        record = logging.LogRecord("promptsmith.test", logging.INFO, __file__, 10, "scored %s", (83,), None)
        entry = json.loads(JSONFormatter().format(record))
        assert entry["level"] == "INFO"
        assert entry["logger"] == "promptsmith.test"
        assert entry["message"] == "scored 83"
