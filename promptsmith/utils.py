"""
UTILITIES - Shared functions and decorators

This module provides common utilities used across the application:
1. Structured JSON logging
2. Service error handling decorator for routes
3. Prompt validation helpers
4. Score helpers (clamping, rounding, labels)
5. Constants and configuration defaults
"""

import logging
import json
import math
from functools import wraps
from typing import Callable, Iterable, Optional
from datetime import datetime, timezone
from fastapi import HTTPException
from promptsmith.exceptions import (
    EmptyPromptError,
    InvalidFieldError,
    GenerationError,
)

class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry)

def setup_logging(level: int = logging.INFO):
    """Setup structured JSON logging on the root logger (idempotent)."""
    logger = logging.getLogger()
    logger.setLevel(level)
    if any(isinstance(h.formatter, JSONFormatter) for h in logger.handlers):
        return

    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)

setup_logging()

def get_logger(name: str) -> logging.Logger:
    """Get a configured logger instance with consistent formatting."""
    return logging.getLogger(name)

def handle_service_errors(func: Callable) -> Callable:
    """
    Decorator to turn domain errors into HTTP errors consistently across routes.

    Usage:
    @router.post("")
    @handle_service_errors
    def my_route(payload: PromptIn):
        # Your route logic here
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except EmptyPromptError as e:
            raise HTTPException(status_code=400, detail=e.message)
        except InvalidFieldError as e:
            raise HTTPException(status_code=422, detail=str(e))
        except GenerationError as e:
            logger = get_logger(func.__module__)
            logger.warning(f"Generation failed in {func.__name__}: {type(e).__name__}")
            raise HTTPException(status_code=e.status_code, detail=e.message)
        except HTTPException:
            raise
        except Exception as e:
            logger = get_logger(func.__module__)
            logger.error(f"Unexpected error in {func.__name__}: {format_error_message(e)}")
            raise HTTPException(status_code=500, detail="Internal server error")
    return wrapper

# Constants
class Constants:
    """Application constants in one place."""

    # Rate limiting
    DEFAULT_RATE_LIMIT = 100  # requests per window
    RATE_LIMIT_WINDOW = 60  # seconds

    # Validation limits (enforced by the API schemas only, never by the engines)
    MAX_PROMPT_LENGTH = 10000
    MAX_FIELD_LENGTH = 2000
    MAX_RENDER_FIELDS = 16

    # Score ranges
    MIN_SCORE = 0
    MAX_SCORE = 100
    MIN_OPTIMIZER_SCORE = 20

    # Generation gateway
    DEFAULT_GATEWAY_BASE_URL = "https://ai.gateway.lovable.dev/v1"
    DEFAULT_GATEWAY_MODEL = "google/gemini-2.5-flash"
    DEFAULT_TIMEOUT = 30

# Validation helpers
def validate_prompt_text(text: Optional[str], message: str = "Prompt required") -> str:
    """Reject empty or whitespace-only text; the text itself is returned untouched."""
    if not text or not text.strip():
        raise EmptyPromptError(message)
    return text

def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()

# Score helpers
def clamp(value: int, low: int = Constants.MIN_SCORE, high: int = Constants.MAX_SCORE) -> int:
    """Clamp a score into [low, high]."""
    return max(low, min(high, value))

def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive scores (Python's round() is banker's rounding)."""
    return int(math.floor(value + 0.5))

def calculate_overall_score(scores: Iterable[int]) -> int:
    """Rounded mean of the dimension scores."""
    scores = list(scores)
    if not scores:
        return 0
    return round_half_up(sum(scores) / len(scores))

def score_label(score: int) -> str:
    """Human label for a 0-100 score."""
    if score >= 80:
        return "Excellent"
    if score >= 60:
        return "Good"
    if score >= 40:
        return "Fair"
    return "Needs Improvement"

def format_error_message(error: Exception) -> str:
    """Format error message for logging."""
    return f"{type(error).__name__}: {str(error)}"
