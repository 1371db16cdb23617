"""
LLM SERVICE - Language-aware prompt generation through an AI gateway

This service handles the only network call in PromptSmith:
1. Builds a system instruction from the selected framework
2. Sends it with the user's input to an OpenAI-compatible chat endpoint
3. Returns the generated prompt as opaque text

Key features:
- Lazy client initialization so the app starts without a key
- Timeout protection, no automatic retries
- Upstream failures classified into rate-limited / payment-required / generic
"""

from typing import Optional
from openai import OpenAI, APIError, APIStatusError
from promptsmith import config
from promptsmith.exceptions import (
    PaymentRequiredError,
    RateLimitedError,
    UpstreamError,
)
from promptsmith.services.frameworks import resolve_framework
from promptsmith.utils import get_logger, validate_prompt_text

logger = get_logger(__name__)

SYSTEM_INSTRUCTION = """You are an expert AI prompt engineer. Your task is to:
1. Detect the language of the user's input
2. Generate a high-quality AI prompt using the {guide} framework
3. Write the ENTIRE prompt in the SAME LANGUAGE as the user's input

CRITICAL: The entire prompt must be in the same language as the user's input. If they write in Hindi, generate in Hindi. If in Gujarati, generate in Gujarati. If in English, generate in English.

Framework: {framework}

Generate a comprehensive, well-structured prompt that follows the framework and is completely in the detected language."""

_client = None
def _get_client() -> OpenAI:
    """
    Get the gateway client with lazy initialization.

    Raises UpstreamError when no API key is configured.
    """
    global _client
    if _client is not None:
        return _client
    api_key = config.get_gateway_api_key()
    if not api_key:
        raise UpstreamError("AI gateway API key is not configured")
    _client = OpenAI(
        api_key=api_key,
        base_url=config.AI_GATEWAY_BASE_URL,
        timeout=config.GENERATION_TIMEOUT,
        max_retries=0,
    )
    return _client

def build_system_instruction(framework: str) -> str:
    """System instruction for the framework; unknown ids use the standard guide."""
    selected, _ = resolve_framework(framework)
    return SYSTEM_INSTRUCTION.format(guide=selected.guide, framework=framework)

def classify_status_error(error: APIStatusError):
    """Map an upstream HTTP error to the matching GenerationError."""
    if error.status_code == 429:
        return RateLimitedError()
    if error.status_code == 402:
        return PaymentRequiredError()
    return UpstreamError()

def generate_prompt(user_input: str, framework: str = "standard", model: Optional[str] = None) -> str:
    """
    Generate a prompt in the same language as the user's input.

    Input: free-text description of what the prompt should do, framework id
    Output: generated prompt text

    Raises EmptyPromptError for blank input and a GenerationError subclass for
    any upstream failure. Never retries.
    """
    validate_prompt_text(user_input, "Input required")
    client = _get_client()

    try:
        out = client.chat.completions.create(
            model=model or config.AI_GATEWAY_MODEL,
            messages=[{"role": "system", "content": build_system_instruction(framework)},
                      {"role": "user", "content": user_input}],
        )
    except APIStatusError as e:
        logger.error(f"AI gateway error: {e.status_code} {e.message}")
        raise classify_status_error(e) from e
    except APIError as e:
        # Connection failures and timeouts land here
        logger.error(f"AI gateway unreachable: {type(e).__name__}")
        raise UpstreamError() from e

    content = (out.choices[0].message.content or "").strip() if out.choices else ""
    if not content:
        raise UpstreamError()
    return content
