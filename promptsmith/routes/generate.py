"""
GENERATE ROUTE - Language-aware prompt generation

Forwards the user's input to the external AI gateway and returns the
generated prompt written in the same language as the input.

Upstream failures are mapped to their own status codes:
429 rate limited, 402 payment required, 500 anything else.
"""

from fastapi import APIRouter
from promptsmith.schemas import GenerateIn, PromptOut
from promptsmith.services.llm import generate_prompt
from promptsmith.utils import handle_service_errors, get_logger

logger = get_logger(__name__)

router = APIRouter()

@router.post("", response_model=PromptOut)
@handle_service_errors
def generate(payload: GenerateIn):
    """Generate a framework-shaped prompt through the AI gateway."""
    return PromptOut(prompt=generate_prompt(payload.input, payload.framework))
