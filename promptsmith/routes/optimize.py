"""
OPTIMIZE ROUTE - Prompt improvement suggestions

This endpoint rewrites a prompt by adding the pieces it is missing.

What it does:
1. Takes raw prompt text
2. Scores it with the optimizer's own, lighter rule set
3. Lists issues and the matching improvements
4. Returns a rewritten prompt (role prefix, instruction/context suffixes)
"""

from fastapi import APIRouter
from promptsmith.schemas import PromptIn, OptimizationReport
from promptsmith.services.optimizer import optimize as optimize_prompt
from promptsmith.utils import handle_service_errors, get_logger

logger = get_logger(__name__)

router = APIRouter()

@router.post("", response_model=OptimizationReport)
@handle_service_errors
def optimize(payload: PromptIn):
    """
    Generate an optimized version of a prompt.

    Input: prompt text (empty or whitespace-only -> 400 "Prompt required")
    Output: score (20-100), issues, improvements, optimized prompt
    """
    return optimize_prompt(payload.prompt)
