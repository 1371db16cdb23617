"""
ANALYZE ROUTE - Prompt quality checker

This is the main endpoint of the quality checker: send a prompt, get back
four dimension scores, an overall score and categorized feedback.

What it does:
1. Takes raw prompt text
2. Extracts lexical signals (role, context, instructions, format, examples)
3. Scores clarity, specificity, structure and effectiveness (0-100)
4. Returns strengths, warnings and suggestions

Nothing is stored; the same prompt always gets the same report.
"""

from fastapi import APIRouter
from promptsmith.schemas import PromptIn, AnalysisReport
from promptsmith.services.scoring import analyze as analyze_prompt
from promptsmith.utils import handle_service_errors, get_logger

logger = get_logger(__name__)

router = APIRouter()

@router.post("", response_model=AnalysisReport)
@handle_service_errors
def analyze(payload: PromptIn):
    """
    Analyze a prompt and return its quality report.

    Input: prompt text (empty or whitespace-only -> 400 "Prompt required")
    Output: overall score, dimension scores, label, feedback lists, signals
    """
    return analyze_prompt(payload.prompt)
