"""
OPTIMIZER SERVICE - Rule-driven prompt rewriting

The optimizer is a lighter sibling of the quality checker:
1. Scores the prompt from a baseline of 60 using five checks
2. Lists issues and matching improvements
3. Produces a rewritten prompt by prefixing/suffixing remediating phrases

Its thresholds deliberately differ from scoring.py (context means length > 100
characters only, instruction cues exclude "ensure", floor is 20 not 0).
Keep the two rule sets separate; unifying them changes behaviour.
"""

from typing import List
from promptsmith.schemas import OptimizationReport
from promptsmith.services.signals import ROLE_CUES, contains_any, count_words
from promptsmith.utils import Constants, clamp, get_logger, validate_prompt_text

logger = get_logger(__name__)

BASELINE_SCORE = 60
CONTEXT_LENGTH_THRESHOLD = 100
INSTRUCTION_CUES = ("please", "make sure")
BRIEF_WORD_LIMIT = 10
LENGTHY_WORD_LIMIT = 200
CONTEXT_SUFFIX_WORD_LIMIT = 50

ROLE_PREFIX = "You are an expert assistant. "
INSTRUCTION_SUFFIX = " Please provide a comprehensive response with clear explanations and examples where relevant."
CONTEXT_SUFFIX = " Consider the context and provide practical, actionable advice."

def rewrite_prompt(prompt: str, has_role: bool, has_instructions: bool, has_context: bool, word_count: int) -> str:
    """Insert the remediating phrases; the original wording is kept verbatim."""
    optimized = prompt
    if not has_role:
        optimized = ROLE_PREFIX + optimized
    if not has_instructions:
        optimized += INSTRUCTION_SUFFIX
    if not has_context and word_count < CONTEXT_SUFFIX_WORD_LIMIT:
        optimized += CONTEXT_SUFFIX
    return optimized

def optimize(prompt: str) -> OptimizationReport:
    """
    Score a prompt, list its issues and return a rewritten version.

    Raises EmptyPromptError for empty or whitespace-only text; total otherwise.
    """
    validate_prompt_text(prompt)

    word_count = count_words(prompt)
    has_role = contains_any(prompt, ROLE_CUES)
    has_context = len(prompt) > CONTEXT_LENGTH_THRESHOLD
    has_instructions = contains_any(prompt, INSTRUCTION_CUES)

    issues: List[str] = []
    improvements: List[str] = []
    score = BASELINE_SCORE

    # STEP 1: Role definition
    if has_role:
        score += 10
    else:
        issues.append("Missing clear role definition")
        improvements.append("Add a specific role or persona for the AI")
        score -= 15

    # STEP 2: Context (by length only)
    if has_context:
        score += 10
    else:
        issues.append("Insufficient context provided")
        improvements.append("Add more background information and context")
        score -= 10

    # STEP 3: Explicit instructions
    if has_instructions:
        score += 10
    else:
        issues.append("Instructions could be more specific")
        improvements.append("Include specific output format requirements")
        score -= 10

    # STEP 4: Length
    if word_count < BRIEF_WORD_LIMIT:
        issues.append("Prompt is too brief")
        improvements.append("Expand with more detailed requirements")
        score -= 15

    if word_count > LENGTHY_WORD_LIMIT:
        issues.append("Prompt might be too lengthy")
        improvements.append("Consider breaking into smaller, focused prompts")
        score -= 5

    score = clamp(score, Constants.MIN_OPTIMIZER_SCORE, Constants.MAX_SCORE)
    logger.debug(f"Optimized prompt ({word_count} words): score={score}, issues={len(issues)}")

    return OptimizationReport(
        score=score,
        issues=issues,
        improvements=improvements,
        optimized_prompt=rewrite_prompt(prompt, has_role, has_instructions, has_context, word_count),
    )
